"""
AssetId Codec — Разбор строк, контрольная сумма, checked asset id

Конвейер:
    str → AssetId → Checksum → CheckedAssetId

Каждая операция возвращает Outcome. Разбор строгий: без trim, без знака,
без частичного успеха — первый недопустимый символ прерывает разбор.
"""

from src.core.domain.asset_id import (
    ASSET_ID_LENGTH,
    CHECKSUM_BASE,
    AssetId,
    CheckedAssetId,
    Checksum,
    digits_to_string,
)
from src.core.domain.digit import DIGIT_BASE, Digit
from src.core.domain.outcome import ErrorKind, Outcome
from src.core.math.checksum import checksum_value, split_checksum


# =============================================================================
# PARSING
# =============================================================================


def parse_asset_id(id_str: str) -> Outcome[AssetId]:
    """
    Разбор строки в AssetId.

    Args:
        id_str: Ровно ASSET_ID_LENGTH ASCII цифр

    Returns:
        Outcome с AssetId или MALFORMED_ASSET_ID
        (reason: not_a_string / wrong_length / invalid_character)
    """
    if not isinstance(id_str, str):
        return Outcome.failure(
            ErrorKind.MALFORMED_ASSET_ID,
            reason="not_a_string",
            details=f"Asset id must be a string, got {id_str!r}",
        )

    if len(id_str) != ASSET_ID_LENGTH:
        return Outcome.failure(
            ErrorKind.MALFORMED_ASSET_ID,
            reason="wrong_length",
            details=f"Asset id {id_str!r} has length {len(id_str)}, expected {ASSET_ID_LENGTH}",
        )

    digits = []
    for position, character in enumerate(id_str):
        maybe_digit = Digit.from_char(character)
        if not maybe_digit.ok:
            return Outcome.failure(
                ErrorKind.MALFORMED_ASSET_ID,
                reason="invalid_character",
                details=(
                    f"Asset id {id_str!r} has unsupported character "
                    f"{character!r} at position {position}"
                ),
            )
        digits.append(maybe_digit.value)

    return Outcome.success(AssetId(digits=tuple(digits)))


def asset_id_to_string(asset_id: AssetId) -> str:
    """Обратное преобразование: AssetId → строка из ASSET_ID_LENGTH цифр."""
    return digits_to_string(asset_id.digits)


# =============================================================================
# CHECKSUM
# =============================================================================


def calculate_checksum(
    asset_id: AssetId,
    digit_base: int = DIGIT_BASE,
    checksum_base: int = CHECKSUM_BASE,
) -> Outcome[Checksum]:
    """
    Контрольная сумма asset id.

    Вес первой (старшей) цифры — 1, каждой следующей — в digit_base раз больше.
    Это обратный порядок относительно позиционного значения; сохраняется
    намеренно (см. src.core.math.checksum).

    Args:
        asset_id: Идентификатор
        digit_base: Множитель веса между соседними цифрами
        checksum_base: Модуль контрольной суммы

    Returns:
        Outcome с Checksum [high, low] или CHECKSUM_OVERFLOW, если значение
        не представимо двумя цифрами (возможно только при checksum_base > digit_base^2
        или digit_base > DIGIT_BASE)

    Raises:
        ValueError: Если digit_base < 2 или checksum_base < 1
    """
    digit_sum = checksum_value(
        (digit.value for digit in asset_id.digits), digit_base, checksum_base
    )
    high, low = split_checksum(digit_sum, digit_base)

    hi_digit = Digit.from_int(high)
    lo_digit = Digit.from_int(low)
    if not hi_digit.ok or not lo_digit.ok:
        return Outcome.failure(
            ErrorKind.CHECKSUM_OVERFLOW,
            reason="unrepresentable_checksum",
            details=(
                f"Checksum {digit_sum} of {asset_id} cannot be represented as "
                f"two base-{DIGIT_BASE} digits (digit_base={digit_base}, "
                f"checksum_base={checksum_base})"
            ),
        )

    return Outcome.success(Checksum(digits=(hi_digit.value, lo_digit.value)))


def create_checked_asset_id(asset_id: AssetId) -> Outcome[CheckedAssetId]:
    """
    CheckedAssetId = цифры контрольной суммы (DIGIT_BASE, CHECKSUM_BASE) ++ asset id.

    Returns:
        Outcome с CheckedAssetId или CHECKSUM_OVERFLOW
    """
    checksum = calculate_checksum(asset_id, DIGIT_BASE, CHECKSUM_BASE)
    if not checksum.ok:
        return checksum.propagate()

    return Outcome.success(
        CheckedAssetId(digits=checksum.value.digits + asset_id.digits)
    )
