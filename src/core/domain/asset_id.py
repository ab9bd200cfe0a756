"""
AssetId — Идентификатор актива и его контрольная сумма

Immutable Pydantic модели фиксированной длины (big-endian, старшая цифра первой):
- AssetId:        4 цифры
- Checksum:       2 цифры, значение в [0, CHECKSUM_BASE)
- CheckedAssetId: 6 цифр = Checksum ++ AssetId

Длина закреплена типом поля (tuple фиксированной длины), поэтому модель
с неверным количеством цифр создать нельзя.
"""

from typing import Final, Tuple

from pydantic import BaseModel, Field, model_validator

from src.core.math.checksum import checksum_value

from .digit import DIGIT_BASE, Digit


# =============================================================================
# CONSTANTS
# =============================================================================

ASSET_ID_LENGTH: Final[int] = 4
CHECKSUM_LENGTH: Final[int] = 2
CHECKED_ASSET_ID_LENGTH: Final[int] = ASSET_ID_LENGTH + CHECKSUM_LENGTH

# Модуль контрольной суммы
CHECKSUM_BASE: Final[int] = 97


# =============================================================================
# HELPERS
# =============================================================================


def digits_to_int(digits: Tuple[Digit, ...]) -> int:
    """Big-endian значение последовательности цифр."""
    result = 0
    for digit in digits:
        result = result * DIGIT_BASE + digit.value
    return result


def digits_to_string(digits: Tuple[Digit, ...]) -> str:
    """Строковое представление без потери ведущих нулей."""
    return "".join(str(digit.value) for digit in digits)


class _DigitSequence(BaseModel):
    """Общее поведение последовательностей цифр."""

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.digits)

    def __iter__(self):
        return iter(self.digits)

    def __getitem__(self, index):
        return self.digits[index]

    def __str__(self) -> str:
        return digits_to_string(self.digits)

    def as_int(self) -> int:
        return digits_to_int(self.digits)


# =============================================================================
# MODELS
# =============================================================================


class AssetId(_DigitSequence):
    """Идентификатор актива: ровно ASSET_ID_LENGTH цифр."""

    digits: Tuple[Digit, Digit, Digit, Digit] = Field(..., description="Цифры (big-endian)")


class Checksum(_DigitSequence):
    """Контрольная сумма: ровно CHECKSUM_LENGTH цифр."""

    digits: Tuple[Digit, Digit] = Field(..., description="Цифры (big-endian)")


class CheckedAssetId(_DigitSequence):
    """
    Идентификатор с контрольной суммой: Checksum ++ AssetId.

    Инвариант: первые CHECKSUM_LENGTH цифр — контрольная сумма остальных
    (параметры DIGIT_BASE, CHECKSUM_BASE).
    """

    digits: Tuple[Digit, Digit, Digit, Digit, Digit, Digit] = Field(
        ..., description="Цифры checksum, затем asset id (big-endian)"
    )

    @model_validator(mode="after")
    def validate_checksum_prefix(self) -> "CheckedAssetId":
        """Проверка, что префикс совпадает с контрольной суммой asset id"""
        id_values = [digit.value for digit in self.digits[CHECKSUM_LENGTH:]]
        expected = checksum_value(id_values, DIGIT_BASE, CHECKSUM_BASE)
        actual = digits_to_int(self.digits[:CHECKSUM_LENGTH])
        if actual != expected:
            raise ValueError(
                f"checksum prefix {actual} does not match asset id checksum {expected}"
            )
        return self

    @property
    def checksum(self) -> Checksum:
        return Checksum(digits=self.digits[:CHECKSUM_LENGTH])

    @property
    def asset_id(self) -> AssetId:
        return AssetId(digits=self.digits[CHECKSUM_LENGTH:])
