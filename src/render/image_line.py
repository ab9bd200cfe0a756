"""
Image Line — Растровая строка для 7-сегментного дисплея

Каждая цифра отображается в фиксированный 8-битный шаблон сегментов.
Шаблоны CheckedAssetId записываются в буфер фиксированного размера
(IMAGE_LINE_NUM_BYTES байт = IMAGE_LINE_WIDTH_PIXELS монохромных пикселей),
по одной цифре на байт, начиная с байта start_offset.

ВАЖНО: порядок битов в шаблоне обратный обычному.
Бит 0 протокола соответствует старшему биту байта (0b10000000), бит 7 младшему.
Бит 4 протокола (0b00001000) всегда сброшен.
"""

from typing import Final, Tuple

from pydantic import BaseModel, Field

from src.core.domain.asset_id import CheckedAssetId
from src.core.domain.digit import DIGIT_BASE, Digit
from src.core.domain.outcome import ErrorKind, Outcome


# =============================================================================
# CONSTANTS
# =============================================================================

IMAGE_LINE_WIDTH_PIXELS: Final[int] = 256
IMAGE_LINE_NUM_BYTES: Final[int] = IMAGE_LINE_WIDTH_PIXELS // 8

# Первый байт строки остаётся пустым
DEFAULT_START_OFFSET: Final[int] = 1

# Шаблоны сегментов для цифр 0..9 (индекс = значение цифры)
PIXEL_PATTERNS: Final[Tuple[int, ...]] = (
    0b01110111,  # 0
    0b01000010,  # 1
    0b10110110,  # 2
    0b11010110,  # 3
    0b11000011,  # 4
    0b11010101,  # 5
    0b11110101,  # 6
    0b01000110,  # 7
    0b11110111,  # 8
    0b11010111,  # 9
)


# =============================================================================
# PIXEL LINE MODEL
# =============================================================================


class PixelLine(BaseModel):
    """
    Строка пикселей: ровно IMAGE_LINE_NUM_BYTES байт.

    Каждый байт: группа из 8 монохромных пикселей.
    """

    data: bytes = Field(
        ...,
        min_length=IMAGE_LINE_NUM_BYTES,
        max_length=IMAGE_LINE_NUM_BYTES,
        description="Пиксели строки (8 пикселей на байт)",
    )

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __bytes__(self) -> bytes:
        return self.data


# =============================================================================
# RENDERING
# =============================================================================


def digit_to_pixel_pattern(digit: Digit) -> Outcome[int]:
    """
    Шаблон сегментов для цифры.

    Args:
        digit: Цифра

    Returns:
        Outcome с байтом шаблона или UNMAPPED_DIGIT (только для цифры,
        созданной в обход валидации)
    """
    if not 0 <= digit.value < DIGIT_BASE:
        return Outcome.failure(
            ErrorKind.UNMAPPED_DIGIT,
            reason="no_pattern",
            details=f"No pixel pattern for digit value {digit.value}",
        )

    return Outcome.success(PIXEL_PATTERNS[digit.value])


def render_line(
    checked_asset_id: CheckedAssetId,
    start_offset: int = DEFAULT_START_OFFSET,
) -> Outcome[PixelLine]:
    """
    Растровая строка для CheckedAssetId.

    Шаблоны пишутся побайтно в [start_offset, start_offset + len); все
    остальные байты равны 0. Сдвиг внутри байта не поддерживается.

    Args:
        checked_asset_id: Цифры контрольной суммы и идентификатора
        start_offset: Индекс байта для первой цифры

    Returns:
        Outcome с PixelLine или RENDER_OVERFLOW (без частичной записи)
    """
    end = start_offset + len(checked_asset_id)
    if start_offset < 0 or end > IMAGE_LINE_NUM_BYTES:
        return Outcome.failure(
            ErrorKind.RENDER_OVERFLOW,
            reason="out_of_bounds",
            details=(
                f"Cannot embed {len(checked_asset_id)} digits at offset {start_offset} "
                f"into {IMAGE_LINE_NUM_BYTES}-byte line"
            ),
        )

    buffer = bytearray(IMAGE_LINE_NUM_BYTES)
    for index, digit in enumerate(checked_asset_id):
        pattern = digit_to_pixel_pattern(digit)
        if not pattern.ok:
            return pattern.propagate()
        buffer[start_offset + index] = pattern.value

    return Outcome.success(PixelLine(data=bytes(buffer)))
