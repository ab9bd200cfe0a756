"""
PNG Writer — Сохранение PixelLine в PNG (Pillow)

Строка сохраняется как изображение IMAGE_LINE_WIDTH_PIXELS × 1,
1 бит на пиксель, grayscale (Pillow mode "1").

Pillow трактует установленный бит как белый пиксель. Для дисплея
установленный бит сегмента должен быть тёмным, поэтому по умолчанию
буфер инвертируется перед записью (аналог libpng invert_mono).
"""

import logging
from pathlib import Path
from typing import Final, Union

from PIL import Image

from src.core.domain.outcome import ErrorKind, Outcome

from .image_line import IMAGE_LINE_NUM_BYTES, IMAGE_LINE_WIDTH_PIXELS, PixelLine


logger = logging.getLogger(__name__)

PNG_EXTENSION: Final[str] = ".png"

# Высота растра (одна строка)
IMAGE_LINE_HEIGHT_PIXELS: Final[int] = 1


def _invert(data: bytes) -> bytes:
    return bytes(byte ^ 0xFF for byte in data)


def write_line_png(
    line: PixelLine,
    destination: Union[str, Path],
    invert_mono: bool = True,
) -> Outcome[Path]:
    """
    Запись строки пикселей в PNG файл.

    Args:
        line: Готовая строка пикселей
        destination: Путь к файлу (расширение должно быть .png)
        invert_mono: Инвертировать биты перед записью

    Returns:
        Outcome с путём к файлу или EMIT_FAILED
        (reason: bad_extension / io_error). При ошибке destination не меняется.
    """
    destination = Path(destination)

    if destination.suffix != PNG_EXTENSION:
        return Outcome.failure(
            ErrorKind.EMIT_FAILED,
            reason="bad_extension",
            details=f"Output must be a png file: {destination}",
        )

    data = _invert(line.data) if invert_mono else line.data
    image = Image.frombytes(
        "1", (IMAGE_LINE_WIDTH_PIXELS, IMAGE_LINE_HEIGHT_PIXELS), data
    )

    # destination меняется только после успешной записи staging файла
    staging = destination.with_name(f".{destination.name}.tmp")
    try:
        image.save(staging, format="PNG")
        staging.replace(destination)
    except OSError as e:
        logger.debug("Removing incomplete output %s", staging)
        try:
            staging.unlink(missing_ok=True)
        except OSError:
            logger.warning("Failed to remove incomplete output %s", staging)
        return Outcome.failure(
            ErrorKind.EMIT_FAILED,
            reason="io_error",
            details=f"Failed to write {destination}: {e}",
        )

    return Outcome.success(destination)


def read_line_png(source: Union[str, Path], invert_mono: bool = True) -> bytes:
    """
    Чтение строки пикселей из PNG, записанного write_line_png.

    Args:
        source: Путь к PNG файлу
        invert_mono: Инвертировать биты после чтения (как при записи)

    Returns:
        IMAGE_LINE_NUM_BYTES байт строки

    Raises:
        ValueError: Если размер изображения не соответствует строке
    """
    with Image.open(source) as image:
        if image.size != (IMAGE_LINE_WIDTH_PIXELS, IMAGE_LINE_HEIGHT_PIXELS):
            raise ValueError(
                f"Unexpected image size {image.size}, expected "
                f"{(IMAGE_LINE_WIDTH_PIXELS, IMAGE_LINE_HEIGHT_PIXELS)}"
            )
        data = image.convert("1").tobytes()

    if len(data) != IMAGE_LINE_NUM_BYTES:
        raise ValueError(f"Unexpected line length {len(data)}")

    return _invert(data) if invert_mono else data
