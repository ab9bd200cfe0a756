"""Render — растровая строка 7-сегментного дисплея и её запись в PNG.

- image_line: шаблоны сегментов и PixelLine
- png_writer: сохранение PixelLine (Pillow)
"""

from .image_line import (
    DEFAULT_START_OFFSET,
    IMAGE_LINE_NUM_BYTES,
    IMAGE_LINE_WIDTH_PIXELS,
    PIXEL_PATTERNS,
    PixelLine,
    digit_to_pixel_pattern,
    render_line,
)
from .png_writer import PNG_EXTENSION, read_line_png, write_line_png

__all__ = [
    "DEFAULT_START_OFFSET",
    "IMAGE_LINE_NUM_BYTES",
    "IMAGE_LINE_WIDTH_PIXELS",
    "PIXEL_PATTERNS",
    "PixelLine",
    "digit_to_pixel_pattern",
    "render_line",
    "PNG_EXTENSION",
    "read_line_png",
    "write_line_png",
]
