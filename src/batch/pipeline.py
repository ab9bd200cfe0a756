"""
Batch Pipeline — Обработка списка идентификаторов

Для каждой записи:
    parse → checked asset id → render line → write png

Записи обрабатываются независимо: ошибка одной записи не прерывает пакет.
Для неудачной записи файл не создаётся.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from src.core.codec.asset_id_codec import create_checked_asset_id, parse_asset_id
from src.core.domain.outcome import ErrorKind, Outcome
from src.render.image_line import DEFAULT_START_OFFSET, render_line
from src.render.png_writer import PNG_EXTENSION, write_line_png

from .report import BatchReport, FailureRecord


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BatchConfig:
    """Конфигурация пакетной обработки."""

    # Байт строки для первой цифры
    start_offset: int = DEFAULT_START_OFFSET

    # Инверсия битов при записи PNG
    invert_mono: bool = True

    image_extension: str = PNG_EXTENSION


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RecordResult:
    """Результат обработки одной записи."""

    identifier: str
    ok: bool
    output_path: Optional[Path]

    # Причина отказа
    error: Optional[ErrorKind]
    reason: str

    # Детали
    details: str


def _failed(identifier: str, outcome: Outcome) -> RecordResult:
    return RecordResult(
        identifier=identifier,
        ok=False,
        output_path=None,
        error=outcome.error,
        reason=outcome.reason,
        details=outcome.details,
    )


# =============================================================================
# PIPELINE
# =============================================================================


def process_identifier(
    id_string: str,
    output_dir: Union[str, Path],
    config: Optional[BatchConfig] = None,
) -> RecordResult:
    """
    Обработка одного идентификатора.

    Args:
        id_string: Строка идентификатора (без перевода строки)
        output_dir: Каталог для PNG файла
        config: Конфигурация (опционально, используется default)

    Returns:
        RecordResult; при успехе output_path = output_dir / "<id_string><ext>"
    """
    config = config or BatchConfig()

    asset_id = parse_asset_id(id_string)
    if not asset_id.ok:
        return _failed(id_string, asset_id)

    checked_id = create_checked_asset_id(asset_id.value)
    if not checked_id.ok:
        return _failed(id_string, checked_id)

    line = render_line(checked_id.value, config.start_offset)
    if not line.ok:
        return _failed(id_string, line)

    destination = Path(output_dir) / f"{id_string}{config.image_extension}"
    written = write_line_png(line.value, destination, invert_mono=config.invert_mono)
    if not written.ok:
        return _failed(id_string, written)

    return RecordResult(
        identifier=id_string,
        ok=True,
        output_path=written.value,
        error=None,
        reason="",
        details=f"checked id {checked_id.value}",
    )


def display_identifier(id_string: str) -> str:
    """
    Печатаемая форма идентификатора.

    Байты, не декодированные из UTF-8 (surrogateescape), показываются как \\xNN,
    остальные символы остаются без изменений.
    """
    return id_string.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def _strip_line_terminator(line: str) -> str:
    # Только перевод строки; пробелы остаются частью идентификатора
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def run_batch(
    lines: Iterable[str],
    output_dir: Union[str, Path],
    config: Optional[BatchConfig] = None,
) -> BatchReport:
    """
    Пакетная обработка идентификаторов (по одному на строку).

    Args:
        lines: Строки входного файла
        output_dir: Каталог для PNG файлов
        config: Конфигурация (опционально)

    Returns:
        BatchReport со списком успешных и неудачных записей
    """
    config = config or BatchConfig()

    total = 0
    succeeded = []
    failures = []

    for raw_line in lines:
        id_string = _strip_line_terminator(raw_line)
        total += 1

        result = process_identifier(id_string, output_dir, config)
        if result.ok:
            logger.debug("Wrote %s (%s)", result.output_path, result.details)
            succeeded.append(result.identifier)
            continue

        logger.warning(
            "Skipping id '%s': %s (%s) %s",
            display_identifier(id_string),
            result.error.value,
            result.reason,
            result.details,
        )
        failures.append(
            FailureRecord(
                identifier=display_identifier(result.identifier),
                error=result.error,
                reason=result.reason,
                details=result.details,
            )
        )

    logger.info("Processed %d ids: %d written, %d failed", total, len(succeeded), len(failures))

    return BatchReport(total=total, succeeded=succeeded, failures=failures)
