"""Batch — пакетная обработка идентификаторов с отчётом об ошибках."""

from .pipeline import (
    BatchConfig,
    RecordResult,
    display_identifier,
    process_identifier,
    run_batch,
)
from .report import BatchReport, FailureRecord

__all__ = [
    "BatchConfig",
    "RecordResult",
    "display_identifier",
    "process_identifier",
    "run_batch",
    "BatchReport",
    "FailureRecord",
]
