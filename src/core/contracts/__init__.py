"""
Contract Validation Module

Модуль для валидации JSON контрактов (batch report).
"""

from .validators import (
    BatchReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_batch_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BatchReportValidator",
    # Functions
    "validate_batch_report",
]
