"""
BatchReport — Итог обработки списка идентификаторов

Immutable Pydantic модель. Сериализуется в JSON, совместимый со схемой
batch_report (src/core/contracts/schema/batch_report.json).
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from src.core.domain.outcome import ErrorKind


class FailureRecord(BaseModel):
    """Неудачная запись входного файла."""

    identifier: str = Field(..., description="Исходная строка идентификатора")
    error: ErrorKind = Field(..., description="Вид ошибки")
    reason: str = Field(..., description="Машинный код причины")
    details: str = Field("", description="Детали для диагностики")

    model_config = {"frozen": True}


class BatchReport(BaseModel):
    """Итог пакетной обработки."""

    total: int = Field(..., ge=0, description="Количество обработанных записей")
    succeeded: List[str] = Field(default_factory=list, description="Успешные идентификаторы")
    failures: List[FailureRecord] = Field(default_factory=list, description="Неудачные записи")

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return not self.failures

    def failed_identifiers(self) -> List[str]:
        return [failure.identifier for failure in self.failures]

    def to_contract(self) -> Dict[str, Any]:
        """JSON-совместимый dict (enum → value)."""
        return self.model_dump(mode="json")
