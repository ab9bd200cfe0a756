"""
Outcome — Результат операций ядра

Все операции ядра (Digit, AssetId codec, Pixel renderer) не бросают исключений
на некорректных входных данных. Вместо этого возвращается Outcome:
- ok=True  → value содержит результат
- ok=False → error/reason/details описывают причину отказа

Вызывающий код обязан явно проверить ok перед использованием value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки (value-level, восстановимая)"""

    INVALID_DIGIT_CHARACTER = "invalid_digit_character"
    DIGIT_OUT_OF_RANGE = "digit_out_of_range"
    MALFORMED_ASSET_ID = "malformed_asset_id"
    CHECKSUM_OVERFLOW = "checksum_overflow"
    UNMAPPED_DIGIT = "unmapped_digit"
    RENDER_OVERFLOW = "render_overflow"
    EMIT_FAILED = "emit_failed"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Результат операции: значение либо описание отказа."""

    ok: bool
    value: Optional[T]

    # Причина отказа (None / "" при успехе)
    error: Optional[ErrorKind]
    reason: str

    # Детали для диагностики
    details: str

    @classmethod
    def success(cls, value: T, details: str = "") -> "Outcome[T]":
        return cls(ok=True, value=value, error=None, reason="", details=details)

    @classmethod
    def failure(cls, error: ErrorKind, reason: str, details: str) -> "Outcome[T]":
        return cls(ok=False, value=None, error=error, reason=reason, details=details)

    def propagate(self) -> "Outcome":
        """
        Переносит отказ в Outcome другого типа (без значения).

        Returns:
            Новый Outcome с теми же error/reason/details

        Raises:
            ValueError: Если вызван на успешном Outcome
        """
        if self.ok:
            raise ValueError("Cannot propagate a successful outcome")
        return Outcome(
            ok=False, value=None, error=self.error, reason=self.reason, details=self.details
        )
