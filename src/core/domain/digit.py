"""
Digit — Десятичная цифра

Immutable Pydantic модель одной цифры в основании 10.
Конструктор модели проверяет диапазон значения; публичные фабрики
from_char / from_int возвращают Outcome и никогда не бросают исключений.
"""

from typing import Final

from pydantic import BaseModel, Field

from .outcome import ErrorKind, Outcome


# =============================================================================
# CONSTANTS
# =============================================================================

# Основание системы счисления (поддерживается только 10)
DIGIT_BASE: Final[int] = 10


# =============================================================================
# DIGIT MODEL
# =============================================================================


class Digit(BaseModel):
    """
    Одна цифра в основании DIGIT_BASE.

    Инвариант: 0 <= value < DIGIT_BASE.
    """

    value: int = Field(..., ge=0, lt=DIGIT_BASE, strict=True, description="Значение цифры")

    model_config = {"frozen": True}

    @staticmethod
    def base() -> int:
        """Основание системы счисления цифры."""
        return DIGIT_BASE

    @classmethod
    def from_int(cls, integer_value: int) -> Outcome["Digit"]:
        """
        Создание цифры из целого числа.

        Args:
            integer_value: Целое число в диапазоне [0, DIGIT_BASE)

        Returns:
            Outcome с Digit или DIGIT_OUT_OF_RANGE
        """
        if isinstance(integer_value, bool) or not isinstance(integer_value, int):
            return Outcome.failure(
                ErrorKind.DIGIT_OUT_OF_RANGE,
                reason="not_an_integer",
                details=f"Digit.from_int received non-integer {integer_value!r}",
            )

        if not 0 <= integer_value < DIGIT_BASE:
            return Outcome.failure(
                ErrorKind.DIGIT_OUT_OF_RANGE,
                reason="out_of_range",
                details=f"Digit.from_int received {integer_value}, expected 0..{DIGIT_BASE - 1}",
            )

        return Outcome.success(cls(value=integer_value))

    @classmethod
    def from_char(cls, character: str) -> Outcome["Digit"]:
        """
        Создание цифры из символа.

        Допустимы только ASCII символы '0'..'9' (str.isdigit() не используется,
        т.к. он принимает и не-ASCII цифры).

        Args:
            character: Строка из одного символа

        Returns:
            Outcome с Digit или INVALID_DIGIT_CHARACTER
        """
        if not isinstance(character, str):
            return Outcome.failure(
                ErrorKind.INVALID_DIGIT_CHARACTER,
                reason="not_a_string",
                details=f"Digit.from_char received non-string {character!r}",
            )

        if len(character) != 1 or not "0" <= character <= "9":
            return Outcome.failure(
                ErrorKind.INVALID_DIGIT_CHARACTER,
                reason="not_a_digit",
                details=f"Digit.from_char received {character!r}",
            )

        return Outcome.success(cls(value=ord(character) - ord("0")))

    def __str__(self) -> str:
        return str(self.value)
