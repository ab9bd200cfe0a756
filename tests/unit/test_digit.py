"""
Тесты для Digit

Проверяет:
1. from_char: только ASCII '0'..'9'
2. from_int: только [0, base)
3. Immutability и валидацию конструктора модели
"""

import pytest
from pydantic import ValidationError

from src.core.domain import DIGIT_BASE, Digit, ErrorKind


class TestDigitBase:
    """Тесты для Digit.base"""

    def test_base_is_ten(self) -> None:
        """Основание — 10"""
        assert Digit.base() == 10
        assert DIGIT_BASE == 10


class TestFromChar:
    """Тесты для Digit.from_char"""

    @pytest.mark.parametrize("character", list("0123456789"))
    def test_ascii_digits_accepted(self, character: str) -> None:
        """Каждая ASCII цифра даёт соответствующее значение"""
        result = Digit.from_char(character)
        assert result.ok is True
        assert result.value.value == ord(character) - ord("0")
        assert result.error is None

    @pytest.mark.parametrize("character", [" ", "a", "Z", "!", "/", ":", "-"])
    def test_non_digits_rejected(self, character: str) -> None:
        """Не-цифры отклоняются"""
        result = Digit.from_char(character)
        assert result.ok is False
        assert result.value is None
        assert result.error == ErrorKind.INVALID_DIGIT_CHARACTER

    def test_non_ascii_digit_rejected(self) -> None:
        """Не-ASCII цифры (арабско-индийская тройка) отклоняются"""
        result = Digit.from_char("٣")
        assert result.ok is False
        assert result.error == ErrorKind.INVALID_DIGIT_CHARACTER

    @pytest.mark.parametrize("character", [None, b"1", 1234, 7])
    def test_non_string_rejected(self, character) -> None:
        """Не-строка отклоняется без исключения"""
        result = Digit.from_char(character)
        assert result.ok is False
        assert result.error == ErrorKind.INVALID_DIGIT_CHARACTER
        assert result.reason == "not_a_string"

    @pytest.mark.parametrize("text", ["", "12"])
    def test_not_a_single_character_rejected(self, text: str) -> None:
        """Пустая строка и строка из нескольких символов отклоняются"""
        result = Digit.from_char(text)
        assert result.ok is False
        assert result.error == ErrorKind.INVALID_DIGIT_CHARACTER


class TestFromInt:
    """Тесты для Digit.from_int"""

    def test_all_values_in_range(self) -> None:
        """0..9 принимаются"""
        for integer_value in range(DIGIT_BASE):
            result = Digit.from_int(integer_value)
            assert result.ok is True
            assert result.value.value == integer_value

    @pytest.mark.parametrize("integer_value", [10, 11, 255, -1])
    def test_out_of_range_rejected(self, integer_value: int) -> None:
        """Значения вне [0, 10) отклоняются"""
        result = Digit.from_int(integer_value)
        assert result.ok is False
        assert result.error == ErrorKind.DIGIT_OUT_OF_RANGE
        assert result.reason == "out_of_range"

    def test_bool_rejected(self) -> None:
        """bool не считается целым числом"""
        result = Digit.from_int(True)
        assert result.ok is False
        assert result.error == ErrorKind.DIGIT_OUT_OF_RANGE


class TestDigitModel:
    """Тесты для модели Digit"""

    def test_direct_construction_validated(self) -> None:
        """Конструктор модели проверяет диапазон"""
        with pytest.raises(ValidationError):
            Digit(value=10)

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        digit = Digit.from_int(3).value
        with pytest.raises(ValidationError):
            digit.value = 4

    def test_equality_and_hash(self) -> None:
        """Цифры с одинаковым значением равны"""
        assert Digit.from_char("7").value == Digit.from_int(7).value
        assert hash(Digit.from_char("7").value) == hash(Digit.from_int(7).value)

    def test_str(self) -> None:
        assert str(Digit.from_int(5).value) == "5"
