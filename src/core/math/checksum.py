"""
Checksum Arithmetic — Взвешенная модульная контрольная сумма

Арифметика без доменных типов: на вход — последовательность значений цифр.

ИЗВЕСТНАЯ ОСОБЕННОСТЬ:
Цифры хранятся big-endian (старшая первой), но веса назначаются в порядке
хранения: первая (старшая) цифра получает вес 1, последняя — digit_base^(n-1).
Это НЕ позиционное значение числа. Прошивка дисплея зависит от точного
отображения, поэтому поведение сохраняется как есть.
"""

from typing import Iterable, Tuple


def validate_checksum_params(digit_base: int, checksum_base: int) -> None:
    """
    Проверка параметров контрольной суммы.

    Raises:
        ValueError: Если digit_base < 2 или checksum_base < 1
    """
    if digit_base < 2:
        raise ValueError(f"digit_base must be >= 2, got {digit_base}")

    if checksum_base < 1:
        raise ValueError(f"checksum_base must be >= 1, got {checksum_base}")


def weighted_digit_sum(digit_values: Iterable[int], digit_base: int) -> int:
    """
    Сумма цифр с весами 1, digit_base, digit_base^2, ... в порядке хранения.

    Examples:
        >>> weighted_digit_sum([1, 3, 3, 7], 10)
        7331
    """
    digit_sum = 0
    coeff = 1

    for value in digit_values:
        digit_sum += coeff * value
        coeff *= digit_base

    return digit_sum


def checksum_value(digit_values: Iterable[int], digit_base: int, checksum_base: int) -> int:
    """
    Значение контрольной суммы: weighted_digit_sum mod checksum_base.

    Examples:
        >>> checksum_value([1, 3, 3, 7], 10, 97)
        56
    """
    validate_checksum_params(digit_base, checksum_base)
    return weighted_digit_sum(digit_values, digit_base) % checksum_base


def split_checksum(value: int, digit_base: int) -> Tuple[int, int]:
    """
    Разбиение значения на (high, low) в основании digit_base.

    high может быть >= digit_base, если checksum_base > digit_base^2;
    проверка представимости выполняется вызывающим кодом.
    """
    return value // digit_base, value % digit_base
