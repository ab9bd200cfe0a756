"""
Core math modules

Арифметика контрольной суммы без доменных типов.
"""

from src.core.math.checksum import (
    checksum_value,
    split_checksum,
    validate_checksum_params,
    weighted_digit_sum,
)

__all__ = [
    "checksum_value",
    "split_checksum",
    "validate_checksum_params",
    "weighted_digit_sum",
]
