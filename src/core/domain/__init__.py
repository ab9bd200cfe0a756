"""
Domain models and value objects.

Contains fundamental value objects: Digit, AssetId, Checksum, CheckedAssetId
and the Outcome result type.
"""

from src.core.domain.asset_id import (
    ASSET_ID_LENGTH,
    CHECKED_ASSET_ID_LENGTH,
    CHECKSUM_BASE,
    CHECKSUM_LENGTH,
    AssetId,
    CheckedAssetId,
    Checksum,
    digits_to_int,
    digits_to_string,
)
from src.core.domain.digit import DIGIT_BASE, Digit
from src.core.domain.outcome import ErrorKind, Outcome

__all__ = [
    # Digit
    "DIGIT_BASE",
    "Digit",
    # AssetId models
    "ASSET_ID_LENGTH",
    "CHECKSUM_LENGTH",
    "CHECKED_ASSET_ID_LENGTH",
    "CHECKSUM_BASE",
    "AssetId",
    "Checksum",
    "CheckedAssetId",
    "digits_to_int",
    "digits_to_string",
    # Results
    "ErrorKind",
    "Outcome",
]
