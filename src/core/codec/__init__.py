"""AssetId codec — разбор, контрольная сумма, checked asset id."""

from .asset_id_codec import (
    asset_id_to_string,
    calculate_checksum,
    create_checked_asset_id,
    parse_asset_id,
)

__all__ = [
    "parse_asset_id",
    "asset_id_to_string",
    "calculate_checksum",
    "create_checked_asset_id",
]
