"""Pydantic schemas for user payloads, assets and mapped records."""

from usermap.schemas.assets import (
    ASSET_SIZE_COMPLETE,
    ASSET_SIZE_PREVIEW,
    AssetDescriptor,
    AssetResource,
    PictureEntry,
    PictureInfo,
)
from usermap.schemas.user import (
    DEFAULT_ACCENT_ID,
    AccentColor,
    User,
    UserPayload,
    resolve_accent_id,
)

__all__ = [
    "ASSET_SIZE_COMPLETE",
    "ASSET_SIZE_PREVIEW",
    "AccentColor",
    "AssetDescriptor",
    "AssetResource",
    "DEFAULT_ACCENT_ID",
    "PictureEntry",
    "PictureInfo",
    "User",
    "UserPayload",
    "resolve_accent_id",
]
