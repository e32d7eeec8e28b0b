"""Mapping services: user payload mapper and asset resolution."""

from usermap.services.assets import AssetService, AssetUrlGenerator, resolve_assets, resolve_pictures
from usermap.services.user_mapper import UserIdentityMismatchError, UserMapper

__all__ = [
    "AssetService",
    "AssetUrlGenerator",
    "UserIdentityMismatchError",
    "UserMapper",
    "resolve_assets",
    "resolve_pictures",
]
