"""Map identity-service user payloads to validated user records."""

from usermap.schemas.user import DEFAULT_ACCENT_ID, AccentColor, User
from usermap.services.assets import AssetService, AssetUrlGenerator
from usermap.services.user_mapper import UserIdentityMismatchError, UserMapper

__version__ = "0.1.0"

__all__ = [
    "AccentColor",
    "AssetService",
    "AssetUrlGenerator",
    "DEFAULT_ACCENT_ID",
    "User",
    "UserIdentityMismatchError",
    "UserMapper",
]
