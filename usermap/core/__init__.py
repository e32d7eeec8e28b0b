"""Core configuration and hashing helpers."""

from usermap.core.config import Settings, get_settings
from usermap.core.hashing import joaat_hash

__all__ = ["Settings", "get_settings", "joaat_hash"]
