"""Pydantic schemas for user payloads from the identity service and the mapped user record."""

import logging
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator

from usermap.core.hashing import joaat_hash
from usermap.schemas.assets import AssetDescriptor, AssetResource, PictureEntry

logger = logging.getLogger(__name__)


class AccentColor(IntEnum):
    """UI accent colors a user can pick; values are the backend's accent ids."""

    BLUE = 1
    GREEN = 2
    YELLOW = 3
    RED = 4
    ORANGE = 5
    PINK = 6
    PURPLE = 7


DEFAULT_ACCENT_ID = AccentColor.BLUE

ACCENT_ID_VALUES: frozenset[int] = frozenset(c.value for c in AccentColor)


def resolve_accent_id(value: Any) -> AccentColor:
    """
    Map a raw accent id to an AccentColor.

    None, 0 and anything outside the known set resolve to DEFAULT_ACCENT_ID.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_ACCENT_ID
    if isinstance(value, AccentColor):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and value in ACCENT_ID_VALUES:
        return AccentColor(value)
    if value != 0:
        logger.debug("Unknown accent id %r; using default", value)
    return DEFAULT_ACCENT_ID


def _text_or_none(value: Any) -> str | None:
    """Keep strings verbatim; stringify numbers; anything else becomes None."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _valid_entries(value: Any, model: type[BaseModel], field: str) -> list | None:
    """Validate list entries one by one, dropping malformed ones instead of failing."""
    if value is None:
        return None
    if not isinstance(value, list):
        logger.debug("Ignoring non-list %s field", field)
        return None
    entries = []
    for item in value:
        try:
            entries.append(model.model_validate(item))
        except ValidationError:
            logger.debug("Skipping malformed %s entry", field, extra={"entry": item})
    return entries


class UserPayload(BaseModel):
    """
    User object as returned by the identity service, or a sparse change notification.

    Only `id` is required. Presence of the other keys is available through
    `model_fields_set`, which is what distinguishes "not sent" from "sent as null".
    """

    model_config = {"extra": "ignore"}

    id: str = Field(..., min_length=1, description="Stable user id.")
    name: str | None = Field(default=None, description="Display name.")
    email: str | None = Field(default=None, description="Email address, if visible to the caller.")
    phone: str | None = Field(default=None, description="Phone number, if visible to the caller.")
    handle: str | None = Field(default=None, description="Unique username (mapped to User.username).")
    accent_id: AccentColor = Field(
        default=DEFAULT_ACCENT_ID,
        description="Accent color; null, 0 and unknown values resolve to the default color.",
    )
    locale: str | None = Field(default=None, description="Locale; only consumed for the self user.")
    picture: list[PictureEntry] | None = Field(default=None, description="Legacy (v2) pictures.")
    assets: list[AssetDescriptor] | None = Field(default=None, description="v3 avatar assets.")

    @field_validator("name", "email", "phone", "handle", "locale", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _text_or_none(v)

    @field_validator("accent_id", mode="before")
    @classmethod
    def coerce_accent_id(cls, v: Any) -> AccentColor:
        return resolve_accent_id(v)

    @field_validator("picture", mode="before")
    @classmethod
    def drop_malformed_pictures(cls, v: Any) -> list | None:
        return _valid_entries(v, PictureEntry, "picture")

    @field_validator("assets", mode="before")
    @classmethod
    def drop_malformed_assets(cls, v: Any) -> list | None:
        return _valid_entries(v, AssetDescriptor, "assets")


class User(BaseModel):
    """
    Mapped user record. Mutable, except for `id` and `is_me` which are fixed at construction.

    Assignments are validated, so `accent_id` can only ever hold an AccentColor.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., min_length=1, frozen=True, description="Stable user id.")
    name: str = Field(default="", description="Display name.")
    email: str | None = None
    phone: str | None = None
    username: str | None = Field(default=None, description="Unique handle.")
    accent_id: AccentColor = DEFAULT_ACCENT_ID
    locale: str | None = Field(default=None, description="Set for the self user only.")
    is_me: bool = Field(default=False, frozen=True, description="True only for the authenticated account.")
    preview_picture_resource: AssetResource | None = None
    medium_picture_resource: AssetResource | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def identity_hash(self) -> int:
        """joaat hash of `id`; stable across runs."""
        return joaat_hash(self.id)
