"""Map identity-service user payloads to User records and apply change notifications to them."""

import logging
from typing import Any

from usermap.schemas.assets import ASSET_SIZE_COMPLETE, ASSET_SIZE_PREVIEW
from usermap.schemas.user import User, UserPayload
from usermap.services.assets import AssetUrlGenerator, resolve_assets, resolve_pictures

logger = logging.getLogger(__name__)

# Payload keys copied verbatim onto the record (payload key -> record attribute).
_OPTIONAL_TEXT_FIELDS: dict[str, str] = {
    "email": "email",
    "phone": "phone",
    "handle": "username",
}


class UserIdentityMismatchError(ValueError):
    """Raised when an update payload targets a different user than the record being updated."""

    def __init__(self, expected_id: str, actual_id: Any) -> None:
        self.expected_id = expected_id
        self.actual_id = actual_id
        self.message = f"Updating wrong user entity. Expected id {expected_id!r}, got {actual_id!r}."
        super().__init__(self.message)


class UserMapper:
    """
    Pure transformations from raw user payloads to User records.

    The asset URL generator is injected once and reused for every call.
    """

    def __init__(self, asset_service: AssetUrlGenerator) -> None:
        self.asset_service = asset_service

    def map_user_from_object(self, data: dict[str, Any] | None) -> User | None:
        """Create a User from a payload; None in, None out."""
        if data is None:
            return None
        return self._create(data, is_me=False)

    def map_self_user_from_object(self, data: dict[str, Any] | None) -> User | None:
        """Create the authenticated user's record: like map_user_from_object plus locale and is_me."""
        if data is None:
            return None
        return self._create(data, is_me=True)

    def map_users_from_object(self, data: list[dict[str, Any]] | None) -> list[User]:
        """Create one User per payload, in input order. None or [] yields []; None entries are skipped."""
        if not data:
            return []
        users = [self._create(item, is_me=False) for item in data if item is not None]
        logger.debug("Mapped users from payload list", extra={"user_count": len(users)})
        return users

    def update_user_from_object(self, user: User, data: dict[str, Any]) -> User:
        """
        Apply a sparse change payload to `user` in place and return the same instance.

        Only keys present in `data` are applied. Raises UserIdentityMismatchError,
        without touching the record, if `data["id"]` is not `user.id`.
        """
        patch_id = data.get("id") if isinstance(data, dict) else None
        if patch_id != user.id:
            logger.warning(
                "Rejected user update for mismatching id",
                extra={"user_id": user.id, "patch_user_id": patch_id},
            )
            raise UserIdentityMismatchError(user.id, patch_id)

        payload = UserPayload.model_validate(data)
        changes = self._changes_from_payload(payload, include_locale=user.is_me)
        for attr, value in changes.items():
            setattr(user, attr, value)
        logger.debug(
            "Updated user from payload",
            extra={"user_id": user.id, "changed_fields": sorted(changes)},
        )
        return user

    def _create(self, data: dict[str, Any], *, is_me: bool) -> User:
        payload = UserPayload.model_validate(data)
        user = User(id=payload.id, is_me=is_me)
        for attr, value in self._changes_from_payload(payload, include_locale=is_me).items():
            setattr(user, attr, value)
        return user

    def _changes_from_payload(self, payload: UserPayload, *, include_locale: bool) -> dict[str, Any]:
        """Compute record attribute changes for every key present in the payload."""
        present = payload.model_fields_set
        changes: dict[str, Any] = {}

        # name is not optional on the record; an explicit null leaves it as is
        if "name" in present and payload.name is not None:
            changes["name"] = payload.name
        for key, attr in _OPTIONAL_TEXT_FIELDS.items():
            if key in present:
                changes[attr] = getattr(payload, key)
        if "accent_id" in present:
            changes["accent_id"] = payload.accent_id
        if include_locale and "locale" in present:
            changes["locale"] = payload.locale

        # v3 assets take precedence over legacy pictures
        if "assets" in present:
            resources = resolve_assets(payload.assets, self.asset_service)
        elif "picture" in present:
            resources = resolve_pictures(payload.picture, self.asset_service)
        else:
            resources = None
        if resources is not None:
            changes["preview_picture_resource"] = resources.get(ASSET_SIZE_PREVIEW)
            changes["medium_picture_resource"] = resources.get(ASSET_SIZE_COMPLETE)
        return changes
