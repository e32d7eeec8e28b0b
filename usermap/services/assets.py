"""Resolve avatar asset descriptors into URL-carrying resources via an injected URL generator."""

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from urllib.parse import quote, urlencode

from usermap.schemas.assets import (
    ASSET_SIZE_COMPLETE,
    ASSET_SIZE_PREVIEW,
    KNOWN_ASSET_SIZES,
    PICTURE_TAG_TO_SIZE,
    AssetDescriptor,
    AssetResource,
    PictureEntry,
)

if TYPE_CHECKING:
    from usermap.core.config import Settings

logger = logging.getLogger(__name__)

# Positional fallback for legacy pictures without a tag: [preview, complete].
_PICTURE_POSITION_SIZES = (ASSET_SIZE_PREVIEW, ASSET_SIZE_COMPLETE)


@runtime_checkable
class AssetUrlGenerator(Protocol):
    """Capability that turns an asset key into a fetchable URL."""

    def generate_asset_url(self, key: str) -> str: ...


class AssetService:
    """Default AssetUrlGenerator: builds v3 asset URLs from settings."""

    def __init__(self, base_url: str, access_token: str | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AssetService":
        token = settings.ASSET_ACCESS_TOKEN
        return cls(
            settings.ASSET_BASE_URL,
            access_token=token.get_secret_value() if token is not None else None,
        )

    def generate_asset_url(self, key: str) -> str:
        url = f"{self.base_url}/assets/v3/{quote(key, safe='')}"
        if self.access_token:
            url = f"{url}?{urlencode({'access_token': self.access_token})}"
        return url


def resolve_assets(
    descriptors: list[AssetDescriptor] | None,
    generator: AssetUrlGenerator,
) -> dict[str, AssetResource]:
    """
    Resolve v3 asset descriptors to resources keyed by size tag.

    Unknown size tags are skipped. An empty or missing list resolves to {}.
    When a size appears twice the later entry wins.
    """
    resolved: dict[str, AssetResource] = {}
    for descriptor in descriptors or []:
        if descriptor.size not in KNOWN_ASSET_SIZES:
            logger.debug("Ignoring asset with unknown size tag", extra={"asset_size": descriptor.size})
            continue
        resolved[descriptor.size] = AssetResource(
            key=descriptor.key,
            url=generator.generate_asset_url(descriptor.key),
            size=descriptor.size,
            type=descriptor.type,
        )
    return resolved


def resolve_pictures(
    pictures: list[PictureEntry] | None,
    generator: AssetUrlGenerator,
) -> dict[str, AssetResource]:
    """
    Resolve legacy picture entries to resources keyed by v3 size tag.

    Size comes from info.tag, or from list position when untagged.
    Non-public pictures are not resolved.
    """
    resolved: dict[str, AssetResource] = {}
    for position, picture in enumerate(pictures or []):
        if not picture.info.public:
            logger.debug("Skipping non-public picture", extra={"asset_key": picture.id})
            continue
        if picture.info.tag is not None:
            size = PICTURE_TAG_TO_SIZE.get(picture.info.tag)
        elif position < len(_PICTURE_POSITION_SIZES):
            size = _PICTURE_POSITION_SIZES[position]
        else:
            size = None
        if size is None:
            continue
        resolved[size] = AssetResource(
            key=picture.id,
            url=generator.generate_asset_url(picture.id),
            size=size,
        )
    return resolved
