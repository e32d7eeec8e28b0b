"""Pydantic schemas for avatar asset descriptors and resolved asset resources."""

from pydantic import BaseModel, Field

# Size tags the backend currently emits for v3 assets.
ASSET_SIZE_PREVIEW = "preview"
ASSET_SIZE_COMPLETE = "complete"
KNOWN_ASSET_SIZES: frozenset[str] = frozenset({ASSET_SIZE_PREVIEW, ASSET_SIZE_COMPLETE})

# Legacy (v2) picture tags -> v3 size tag.
PICTURE_TAG_TO_SIZE: dict[str, str] = {
    "smallProfile": ASSET_SIZE_PREVIEW,
    "medium": ASSET_SIZE_COMPLETE,
}


class AssetDescriptor(BaseModel):
    """One v3 asset entry from a user payload (`assets` list)."""

    model_config = {"extra": "ignore"}

    key: str = Field(
        ...,
        min_length=1,
        description="Opaque asset key understood by the asset backend.",
    )
    size: str | None = Field(
        default=None,
        description="Size tag: 'preview' or 'complete'. Unknown tags are ignored on resolution.",
    )
    type: str = Field(
        default="image",
        description="Asset type; currently always 'image'.",
    )


class PictureInfo(BaseModel):
    """Metadata block of a legacy picture entry."""

    model_config = {"extra": "ignore"}

    tag: str | None = Field(
        default=None,
        description="Legacy size tag: 'smallProfile' or 'medium'.",
    )
    public: bool = Field(
        default=True,
        description="False when the picture must not be exposed in public-facing views.",
    )
    width: int | None = None
    height: int | None = None
    correlation_id: str | None = None


class PictureEntry(BaseModel):
    """One legacy (v2) picture entry from a user payload (`picture` list)."""

    model_config = {"extra": "ignore"}

    id: str = Field(
        ...,
        min_length=1,
        description="Asset id of this picture variant.",
    )
    content_type: str | None = None
    content_length: int | None = None
    info: PictureInfo = Field(default_factory=PictureInfo)


class AssetResource(BaseModel):
    """Resolved asset handle carrying the generated URL."""

    key: str = Field(..., min_length=1, description="Asset key the URL was generated for.")
    url: str = Field(..., description="URL produced by the injected asset URL generator.")
    size: str = Field(..., description="Size tag this resource was resolved for.")
    type: str = Field(default="image", description="Asset type.")
