"""Media asset models and the raw-file descriptor used for imports."""

import mimetypes
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

BYTES_PER_MB = 1024 * 1024
MIN_DISPLAY_SIZE_MB = 0.1


class AssetType(StrEnum):
    """Media category of an asset."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


class AssetSource(StrEnum):
    """Where an asset came from."""

    UPLOAD = "upload"
    LIBRARY = "library"


class Asset(BaseModel):
    """A media item available for attachment to scenes. Immutable."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque unique asset id")
    name: str = Field(..., description="Display name, usually the file name")
    type: AssetType = Field(..., description="Media category")
    size: str = Field(..., description="Human-readable size label, e.g. '2.4 MB'")
    source: AssetSource = Field(..., description="Upload or seeded library asset")


class MissingAsset(BaseModel):
    """Placeholder for an attached asset id that no longer resolves."""

    model_config = ConfigDict(frozen=True)

    asset_id: str


class RawFile(BaseModel):
    """Name, declared media type and byte size of a file being imported."""

    model_config = ConfigDict(frozen=True)

    name: str
    media_type: str = Field(default="", description="Declared MIME type, may be empty")
    size_bytes: int = Field(default=0, ge=0)

    @classmethod
    def from_path(cls, path: Path | str) -> "RawFile":
        """Describe a file on disk, guessing its MIME type from the extension."""
        path = Path(path)
        media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            media_type=media_type or "",
            size_bytes=path.stat().st_size,
        )


def classify_media_type(media_type: str) -> AssetType:
    """Map a declared MIME type onto an asset type.

    Anything that is not an image or a video is treated as audio.
    """
    if media_type.startswith("image"):
        return AssetType.IMAGE
    if media_type.startswith("video"):
        return AssetType.VIDEO
    return AssetType.AUDIO


def format_size(size_bytes: int) -> str:
    """Format a byte count as a one-decimal megabyte label (min 0.1 MB)."""
    return f"{max(size_bytes / BYTES_PER_MB, MIN_DISPLAY_SIZE_MB):.1f} MB"


LIBRARY_ASSETS: tuple[Asset, ...] = (
    Asset(
        id="library-1",
        name="City Skyline B-Roll.mp4",
        type=AssetType.VIDEO,
        size="18 MB",
        source=AssetSource.LIBRARY,
    ),
    Asset(
        id="library-2",
        name="Team Collaboration.jpg",
        type=AssetType.IMAGE,
        size="2.4 MB",
        source=AssetSource.LIBRARY,
    ),
    Asset(
        id="library-3",
        name="Confident Voiceover.wav",
        type=AssetType.AUDIO,
        size="4.1 MB",
        source=AssetSource.LIBRARY,
    ),
)
