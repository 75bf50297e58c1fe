"""Data models for Storyboard Studio."""

from .assets import (
    LIBRARY_ASSETS,
    Asset,
    AssetSource,
    AssetType,
    MissingAsset,
    RawFile,
    classify_media_type,
    format_size,
)
from .export import (
    ExportAssetRef,
    ExportConfiguration,
    ExportFormat,
    ExportNarration,
    ExportRequest,
    ExportScene,
    ExportSettingsSnapshot,
    Resolution,
)
from .narration import NarrationResource, NarrationStatus
from .scenes import (
    DEFAULT_SCRIPT,
    EDITABLE_FIELDS,
    STARTER_SCENES,
    Scene,
    SceneTemplate,
    Transition,
)

__all__ = [
    # Asset models
    "Asset",
    "AssetSource",
    "AssetType",
    "LIBRARY_ASSETS",
    "MissingAsset",
    "RawFile",
    "classify_media_type",
    "format_size",
    # Scene models
    "DEFAULT_SCRIPT",
    "EDITABLE_FIELDS",
    "STARTER_SCENES",
    "Scene",
    "SceneTemplate",
    "Transition",
    # Narration
    "NarrationResource",
    "NarrationStatus",
    # Export models
    "ExportAssetRef",
    "ExportConfiguration",
    "ExportFormat",
    "ExportNarration",
    "ExportRequest",
    "ExportScene",
    "ExportSettingsSnapshot",
    "Resolution",
]
