"""Export configuration and the immutable request handed to a renderer."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .assets import AssetType
from .scenes import Transition


class Resolution(StrEnum):
    """Output resolution."""

    HD = "720p"
    FULL_HD = "1080p"
    UHD = "4k"


class ExportFormat(StrEnum):
    """Container and codec combination."""

    MP4 = "mp4"
    MOV = "mov"

    @property
    def label(self) -> str:
        """Human-readable container/codec label."""
        return FORMAT_LABELS[self]


FORMAT_LABELS: dict[ExportFormat, str] = {
    ExportFormat.MP4: "MP4 (H.264)",
    ExportFormat.MOV: "MOV (Apple ProRes)",
}


class ExportConfiguration(BaseModel):
    """User-chosen export parameters, freely editable before export."""

    model_config = ConfigDict(validate_assignment=True)

    resolution: Resolution = Field(default=Resolution.FULL_HD)
    format: ExportFormat = Field(default=ExportFormat.MP4)
    include_watermark: bool = Field(
        default=False, description="Burn the branding text in as a watermark"
    )
    branding_text: str = Field(default="Storyboard Studio", description="May be empty")
    include_captions: bool = Field(default=True, description="Embed captions")


class ExportAssetRef(BaseModel):
    """An attached asset as seen by the renderer."""

    model_config = ConfigDict(frozen=True)

    asset_id: str
    missing: bool = Field(
        default=False, description="True when the id no longer resolves in the catalog"
    )
    name: str | None = None
    type: AssetType | None = None


class ExportScene(BaseModel):
    """Snapshot of one scene at export time."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    summary: str
    duration: int
    transition: Transition
    notes: str
    assets: tuple[ExportAssetRef, ...] = ()


class ExportNarration(BaseModel):
    """Narration state at export time."""

    model_config = ConfigDict(frozen=True)

    pending: bool = Field(..., description="True when no narration is ready")
    name: str | None = None
    uri: str | None = None


class ExportSettingsSnapshot(ExportConfiguration):
    """Frozen copy of the export configuration."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)


class ExportRequest(BaseModel):
    """Immutable descriptor consumed by an external render service."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique request id")
    created_at: datetime = Field(default_factory=datetime.now)
    settings: ExportSettingsSnapshot
    scenes: tuple[ExportScene, ...] = ()
    narration: ExportNarration
    script: str = ""
    catalog_size: int = Field(
        default=0, ge=0, description="Assets in the project catalog when requested"
    )

    @property
    def total_duration(self) -> int:
        """Total running time of all scenes in seconds."""
        return sum(scene.duration for scene in self.scenes)

    @property
    def asset_count(self) -> int:
        """Number of distinct attached asset ids across all scenes.

        Not the figure in :meth:`format_summary`, which reports the whole
        catalog.
        """
        return len({ref.asset_id for scene in self.scenes for ref in scene.assets})

    @property
    def missing_assets(self) -> list[str]:
        """Attached asset ids that could not be resolved, in scene order."""
        seen: list[str] = []
        for scene in self.scenes:
            for ref in scene.assets:
                if ref.missing and ref.asset_id not in seen:
                    seen.append(ref.asset_id)
        return seen

    def format_summary(self) -> str:
        """One-line description of what the export contains."""
        voiceover = "pending upload." if self.narration.pending else "attached."
        return (
            f"Export includes {len(self.scenes)} scene(s), "
            f"{self.catalog_size} asset(s), and voiceover {voiceover}"
        )

    def status_line(self) -> str:
        """Status message shown once the request is handed off."""
        return (
            f"Rendering {self.settings.format.value.upper()} "
            f"in {self.settings.resolution.value}..."
        )
