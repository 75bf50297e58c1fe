"""Readiness scoring: advisory progress feedback for the storyboard.

The score counts five independent signals and never blocks anything,
including export. It is recomputed on demand after each mutation.
"""

from dataclasses import dataclass

from storyboard.core.catalog import AssetCatalog
from storyboard.core.timeline import SceneTimeline
from storyboard.models.export import ExportConfiguration
from storyboard.models.narration import NarrationStatus

MIN_SCRIPT_LENGTH = 120  # characters, exclusive
MIN_SCENE_COUNT = 3

SIGNAL_LABELS: dict[str, str] = {
    "script_written": f"Script longer than {MIN_SCRIPT_LENGTH} characters",
    "enough_scenes": f"At least {MIN_SCENE_COUNT} scenes",
    "assets_cover_scenes": "At least one asset per scene",
    "narration_ready": "Voiceover recorded or uploaded",
    "branding_set": "Branding text set",
}


@dataclass(frozen=True)
class ReadinessReport:
    """Outcome of each readiness signal and the resulting 0-100 score."""

    script_written: bool
    enough_scenes: bool
    assets_cover_scenes: bool
    narration_ready: bool
    branding_set: bool

    @property
    def signals(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in SIGNAL_LABELS}

    @property
    def completed(self) -> int:
        return sum(self.signals.values())

    @property
    def total(self) -> int:
        return len(SIGNAL_LABELS)

    @property
    def score(self) -> int:
        """Percentage of signals met, rounded to the nearest integer."""
        return round(self.completed / self.total * 100)

    def missing(self) -> list[str]:
        """Labels of the signals that are not met yet."""
        return [SIGNAL_LABELS[name] for name, met in self.signals.items() if not met]


def evaluate_readiness(
    script: str,
    timeline: SceneTimeline,
    catalog: AssetCatalog,
    narration: NarrationStatus,
    export_config: ExportConfiguration,
) -> ReadinessReport:
    """Evaluate all readiness signals. Pure; reads but never mutates."""
    return ReadinessReport(
        script_written=len(script.strip()) > MIN_SCRIPT_LENGTH,
        enough_scenes=len(timeline) >= MIN_SCENE_COUNT,
        assets_cover_scenes=len(catalog) >= len(timeline),
        narration_ready=narration == NarrationStatus.READY,
        branding_set=bool(export_config.branding_text.strip()),
    )


def readiness_score(
    script: str,
    timeline: SceneTimeline,
    catalog: AssetCatalog,
    narration: NarrationStatus,
    export_config: ExportConfiguration,
) -> int:
    """Shortcut for ``evaluate_readiness(...).score``."""
    return evaluate_readiness(script, timeline, catalog, narration, export_config).score
