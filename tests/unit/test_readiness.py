"""Unit tests for readiness scoring."""

import pytest

from storyboard.core.catalog import AssetCatalog
from storyboard.core.ids import CounterIdAllocator
from storyboard.core.readiness import (
    MIN_SCRIPT_LENGTH,
    SIGNAL_LABELS,
    evaluate_readiness,
    readiness_score,
)
from storyboard.core.timeline import SceneTimeline
from storyboard.models import (
    LIBRARY_ASSETS,
    STARTER_SCENES,
    ExportConfiguration,
    NarrationStatus,
    RawFile,
)


@pytest.fixture
def timeline() -> SceneTimeline:
    return SceneTimeline(CounterIdAllocator(), STARTER_SCENES)


@pytest.fixture
def catalog() -> AssetCatalog:
    catalog = AssetCatalog(CounterIdAllocator(), LIBRARY_ASSETS)
    catalog.import_files([RawFile(name="extra.png", media_type="image/png")])
    return catalog


class TestReadiness:
    def test_four_of_five_scores_eighty(
        self, timeline: SceneTimeline, catalog: AssetCatalog
    ) -> None:
        report = evaluate_readiness(
            "x" * 200,
            timeline,
            catalog,
            NarrationStatus.READY,
            ExportConfiguration(branding_text=""),
        )
        assert report.completed == 4
        assert report.total == 5
        assert report.score == 80
        assert report.missing() == [SIGNAL_LABELS["branding_set"]]

    def test_all_signals(self, timeline: SceneTimeline, catalog: AssetCatalog) -> None:
        score = readiness_score(
            "x" * 200, timeline, catalog, NarrationStatus.READY, ExportConfiguration()
        )
        assert score == 100

    def test_nothing_done(self) -> None:
        ids = CounterIdAllocator()
        timeline = SceneTimeline(ids)
        timeline.add_scene()
        report = evaluate_readiness(
            "",
            timeline,
            AssetCatalog(ids),
            NarrationStatus.IDLE,
            ExportConfiguration(branding_text="   "),
        )
        assert report.score == 0
        assert len(report.missing()) == 5

    def test_script_threshold_is_exclusive(
        self, timeline: SceneTimeline, catalog: AssetCatalog
    ) -> None:
        at_threshold = evaluate_readiness(
            "x" * MIN_SCRIPT_LENGTH, timeline, catalog, NarrationStatus.IDLE, ExportConfiguration()
        )
        above = evaluate_readiness(
            "x" * (MIN_SCRIPT_LENGTH + 1),
            timeline,
            catalog,
            NarrationStatus.IDLE,
            ExportConfiguration(),
        )
        assert at_threshold.script_written is False
        assert above.script_written is True

    @pytest.mark.parametrize(
        "status",
        [NarrationStatus.IDLE, NarrationStatus.ACQUIRING, NarrationStatus.RECORDING],
    )
    def test_only_ready_narration_counts(
        self, status: NarrationStatus, timeline: SceneTimeline, catalog: AssetCatalog
    ) -> None:
        report = evaluate_readiness("", timeline, catalog, status, ExportConfiguration())
        assert report.narration_ready is False

    def test_assets_must_cover_scenes(self, catalog: AssetCatalog) -> None:
        timeline = SceneTimeline(CounterIdAllocator(), STARTER_SCENES)
        for _ in range(2):
            timeline.add_scene()
        report = evaluate_readiness("", timeline, catalog, NarrationStatus.IDLE, ExportConfiguration())
        assert len(timeline) == 5
        assert len(catalog) == 4
        assert report.assets_cover_scenes is False

    def test_evaluation_does_not_mutate(
        self, timeline: SceneTimeline, catalog: AssetCatalog
    ) -> None:
        order = timeline.order()
        evaluate_readiness("", timeline, catalog, NarrationStatus.IDLE, ExportConfiguration())
        assert timeline.order() == order
        assert len(catalog) == 4
