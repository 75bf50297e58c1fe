"""Unit tests for the export configurator and render queue."""

import pytest
from pydantic import ValidationError

from storyboard.api.render_queue import FileRenderQueue
from storyboard.core.attachments import AttachmentIndex
from storyboard.core.catalog import AssetCatalog
from storyboard.core.exporter import ExportConfigurator
from storyboard.core.ids import CounterIdAllocator
from storyboard.core.timeline import SceneTimeline
from storyboard.models import (
    LIBRARY_ASSETS,
    STARTER_SCENES,
    ExportFormat,
    NarrationResource,
    Resolution,
)


@pytest.fixture
def ids() -> CounterIdAllocator:
    return CounterIdAllocator()


@pytest.fixture
def timeline(ids: CounterIdAllocator) -> SceneTimeline:
    return SceneTimeline(ids, STARTER_SCENES)


@pytest.fixture
def attachments(ids: CounterIdAllocator, timeline: SceneTimeline) -> AttachmentIndex:
    index = AttachmentIndex(timeline, AssetCatalog(ids, LIBRARY_ASSETS))
    index.attach("scene-1", "library-1")
    index.attach("scene-2", "library-1")
    index.attach("scene-2", "library-2")
    return index


@pytest.fixture
def configurator(ids: CounterIdAllocator) -> ExportConfigurator:
    return ExportConfigurator(ids)


class TestExportConfigurator:
    def test_update(self, configurator: ExportConfigurator) -> None:
        config = configurator.update(resolution="4k", include_watermark=True)
        assert config.resolution == Resolution.UHD
        assert config.include_watermark is True
        assert config.format == ExportFormat.MP4

    def test_invalid_update_leaves_config(self, configurator: ExportConfigurator) -> None:
        with pytest.raises(ValidationError):
            configurator.update(format="mkv", include_captions=False)
        assert configurator.config.format == ExportFormat.MP4
        assert configurator.config.include_captions is True

    def test_request_snapshots_state(
        self,
        configurator: ExportConfigurator,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
    ) -> None:
        voice = NarrationResource("voice.wav", "memory://narration-1")
        request = configurator.request_export(timeline, attachments, voice, script="Hello")

        assert request.id == "export-1"
        assert [s.id for s in request.scenes] == ["scene-1", "scene-2", "scene-3"]
        assert request.scenes[1].assets[1].name == "Team Collaboration.jpg"
        assert request.total_duration == 52
        assert request.asset_count == 2
        assert request.catalog_size == 3
        assert request.narration.pending is False
        assert request.narration.uri == "memory://narration-1"
        assert request.script == "Hello"
        assert request.format_summary() == (
            "Export includes 3 scene(s), 3 asset(s), and voiceover attached."
        )
        assert request.status_line() == "Rendering MP4 in 1080p..."

    def test_request_is_independent_of_later_edits(
        self,
        configurator: ExportConfigurator,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
    ) -> None:
        request = configurator.request_export(timeline, attachments, None)
        timeline.update_field("scene-1", "title", "Renamed")
        timeline.move_before("scene-3", "scene-1")
        configurator.update(format="mov")

        assert request.scenes[0].title == "Opening Hook"
        assert request.scenes[0].id == "scene-1"
        assert request.settings.format == ExportFormat.MP4

    def test_request_is_frozen(
        self,
        configurator: ExportConfigurator,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
    ) -> None:
        request = configurator.request_export(timeline, attachments, None)
        with pytest.raises(ValidationError):
            request.script = "changed"  # type: ignore[misc]
        with pytest.raises(ValidationError):
            request.settings.branding_text = "changed"  # type: ignore[misc]

    def test_pending_narration_and_missing_assets(
        self,
        configurator: ExportConfigurator,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
    ) -> None:
        attachments.attach("scene-3", "asset-deleted")
        request = configurator.request_export(timeline, attachments, None)

        assert request.narration.pending is True
        assert request.narration.name is None
        assert request.missing_assets == ["asset-deleted"]
        assert request.scenes[2].assets[0].missing is True
        assert request.format_summary().endswith("voiceover pending upload.")

    def test_summary_reports_catalog_size(
        self, ids: CounterIdAllocator, configurator: ExportConfigurator, timeline: SceneTimeline
    ) -> None:
        unattached = AttachmentIndex(timeline, AssetCatalog(ids, LIBRARY_ASSETS))
        request = configurator.request_export(timeline, unattached, None)

        assert request.asset_count == 0
        assert request.format_summary() == (
            "Export includes 3 scene(s), 3 asset(s), and voiceover pending upload."
        )

    def test_ids_are_unique(
        self,
        configurator: ExportConfigurator,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
    ) -> None:
        first = configurator.request_export(timeline, attachments, None)
        second = configurator.request_export(timeline, attachments, None)
        assert first.id != second.id


class TestFileRenderQueue:
    def test_submit_and_load(
        self,
        tmp_path,
        configurator: ExportConfigurator,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
    ) -> None:
        queue = FileRenderQueue(tmp_path / "exports")
        assert queue.pending() == []

        request = configurator.request_export(timeline, attachments, None, script="Outline")
        queue.submit(request)

        (path,) = queue.pending()
        assert path == queue.path_for(request)
        loaded = queue.load(path)
        assert loaded.model_dump() == request.model_dump()

    def test_load_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            FileRenderQueue(tmp_path).load(tmp_path / "nope.json")
