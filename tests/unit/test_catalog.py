"""Unit tests for the asset catalog and scene attachments."""

import pytest

from storyboard.core.attachments import AttachmentIndex
from storyboard.core.catalog import AssetCatalog
from storyboard.core.ids import CounterIdAllocator
from storyboard.core.timeline import SceneTimeline
from storyboard.models import (
    LIBRARY_ASSETS,
    STARTER_SCENES,
    Asset,
    AssetSource,
    AssetType,
    MissingAsset,
    RawFile,
)


@pytest.fixture
def catalog() -> AssetCatalog:
    return AssetCatalog(CounterIdAllocator(), LIBRARY_ASSETS)


@pytest.fixture
def attachments(catalog: AssetCatalog) -> AttachmentIndex:
    timeline = SceneTimeline(CounterIdAllocator(), STARTER_SCENES)
    return AttachmentIndex(timeline, catalog)


class TestAssetCatalog:
    def test_seeded_with_library(self, catalog: AssetCatalog) -> None:
        assert len(catalog) == 3
        assert [a.id for a in catalog.list()] == ["library-1", "library-2", "library-3"]
        assert all(a.source == AssetSource.LIBRARY for a in catalog.list())

    def test_import_prepends_with_size_label(self, catalog: AssetCatalog) -> None:
        imported = catalog.import_files(
            [RawFile(name="x.mp4", media_type="video/mp4", size_bytes=500_000)]
        )
        assert len(imported) == 1
        assert len(catalog) == 4
        first = catalog.list()[0]
        assert first == imported[0]
        assert first.id == "asset-1"
        assert first.size == "0.5 MB"
        assert first.type == AssetType.VIDEO
        assert first.source == AssetSource.UPLOAD

    def test_batch_keeps_input_order(self, catalog: AssetCatalog) -> None:
        catalog.import_files([RawFile(name="old.png", media_type="image/png")])
        catalog.import_files(
            [
                RawFile(name="a.png", media_type="image/png"),
                RawFile(name="b.wav", media_type="audio/wav"),
            ]
        )
        names = [a.name for a in catalog.list()]
        assert names[:3] == ["a.png", "b.wav", "old.png"]

    def test_zero_length_untyped_file(self, catalog: AssetCatalog) -> None:
        (asset,) = catalog.import_files([RawFile(name="mystery")])
        assert asset.type == AssetType.AUDIO
        assert asset.size == "0.1 MB"

    def test_empty_batch(self, catalog: AssetCatalog) -> None:
        assert catalog.import_files([]) == []
        assert len(catalog) == 3

    def test_seed_skips_duplicates(self, catalog: AssetCatalog) -> None:
        catalog.seed(LIBRARY_ASSETS)
        assert len(catalog) == 3

    def test_get_and_contains(self, catalog: AssetCatalog) -> None:
        assert "library-2" in catalog
        assert catalog.get("library-2").name == "Team Collaboration.jpg"
        assert catalog.get("asset-404") is None
        assert "asset-404" not in catalog


class TestAttachmentIndex:
    def test_attach_is_idempotent(self, attachments: AttachmentIndex) -> None:
        assert attachments.attach("scene-1", "library-1") is True
        assert attachments.attach("scene-1", "library-1") is False
        assert attachments.timeline.get("scene-1").asset_ids == ["library-1"]

    def test_detach_is_idempotent(self, attachments: AttachmentIndex) -> None:
        attachments.attach("scene-1", "library-1")
        assert attachments.detach("scene-1", "library-1") is True
        assert attachments.detach("scene-1", "library-1") is False
        assert attachments.timeline.get("scene-1").asset_ids == []

    def test_unknown_scene(self, attachments: AttachmentIndex) -> None:
        assert attachments.attach("scene-99", "library-1") is False
        assert attachments.detach("scene-99", "library-1") is False
        assert attachments.resolve("scene-99") == []

    def test_resolve_in_attach_order(self, attachments: AttachmentIndex) -> None:
        attachments.attach("scene-2", "library-3")
        attachments.attach("scene-2", "library-1")
        resolved = attachments.resolve("scene-2")
        assert [a.id for a in resolved] == ["library-3", "library-1"]
        assert all(isinstance(a, Asset) for a in resolved)

    def test_stale_id_resolves_to_missing(self, attachments: AttachmentIndex) -> None:
        attachments.attach("scene-1", "asset-gone")
        attachments.attach("scene-1", "library-2")
        resolved = attachments.resolve("scene-1")
        assert resolved[0] == MissingAsset(asset_id="asset-gone")
        assert isinstance(resolved[1], Asset)

    def test_asset_shared_between_scenes(self, attachments: AttachmentIndex) -> None:
        attachments.attach("scene-3", "library-1")
        attachments.attach("scene-1", "library-1")
        assert attachments.scenes_using("library-1") == ["scene-1", "scene-3"]
        attachments.detach("scene-1", "library-1")
        assert attachments.scenes_using("library-1") == ["scene-3"]

    def test_attachments_follow_scene_through_moves(self, attachments: AttachmentIndex) -> None:
        attachments.attach("scene-3", "library-2")
        attachments.timeline.move_before("scene-3", "scene-1")
        assert [a.id for a in attachments.resolve("scene-3")] == ["library-2"]

    def test_deleting_scene_drops_its_attachments(self, attachments: AttachmentIndex) -> None:
        attachments.attach("scene-2", "library-1")
        attachments.timeline.delete_scene("scene-2")
        assert attachments.scenes_using("library-1") == []
