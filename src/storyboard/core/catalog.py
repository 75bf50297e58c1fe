"""Asset catalog: owns the media assets available to the storyboard."""

import logging
from collections.abc import Iterable

from storyboard.core.ids import IdAllocator
from storyboard.models.assets import (
    Asset,
    AssetSource,
    RawFile,
    classify_media_type,
    format_size,
)

logger = logging.getLogger(__name__)


class AssetCatalog:
    """Ordered collection of assets, most recent upload first.

    Library assets are seeded once at startup; uploads are prepended as
    they are imported. Assets are never mutated or removed.
    """

    def __init__(self, ids: IdAllocator, library: Iterable[Asset] = ()) -> None:
        self._ids = ids
        self._assets: list[Asset] = []
        self.seed(library)

    def seed(self, assets: Iterable[Asset]) -> None:
        """Append library assets after anything already in the catalog."""
        for asset in assets:
            if asset.id not in self:
                self._assets.append(asset)

    def import_files(self, files: Iterable[RawFile]) -> list[Asset]:
        """Create upload assets from raw file metadata and prepend them.

        The new batch keeps its input order and goes in front of the
        existing catalog. Empty or untyped files still produce an asset.

        Returns:
            The newly created assets.
        """
        imported = [
            Asset(
                id=self._ids.allocate("asset"),
                name=raw.name,
                type=classify_media_type(raw.media_type),
                size=format_size(raw.size_bytes),
                source=AssetSource.UPLOAD,
            )
            for raw in files
        ]
        if imported:
            self._assets[:0] = imported
            logger.info("Imported %d asset(s)", len(imported))
        return imported

    def list(self) -> list[Asset]:
        """Return the assets in display order."""
        return list(self._assets)

    def get(self, asset_id: str) -> Asset | None:
        for asset in self._assets:
            if asset.id == asset_id:
                return asset
        return None

    def __contains__(self, asset_id: object) -> bool:
        return any(asset.id == asset_id for asset in self._assets)

    def __len__(self) -> int:
        return len(self._assets)
