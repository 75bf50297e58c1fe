"""Attachment index: the many-to-many relation between scenes and assets."""

import logging

from storyboard.core.catalog import AssetCatalog
from storyboard.core.timeline import SceneTimeline
from storyboard.models.assets import Asset, MissingAsset

logger = logging.getLogger(__name__)


class AttachmentIndex:
    """Attach, detach and resolve assets on scenes.

    Each scene's ``asset_ids`` list is the storage for the relation; this
    class only enforces its rules. Attach and detach are idempotent, and an
    attached id that is not in the catalog resolves to a ``MissingAsset``.
    """

    def __init__(self, timeline: SceneTimeline, catalog: AssetCatalog) -> None:
        self.timeline = timeline
        self.catalog = catalog

    def attach(self, scene_id: str, asset_id: str) -> bool:
        """Append an asset to a scene unless it is already attached.

        Returns:
            True if the attachment list changed.
        """
        scene = self.timeline.get(scene_id)
        if scene is None or asset_id in scene.asset_ids:
            return False
        scene.asset_ids = [*scene.asset_ids, asset_id]
        logger.info("Linked asset %s to scene %s", asset_id, scene_id)
        return True

    def detach(self, scene_id: str, asset_id: str) -> bool:
        """Remove an asset from a scene if it is attached.

        Returns:
            True if the attachment list changed.
        """
        scene = self.timeline.get(scene_id)
        if scene is None or asset_id not in scene.asset_ids:
            return False
        scene.asset_ids = [aid for aid in scene.asset_ids if aid != asset_id]
        logger.info("Unlinked asset %s from scene %s", asset_id, scene_id)
        return True

    def resolve(self, scene_id: str) -> list[Asset | MissingAsset]:
        """Map a scene's attached ids to catalog assets, in attach order."""
        scene = self.timeline.get(scene_id)
        if scene is None:
            return []
        resolved: list[Asset | MissingAsset] = []
        for asset_id in scene.asset_ids:
            asset = self.catalog.get(asset_id)
            resolved.append(asset if asset is not None else MissingAsset(asset_id=asset_id))
        return resolved

    def scenes_using(self, asset_id: str) -> list[str]:
        """Return the ids of scenes the asset is attached to, in timeline order."""
        return [scene.id for scene in self.timeline if asset_id in scene.asset_ids]
