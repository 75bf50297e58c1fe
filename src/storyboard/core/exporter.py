"""Export configurator: holds export settings and builds render requests."""

import logging
from typing import Any

from storyboard.core.attachments import AttachmentIndex
from storyboard.core.ids import IdAllocator
from storyboard.core.timeline import SceneTimeline
from storyboard.models.assets import Asset, MissingAsset
from storyboard.models.export import (
    ExportAssetRef,
    ExportConfiguration,
    ExportNarration,
    ExportRequest,
    ExportScene,
    ExportSettingsSnapshot,
)
from storyboard.models.narration import NarrationResource

logger = logging.getLogger(__name__)


class ExportConfigurator:
    """Owns the editable export configuration.

    Building a request snapshots the timeline, the attachments and the
    narration into an immutable ``ExportRequest``. Nothing is enforced:
    missing narration or missing assets are flagged on the request, never
    rejected, because readiness is advisory.
    """

    def __init__(self, ids: IdAllocator, config: ExportConfiguration | None = None) -> None:
        self._ids = ids
        self.config = config or ExportConfiguration()

    def update(self, **changes: Any) -> ExportConfiguration:
        """Change one or more export settings.

        Raises:
            pydantic.ValidationError: If a value is outside its allowed set;
                the configuration is left unchanged.
        """
        merged = self.config.model_dump() | changes
        self.config = ExportConfiguration.model_validate(merged)
        return self.config

    def request_export(
        self,
        timeline: SceneTimeline,
        attachments: AttachmentIndex,
        narration: NarrationResource | None,
        script: str = "",
    ) -> ExportRequest:
        """Snapshot the current editor state into an export request.

        Args:
            timeline: Scenes in playback order.
            attachments: Resolves each scene's attached assets.
            narration: The ready narration resource, or None if pending.
            script: Script text to carry along for captions.

        Returns:
            A frozen request; building it has no effect on editor state.
        """
        scenes = tuple(
            ExportScene(
                id=scene.id,
                title=scene.title,
                summary=scene.summary,
                duration=scene.duration,
                transition=scene.transition,
                notes=scene.notes,
                assets=tuple(
                    _asset_ref(item) for item in attachments.resolve(scene.id)
                ),
            )
            for scene in timeline
        )

        if narration is None:
            export_narration = ExportNarration(pending=True)
        else:
            export_narration = ExportNarration(
                pending=False, name=narration.name, uri=narration.uri
            )

        request = ExportRequest(
            id=self._ids.allocate("export"),
            settings=ExportSettingsSnapshot(**self.config.model_dump()),
            scenes=scenes,
            narration=export_narration,
            script=script,
            catalog_size=len(attachments.catalog),
        )

        logger.info(
            "Built export request %s: %d scenes, %s %s, narration %s",
            request.id,
            len(scenes),
            request.settings.format.value,
            request.settings.resolution.value,
            "pending" if export_narration.pending else "attached",
        )
        if request.missing_assets:
            logger.warning(
                "Export %s references %d missing asset(s)",
                request.id,
                len(request.missing_assets),
            )
        return request


def _asset_ref(item: Asset | MissingAsset) -> ExportAssetRef:
    if isinstance(item, Asset):
        return ExportAssetRef(asset_id=item.id, name=item.name, type=item.type)
    return ExportAssetRef(asset_id=item.asset_id, missing=True)
