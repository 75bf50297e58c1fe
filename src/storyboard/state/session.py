"""Editor session: the single owned aggregate of all storyboard state.

Every user action goes through an ``EditorSession``. It wires the
components to one id allocator, records a status message for the UI after
each change, and recomputes readiness on demand. There is no module-level
state; create one session per editing session and ``close()`` it at the end.
"""

import logging
from collections.abc import Iterable
from typing import Any

from storyboard.api.base import (
    MicrophoneProtocol,
    RendererProtocol,
    ScriptAssistantProtocol,
)
from storyboard.api.simulated import UnavailableMicrophone
from storyboard.config.settings import Settings
from storyboard.core.attachments import AttachmentIndex
from storyboard.core.catalog import AssetCatalog
from storyboard.core.exporter import ExportConfigurator
from storyboard.core.ids import IdAllocator, UuidIdAllocator, create_id_allocator
from storyboard.core.readiness import ReadinessReport, evaluate_readiness
from storyboard.core.timeline import MoveDirection, SceneTimeline
from storyboard.models.assets import LIBRARY_ASSETS, Asset, MissingAsset, RawFile
from storyboard.models.export import ExportConfiguration, ExportRequest
from storyboard.models.narration import NarrationResource
from storyboard.models.scenes import DEFAULT_SCRIPT, STARTER_SCENES, Scene, SceneTemplate
from storyboard.state.narration import NarrationCapture

logger = logging.getLogger(__name__)

DEFAULT_AI_SUMMARY = "Draft refined scene beats with AI for consistent tone and pacing."


class EditorSession:
    """All transient state of one storyboard editing session.

    Args:
        ids: Id allocator shared by scenes, assets, narration and exports.
        microphone: Microphone collaborator for voiceover capture.
        script: Initial script outline.
        starters: Scenes to seed the timeline with; the first is selected.
        library: Library assets to seed the catalog with.
        export_config: Initial export configuration.
    """

    def __init__(
        self,
        *,
        ids: IdAllocator | None = None,
        microphone: MicrophoneProtocol | None = None,
        script: str = "",
        starters: Iterable[SceneTemplate] = (),
        library: Iterable[Asset] = (),
        export_config: ExportConfiguration | None = None,
    ) -> None:
        self.ids = ids or UuidIdAllocator()
        self.script = script
        self.ai_summary = DEFAULT_AI_SUMMARY
        self.status_message: str | None = None

        self.catalog = AssetCatalog(self.ids, library)
        self.timeline = SceneTimeline(self.ids, starters)
        self.attachments = AttachmentIndex(self.timeline, self.catalog)
        self.narration = NarrationCapture(microphone or UnavailableMicrophone(), self.ids)
        self.exporter = ExportConfigurator(self.ids, export_config)

        self._assist_pending = False

    @classmethod
    def from_settings(
        cls, settings: Settings, *, microphone: MicrophoneProtocol | None = None
    ) -> "EditorSession":
        """Create a session seeded according to the editor settings."""
        editor = settings.editor
        return cls(
            ids=create_id_allocator(editor.id_strategy),
            microphone=microphone,
            script=DEFAULT_SCRIPT,
            starters=STARTER_SCENES if editor.seed_scenes else (),
            library=LIBRARY_ASSETS if editor.seed_library else (),
            export_config=settings.export.to_configuration(),
        )

    # ── Script & AI assist ──────────────────────────────────────────────────

    def set_script(self, text: str) -> None:
        self.script = text

    @property
    def assist_pending(self) -> bool:
        return self._assist_pending

    async def run_assist(self, assistant: ScriptAssistantProtocol) -> list[Scene] | None:
        """Rewrite the script with the assistant and append its scenes.

        The rest of the session stays editable while the assistant works. A
        call while another rewrite is pending is ignored.

        Returns:
            The scenes appended, or None if a rewrite was already pending.
        """
        if self._assist_pending:
            logger.debug("AI assist already running; ignoring request")
            return None

        self._assist_pending = True
        self.status_message = "Generating AI-assisted rewrite..."
        try:
            result = await assistant.rewrite(self.script)
        finally:
            self._assist_pending = False

        self.script = result.script
        if result.summary:
            self.ai_summary = result.summary
        added = [self.timeline.add_scene(template) for template in result.scenes]
        self.status_message = "AI suggestions ready."
        logger.info("AI assist applied, %d scene(s) appended", len(added))
        return added

    # ── Scenes ──────────────────────────────────────────────────────────────

    def select_scene(self, scene_id: str) -> bool:
        return self.timeline.select(scene_id)

    def add_scene(self, template: SceneTemplate | None = None) -> Scene:
        scene = self.timeline.add_scene(template)
        self.status_message = "Scene added to storyboard."
        return scene

    def update_scene(self, scene_id: str, field: str, value: Any) -> bool:
        return self.timeline.update_field(scene_id, field, value)

    def delete_scene(self, scene_id: str) -> bool:
        removed = self.timeline.delete_scene(scene_id)
        if removed:
            self.status_message = "Scene removed."
        return removed

    def move_scene_before(self, dragged_id: str, target_id: str) -> list[str]:
        before = self.timeline.order()
        after = self.timeline.move_before(dragged_id, target_id)
        if after != before:
            self.status_message = "Scene order updated."
        return after

    def move_scene_step(self, scene_id: str, direction: MoveDirection | str) -> list[str]:
        before = self.timeline.order()
        after = self.timeline.move_step(scene_id, direction)
        if after != before:
            self.status_message = "Scene order updated."
        return after

    # ── Assets ──────────────────────────────────────────────────────────────

    def import_assets(self, files: Iterable[RawFile]) -> list[Asset]:
        imported = self.catalog.import_files(files)
        if imported:
            self.status_message = f"{len(imported)} asset(s) added."
        return imported

    def attach_asset(self, scene_id: str, asset_id: str) -> bool:
        linked = self.attachments.attach(scene_id, asset_id)
        if linked:
            self.status_message = "Asset linked to scene."
        return linked

    def detach_asset(self, scene_id: str, asset_id: str) -> bool:
        unlinked = self.attachments.detach(scene_id, asset_id)
        if unlinked:
            self.status_message = "Asset removed from scene."
        return unlinked

    def scene_assets(self, scene_id: str) -> list[Asset | MissingAsset]:
        return self.attachments.resolve(scene_id)

    # ── Voiceover ───────────────────────────────────────────────────────────

    async def start_voiceover(self) -> bool:
        return await self.narration.start_capture()

    def stop_voiceover(self) -> bool:
        captured = self.narration.stop_capture()
        if captured:
            self.status_message = "Voiceover captured."
        return captured

    def import_voiceover(self, file: RawFile, data: bytes | None = None) -> NarrationResource:
        resource = self.narration.import_file(file, data)
        self.status_message = f'Voiceover "{file.name}" uploaded.'
        return resource

    def remove_voiceover(self) -> bool:
        removed = self.narration.clear()
        if removed:
            self.status_message = "Voiceover removed."
        return removed

    # ── Readiness & export ──────────────────────────────────────────────────

    def readiness(self) -> ReadinessReport:
        """Recompute the advisory readiness report for the current state."""
        return evaluate_readiness(
            self.script,
            self.timeline,
            self.catalog,
            self.narration.status,
            self.exporter.config,
        )

    def update_export(self, **changes: Any) -> ExportConfiguration:
        return self.exporter.update(**changes)

    def build_export(self) -> ExportRequest:
        """Snapshot the session into an export request without handing it off."""
        return self.exporter.request_export(
            self.timeline,
            self.attachments,
            self.narration.resource,
            script=self.script,
        )

    def export(
        self, renderer: RendererProtocol, request: ExportRequest | None = None
    ) -> ExportRequest:
        """Hand an export request to the renderer, building one if not given."""
        if request is None:
            request = self.build_export()
        renderer.submit(request)
        self.status_message = request.status_line()
        return request

    def close(self) -> None:
        """Release the narration resource and any live capture."""
        self.narration.close()
