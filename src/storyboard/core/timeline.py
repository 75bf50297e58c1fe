"""Scene timeline: the ordered scene sequence and the current selection."""

import logging
from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import Any

from storyboard.core.ids import IdAllocator
from storyboard.models.scenes import EDITABLE_FIELDS, Scene, SceneTemplate

logger = logging.getLogger(__name__)


class MoveDirection(StrEnum):
    """Direction for a one-step move."""

    UP = "up"
    DOWN = "down"


class SceneTimeline:
    """Owns the playback-ordered scenes and the selected scene id.

    Every reorder is a single extract-then-reinsert on the scene list, so
    no intermediate state ever duplicates or drops a scene. Operations that
    name a scene id which is no longer present are silent no-ops.
    """

    def __init__(self, ids: IdAllocator, starters: Iterable[SceneTemplate] = ()) -> None:
        self._ids = ids
        self._scenes: list[Scene] = []
        self._selected_id: str | None = None
        for template in starters:
            self._scenes.append(Scene.from_template(ids.allocate("scene"), template))
        if self._scenes:
            self._selected_id = self._scenes[0].id

    # ── Queries ─────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[Scene]:
        return iter(list(self._scenes))

    def __contains__(self, scene_id: object) -> bool:
        return self._index_of(scene_id) is not None

    def scenes(self) -> list[Scene]:
        """Return the scenes in playback order."""
        return list(self._scenes)

    def order(self) -> list[str]:
        """Return the scene ids in playback order."""
        return [scene.id for scene in self._scenes]

    def get(self, scene_id: str) -> Scene | None:
        index = self._index_of(scene_id)
        return None if index is None else self._scenes[index]

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected_scene(self) -> Scene | None:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def total_duration(self) -> int:
        """Sum of all scene durations in seconds."""
        return sum(scene.duration for scene in self._scenes)

    # ── Mutations ───────────────────────────────────────────────────────────

    def select(self, scene_id: str) -> bool:
        """Select an existing scene. Unknown ids leave the selection alone."""
        if scene_id not in self:
            logger.debug("Ignoring selection of unknown scene %s", scene_id)
            return False
        self._selected_id = scene_id
        return True

    def add_scene(self, template: SceneTemplate | None = None) -> Scene:
        """Append a new scene and select it.

        Args:
            template: Scene content to use. Defaults to a blank "New Scene".

        Returns:
            The created scene.
        """
        scene = Scene.from_template(self._ids.allocate("scene"), template or SceneTemplate())
        self._scenes.append(scene)
        self._selected_id = scene.id
        logger.info("Added scene %s (%s)", scene.id, scene.title)
        return scene

    def update_field(self, scene_id: str, field: str, value: Any) -> bool:
        """Set one editable attribute of a scene in place.

        Returns:
            True if the scene exists and was updated, False for an unknown id.

        Raises:
            ValueError: If ``field`` is not an editable scene attribute.
            pydantic.ValidationError: If ``value`` is invalid for the field;
                the scene is left unchanged.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(
                f"Cannot update scene field {field!r}. "
                f"Editable fields: {', '.join(EDITABLE_FIELDS)}"
            )
        scene = self.get(scene_id)
        if scene is None:
            logger.debug("Ignoring update of unknown scene %s", scene_id)
            return False
        setattr(scene, field, value)
        return True

    def delete_scene(self, scene_id: str) -> bool:
        """Remove a scene, moving the selection to the first scene if needed."""
        index = self._index_of(scene_id)
        if index is None:
            logger.debug("Ignoring delete of unknown scene %s", scene_id)
            return False
        del self._scenes[index]
        if self._selected_id == scene_id:
            self._selected_id = self._scenes[0].id if self._scenes else None
        logger.info("Removed scene %s", scene_id)
        return True

    def move_before(self, dragged_id: str, target_id: str) -> list[str]:
        """Drop ``dragged_id`` onto the slot currently held by ``target_id``.

        The target's index is taken before the dragged scene is extracted,
        then the dragged scene is reinserted at that index. Dragging upward
        lands it just before the target; dragging downward lands it just
        after, so a drop onto the last scene makes it last. Equal or unknown
        ids are no-ops.

        Returns:
            The scene order after the move.
        """
        if dragged_id == target_id:
            return self.order()
        from_index = self._index_of(dragged_id)
        to_index = self._index_of(target_id)
        if from_index is None or to_index is None:
            logger.debug("Ignoring move of %s before %s", dragged_id, target_id)
            return self.order()

        dragged = self._scenes.pop(from_index)
        self._scenes.insert(to_index, dragged)
        logger.debug("Moved scene %s before %s", dragged_id, target_id)
        return self.order()

    def move_step(self, scene_id: str, direction: MoveDirection | str) -> list[str]:
        """Move a scene one position toward the start (up) or end (down).

        Returns:
            The scene order after the move; unchanged at the boundary.
        """
        direction = MoveDirection(direction)
        index = self._index_of(scene_id)
        if index is None:
            return self.order()

        new_index = index - 1 if direction is MoveDirection.UP else index + 1
        if not 0 <= new_index < len(self._scenes):
            return self.order()

        scene = self._scenes.pop(index)
        self._scenes.insert(new_index, scene)
        logger.debug("Moved scene %s %s", scene_id, direction.value)
        return self.order()

    def _index_of(self, scene_id: object) -> int | None:
        for index, scene in enumerate(self._scenes):
            if scene.id == scene_id:
                return index
        return None
