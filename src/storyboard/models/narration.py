"""Narration resource handle."""

import logging
from collections.abc import Callable
from enum import StrEnum

logger = logging.getLogger(__name__)


class NarrationStatus(StrEnum):
    """Narration capture states."""

    IDLE = "idle"
    ACQUIRING = "acquiring"
    RECORDING = "recording"
    READY = "ready"


class NarrationResource:
    """A playable voice track backed by an external handle.

    The handle may be a finalized capture buffer or an imported file. It
    must be released exactly once when the editor stops using it;
    ``release()`` is idempotent so every exit path can call it.
    """

    def __init__(
        self,
        name: str,
        uri: str,
        *,
        media_type: str = "audio/webm",
        size_bytes: int = 0,
        data: bytes | None = None,
        on_release: Callable[[], None] | None = None,
    ) -> None:
        self.name = name
        self.uri = uri
        self.media_type = media_type
        self.size_bytes = size_bytes
        self.data = data
        self._on_release = on_release
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Free the underlying handle. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        self.data = None
        if self._on_release is not None:
            self._on_release()
        logger.debug("Released narration resource %s", self.uri)

    def __repr__(self) -> str:
        state = "released" if self._released else "live"
        return f"NarrationResource({self.name!r}, {self.uri!r}, {state})"
