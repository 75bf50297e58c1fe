"""Narration capture state machine.

Tracks the single project voice track through four states::

    idle ──start_capture()──▶ acquiring ──granted──▶ recording ──stop_capture()──▶ ready
      ▲                          │ denied                                        │
      └──────────────────────────┴───────────────────clear()─────────────────────┘

``import_file()`` jumps to ready from any state. Starting a capture from
``ready`` keeps the current narration inside ``acquiring`` until recording
actually begins; a denied or abandoned request falls back to it. Whatever
the path, at most one narration resource is live: leaving ``recording``
always closes the capture session and a held resource is released unless
it is carried into the next state.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from storyboard.api.base import (
    CaptureError,
    CaptureSessionProtocol,
    MicrophoneProtocol,
    MicrophoneUnavailableError,
)
from storyboard.core.ids import IdAllocator
from storyboard.models.assets import RawFile
from storyboard.models.narration import NarrationResource, NarrationStatus

logger = logging.getLogger(__name__)

MICROPHONE_UNAVAILABLE_MESSAGE = (
    "Microphone access unavailable. You can upload a voiceover file instead."
)
CAPTURE_FAILED_MESSAGE = "Voiceover capture failed. Try recording again or upload a file."


@dataclass(frozen=True)
class Idle:
    """No narration. May carry the advisory message of the last failure."""

    error: str | None = None
    status: ClassVar[NarrationStatus] = NarrationStatus.IDLE


@dataclass(frozen=True, eq=False)
class Acquiring:
    """Microphone request in flight. Compared by identity.

    ``previous`` is the narration that was ready when the request started.
    It stays live until recording begins.
    """

    previous: NarrationResource | None = None
    status: ClassVar[NarrationStatus] = NarrationStatus.ACQUIRING


@dataclass(frozen=True)
class Recording:
    """A live capture session owns the microphone."""

    session: CaptureSessionProtocol
    status: ClassVar[NarrationStatus] = NarrationStatus.RECORDING


@dataclass(frozen=True)
class Ready:
    """A playable narration resource exists.

    ``error`` is set when a re-record attempt failed and this narration
    was kept.
    """

    resource: NarrationResource
    error: str | None = None
    status: ClassVar[NarrationStatus] = NarrationStatus.READY


NarrationState = Idle | Acquiring | Recording | Ready

def _held(state: NarrationState) -> NarrationResource | None:
    if isinstance(state, Ready):
        return state.resource
    if isinstance(state, Acquiring):
        return state.previous
    return None


_ALLOWED: dict[NarrationStatus, frozenset[NarrationStatus]] = {
    NarrationStatus.IDLE: frozenset(
        {NarrationStatus.IDLE, NarrationStatus.ACQUIRING, NarrationStatus.READY}
    ),
    NarrationStatus.ACQUIRING: frozenset(
        {NarrationStatus.IDLE, NarrationStatus.RECORDING, NarrationStatus.READY}
    ),
    NarrationStatus.RECORDING: frozenset({NarrationStatus.IDLE, NarrationStatus.READY}),
    NarrationStatus.READY: frozenset(
        {NarrationStatus.IDLE, NarrationStatus.ACQUIRING, NarrationStatus.READY}
    ),
}


class NarrationCapture:
    """Owns the project's single narration slot.

    Args:
        microphone: Platform microphone collaborator.
        ids: Allocator used to name imported narration resources.
    """

    def __init__(self, microphone: MicrophoneProtocol, ids: IdAllocator) -> None:
        self._microphone = microphone
        self._ids = ids
        self._state: NarrationState = Idle()

    @property
    def state(self) -> NarrationState:
        return self._state

    @property
    def status(self) -> NarrationStatus:
        return self._state.status

    @property
    def resource(self) -> NarrationResource | None:
        """The live narration resource, if one is ready."""
        return self._state.resource if isinstance(self._state, Ready) else None

    @property
    def error(self) -> str | None:
        """Advisory message left by the last failed capture attempt."""
        return self._state.error if isinstance(self._state, (Idle, Ready)) else None

    @property
    def is_ready(self) -> bool:
        return isinstance(self._state, Ready)

    async def start_capture(self) -> bool:
        """Request the microphone and begin recording.

        A call while a request is in flight or a capture is running is a
        no-op. Starting from ``ready`` replaces the current narration only
        once the microphone is granted. If the microphone is unavailable the
        state falls back to the previous narration, or to idle, with an
        advisory error; there is no automatic retry.

        Returns:
            True if recording started.
        """
        if isinstance(self._state, (Acquiring, Recording)):
            logger.debug("Capture already %s; ignoring start", self.status.value)
            return False

        pending = Acquiring(previous=self.resource)
        self._transition(pending)
        try:
            session = await self._microphone.request_microphone()
        except MicrophoneUnavailableError as exc:
            logger.warning("Microphone unavailable: %s", exc)
            if self._state is pending:
                self._restore(pending, MICROPHONE_UNAVAILABLE_MESSAGE)
            return False
        except BaseException:
            if self._state is pending:
                self._restore(pending)
            raise

        if self._state is not pending:
            # An import replaced the pending capture while we were waiting.
            logger.debug("Discarding microphone granted after narration changed")
            session.close()
            return False

        self._transition(Recording(session))
        logger.info("Voiceover recording started")
        return True

    def stop_capture(self) -> bool:
        """Finalize the running capture into a playable resource.

        The capture session is closed on every exit from ``recording``,
        including a failed finalization.

        Returns:
            True if a narration resource was produced.
        """
        state = self._state
        if not isinstance(state, Recording):
            return False

        try:
            resource = state.session.stop()
        except CaptureError as exc:
            logger.warning("Voiceover capture failed: %s", exc)
            self._transition(Idle(error=CAPTURE_FAILED_MESSAGE))
            return False
        except BaseException:
            self._transition(Idle())
            raise

        self._transition(Ready(resource))
        logger.info("Voiceover captured: %s", resource.uri)
        return True

    def import_file(self, file: RawFile, data: bytes | None = None) -> NarrationResource:
        """Use an uploaded file as the narration, from any state.

        Any previous narration is released and any live capture is closed.

        Returns:
            The new narration resource.
        """
        resource = NarrationResource(
            name=file.name,
            uri=f"memory://{self._ids.allocate('narration')}",
            media_type=file.media_type or "audio/*",
            size_bytes=file.size_bytes,
            data=data,
        )
        self._transition(Ready(resource))
        logger.info("Voiceover %r imported", file.name)
        return resource

    def clear(self) -> bool:
        """Drop the current narration and any advisory error.

        Returns:
            True if a narration resource was released.
        """
        if isinstance(self._state, Ready):
            self._transition(Idle())
            logger.info("Voiceover removed")
            return True
        if isinstance(self._state, Idle) and self._state.error is not None:
            self._transition(Idle())
        return False

    def _restore(self, pending: Acquiring, error: str | None = None) -> None:
        if pending.previous is not None:
            self._transition(Ready(pending.previous, error=error))
        else:
            self._transition(Idle(error=error))

    def close(self) -> None:
        """Release every handle and return to idle. Used at session end."""
        if not isinstance(self._state, Idle):
            self._transition(Idle())

    def _transition(self, new_state: NarrationState) -> None:
        old_state = self._state
        if new_state.status not in _ALLOWED[old_state.status]:
            raise RuntimeError(
                f"Invalid narration transition: {old_state.status.value} -> "
                f"{new_state.status.value}"
            )

        if isinstance(old_state, Recording):
            old_state.session.close()
        held = _held(old_state)
        if held is not None and _held(new_state) is not held:
            held.release()

        self._state = new_state
        logger.debug("Narration %s -> %s", old_state.status.value, new_state.status.value)
