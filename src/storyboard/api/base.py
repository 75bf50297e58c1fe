"""Protocol definitions for the editor's external collaborators.

The AI assistant, the microphone and the renderer live outside the editor
core. Using Protocol instead of ABC keeps them duck-typed: any class with
matching method signatures conforms, which is what the tests rely on.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from storyboard.models.export import ExportRequest
from storyboard.models.narration import NarrationResource
from storyboard.models.scenes import SceneTemplate


class CaptureError(Exception):
    """Raised when a capture device fails to start or finalize."""


class MicrophoneUnavailableError(CaptureError):
    """Raised when microphone access is denied or no device exists."""


class AssistResult(BaseModel):
    """Output of one AI-assisted script rewrite."""

    script: str = Field(..., description="Replacement script text")
    summary: str = Field(default="", description="Short description of what changed")
    scenes: list[SceneTemplate] = Field(
        default_factory=list, description="Scenes to append to the timeline"
    )


@runtime_checkable
class ScriptAssistantProtocol(Protocol):
    """Protocol for AI script rewrite services."""

    async def rewrite(self, script: str) -> AssistResult:
        """Rewrite the script and propose additional scenes."""
        ...


@runtime_checkable
class CaptureSessionProtocol(Protocol):
    """A live microphone capture."""

    def stop(self) -> NarrationResource:
        """Stop capturing and finalize the buffered audio into a resource."""
        ...

    def close(self) -> None:
        """Release the device and stream. Must be safe to call after stop()."""
        ...


@runtime_checkable
class MicrophoneProtocol(Protocol):
    """Platform microphone access."""

    async def request_microphone(self) -> CaptureSessionProtocol:
        """Ask for microphone access and start a capture session.

        Raises:
            MicrophoneUnavailableError: If access is denied or no device exists.
        """
        ...


@runtime_checkable
class RendererProtocol(Protocol):
    """Consumer of export requests. Fire and forget."""

    def submit(self, request: ExportRequest) -> None:
        """Hand an export request to the render service."""
        ...
