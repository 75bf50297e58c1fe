"""Editor state for Storyboard Studio."""

from .narration import (
    CAPTURE_FAILED_MESSAGE,
    MICROPHONE_UNAVAILABLE_MESSAGE,
    Acquiring,
    Idle,
    NarrationCapture,
    NarrationState,
    Ready,
    Recording,
)
from .session import DEFAULT_AI_SUMMARY, EditorSession

__all__ = [
    "Acquiring",
    "CAPTURE_FAILED_MESSAGE",
    "DEFAULT_AI_SUMMARY",
    "EditorSession",
    "Idle",
    "MICROPHONE_UNAVAILABLE_MESSAGE",
    "NarrationCapture",
    "NarrationState",
    "Ready",
    "Recording",
]
