"""External collaborator clients for Storyboard Studio."""

from .anthropic_assistant import AnthropicAssistant
from .base import (
    AssistResult,
    CaptureError,
    CaptureSessionProtocol,
    MicrophoneProtocol,
    MicrophoneUnavailableError,
    RendererProtocol,
    ScriptAssistantProtocol,
)
from .factory import create_script_assistant
from .render_queue import FileRenderQueue
from .simulated import SimulatedAssistant, UnavailableMicrophone

__all__ = [
    "AnthropicAssistant",
    "AssistResult",
    "CaptureError",
    "CaptureSessionProtocol",
    "FileRenderQueue",
    "MicrophoneProtocol",
    "MicrophoneUnavailableError",
    "RendererProtocol",
    "ScriptAssistantProtocol",
    "SimulatedAssistant",
    "UnavailableMicrophone",
    "create_script_assistant",
]
