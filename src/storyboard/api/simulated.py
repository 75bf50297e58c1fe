"""Offline collaborators: a canned AI assistant and a headless microphone.

Used when no API key is configured and in environments without audio
hardware, such as the CLI and CI.
"""

import asyncio
import logging

from storyboard.api.base import (
    AssistResult,
    CaptureSessionProtocol,
    MicrophoneUnavailableError,
)
from storyboard.models.scenes import SceneTemplate, Transition

logger = logging.getLogger(__name__)

DEFAULT_ASSIST_DELAY = 1.2  # seconds

SIMULATED_REWRITE = """\
Scene 1 – Spark the Curiosity:
- Pose a bold question about scaling video teams.
- Cut to dynamic footage with overlay text teasing automation.

Scene 2 – Visualize the Challenge:
- Present quick cuts of hectic production timelines and approvals.
- Layer in statistic callouts that reinforce the pain point.

Scene 3 – Guided Solution Tour:
- Navigate through the drag-and-drop storyboard builder.
- Show AI copy suggestions updating the script in real time.

Scene 4 – Finishing Touches:
- Drop in branded transitions, watermark, and multi-format export.
- End with a confident CTA reinforced by the narrator."""

SIMULATED_SUMMARY = (
    "AI rewrote the script to reinforce narrative arc and added a new closing scene."
)

FINISHING_TOUCHES = SceneTemplate(
    title="Finishing Touches",
    summary="Apply transitions, brand overlays, and prep export deliverables.",
    duration=14,
    transition=Transition.MORPH,
    notes="Show watermark controls and caption toggles.",
)


class SimulatedAssistant:
    """Returns a fixed rewrite after a fixed delay.

    Implements ScriptAssistantProtocol without any network access.
    """

    def __init__(self, delay: float = DEFAULT_ASSIST_DELAY) -> None:
        self.delay = delay

    async def rewrite(self, script: str) -> AssistResult:
        logger.debug("Simulating rewrite of %d characters", len(script))
        await asyncio.sleep(self.delay)
        return AssistResult(
            script=SIMULATED_REWRITE,
            summary=SIMULATED_SUMMARY,
            scenes=[FINISHING_TOUCHES.model_copy()],
        )


class UnavailableMicrophone:
    """A microphone that is never available.

    Implements MicrophoneProtocol for headless environments so the editor
    falls back to importing a voiceover file.
    """

    def __init__(self, reason: str = "No audio capture device in this environment") -> None:
        self.reason = reason

    async def request_microphone(self) -> CaptureSessionProtocol:
        raise MicrophoneUnavailableError(self.reason)
