"""Scene models for the storyboard timeline."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# Fields a user may edit in place through SceneTimeline.update_field
EDITABLE_FIELDS = ("title", "summary", "duration", "transition", "notes")

MIN_SCENE_DURATION = 3


class Transition(StrEnum):
    """Transition played when entering a scene."""

    CUT = "cut"
    FADE = "fade"
    SLIDE = "slide"
    ZOOM = "zoom"
    MORPH = "morph"


class SceneTemplate(BaseModel):
    """Scene content without an identity.

    Used to create new scenes, either from the "add scene" defaults or from
    a fully specified scene produced by the AI assistant.
    """

    title: str = Field(default="New Scene", description="Short scene heading")
    summary: str = Field(
        default="Describe the action or dialogue for this scene.",
        description="What happens on screen",
    )
    duration: int = Field(
        default=10,
        ge=MIN_SCENE_DURATION,
        description="Scene length in whole seconds",
    )
    transition: Transition = Field(
        default=Transition.CUT, description="Transition into this scene"
    )
    notes: str = Field(default="", description="Director notes, may be empty")


class Scene(SceneTemplate):
    """A single ordered unit of the video script."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., frozen=True, description="Opaque unique scene id")
    asset_ids: list[str] = Field(
        default_factory=list,
        description="Attached asset ids in attach order, no duplicates",
    )

    @classmethod
    def from_template(cls, scene_id: str, template: SceneTemplate) -> "Scene":
        """Create a scene with the given id from a template."""
        return cls(id=scene_id, **template.model_dump(include=set(EDITABLE_FIELDS)))


STARTER_SCENES: tuple[SceneTemplate, ...] = (
    SceneTemplate(
        title="Opening Hook",
        summary="Introduce the topic with a compelling question and establish the tone.",
        duration=12,
        transition=Transition.FADE,
        notes="Use quick motion graphics and upbeat music.",
    ),
    SceneTemplate(
        title="Problem Statement",
        summary="Highlight the main problem the audience faces with relatable visuals.",
        duration=18,
        transition=Transition.SLIDE,
        notes="Show data visualizations and supporting footage.",
    ),
    SceneTemplate(
        title="Solution Breakdown",
        summary="Demonstrate the product in action with callouts for key features.",
        duration=22,
        transition=Transition.ZOOM,
        notes="Focus on clarity and pacing; sync with voiceover cues.",
    ),
)

DEFAULT_SCRIPT = """\
Scene 1 – Opening Hook:
- Introduce the challenge of producing studio-quality videos quickly.
- Tease the AI-driven workflow that removes creative bottlenecks.

Scene 2 – Problem Statement:
- Showcase real-world footage of marketing teams juggling multiple tools.
- Highlight pain points with on-screen text overlays.

Scene 3 – Solution Breakdown:
- Demonstrate the storyboard interface and AI script suggestions.
- Emphasize collaboration, drag-and-drop editing, and branded exports."""
