"""Claude-backed script assistant using tool-use structured output."""

import json
import logging
from typing import Any

import anthropic
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from storyboard.api.base import AssistResult

logger = logging.getLogger(__name__)

# Transient errors worth retrying (rate limits, server errors, connection issues)
_RETRYABLE_ERRORS = (
    anthropic.APITimeoutError,
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)

DEFAULT_MODEL = "claude-sonnet-4-20250514"

TOOL_NAME = "storyboard_rewrite"

REWRITE_PROMPT = """\
You are a script editor for short marketing and explainer videos. \
Rewrite the user's storyboard outline so that it has a clear narrative arc: \
a hook, the problem, the solution and a confident close.

Keep the outline format: one "Scene N – Title:" heading per scene followed by \
two or three "- " bullet lines describing what is shown on screen.

Return:
1. **script**: the full rewritten outline.
2. **summary**: one sentence telling the user what you changed.
3. **scenes**: only the scenes you ADDED that are not already in the outline, \
each with title, summary, duration (whole seconds, at least 3), transition \
(one of: cut, fade, slide, zoom, morph) and short director notes. \
Return an empty list if you added no scenes."""


class AnthropicAssistant:
    """Rewrites scripts with Claude.

    Implements ScriptAssistantProtocol. The AssistResult JSON schema is sent
    as a forced tool call so the response is always structured.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4096,
    ) -> None:
        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model
        self.max_tokens = max_tokens

    async def rewrite(self, script: str) -> AssistResult:
        """Rewrite a script and propose scenes to append.

        Raises:
            ValueError: If the response has no structured rewrite.
            pydantic.ValidationError: If the rewrite does not fit AssistResult.
            anthropic.APIError: On non-retryable API errors.
        """
        data = await self._request_rewrite(script)
        result = AssistResult.model_validate(data)
        logger.info(
            "Assistant returned %d characters and %d new scene(s)",
            len(result.script),
            len(result.scenes),
        )
        return result

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=60),
        retry=retry_if_exception_type(_RETRYABLE_ERRORS),
        reraise=True,
    )
    async def _request_rewrite(self, script: str) -> dict[str, Any]:
        tool = {
            "name": TOOL_NAME,
            "description": "Submit the rewritten storyboard script.",
            "input_schema": AssistResult.model_json_schema(),
        }
        logger.debug("Requesting rewrite from %s", self.model)
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=REWRITE_PROMPT,
            messages=[{"role": "user", "content": script}],
            tools=[tool],
            tool_choice={"type": "tool", "name": TOOL_NAME},
        )

        for block in response.content:
            if block.type == "tool_use" and block.name == TOOL_NAME:
                payload: Any = block.input
                if isinstance(payload, str):
                    payload = json.loads(payload)
                # Claude occasionally wraps tool input in {"output": {...}}
                if isinstance(payload.get("output"), dict):
                    payload = payload["output"]
                return dict(payload)

        raise ValueError(
            f"No structured rewrite found in response. "
            f"Expected tool_use block with name '{TOOL_NAME}'."
        )
