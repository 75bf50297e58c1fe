"""Factory for creating the script assistant based on the provider setting."""

from storyboard.api.base import ScriptAssistantProtocol
from storyboard.config.settings import Settings


def create_script_assistant(settings: Settings) -> ScriptAssistantProtocol:
    """Create the AI assistant for the configured provider.

    Args:
        settings: Resolved application settings.

    Returns:
        A client implementing ``ScriptAssistantProtocol``.

    Raises:
        ValueError: If the anthropic provider is chosen without an API key,
            or if the provider name is unrecognised.
    """
    provider = settings.assist.provider

    if provider == "simulated":
        from storyboard.api.simulated import SimulatedAssistant

        return SimulatedAssistant(delay=settings.assist.delay_seconds)

    if provider == "anthropic":
        api_key = settings.api.anthropic_api_key.get_secret_value()
        if not api_key:
            raise ValueError(
                "ANTHROPIC_API_KEY is not set. "
                "Required for the anthropic assist provider. "
                "Set it in your .env file or environment variables."
            )

        from storyboard.api.anthropic_assistant import AnthropicAssistant

        return AnthropicAssistant(api_key=api_key, model=settings.api.anthropic_model)

    raise ValueError(
        f"Unknown assist provider: {provider!r}. "
        f"Supported providers: simulated, anthropic"
    )
