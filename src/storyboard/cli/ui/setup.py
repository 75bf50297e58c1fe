"""Setup checks for the AI assist provider."""

from storyboard.config.settings import Settings

from .console import console, print_error, print_info, print_muted, print_success


def run_setup_check(settings: Settings) -> bool:
    """Check that the configured assist provider can run.

    Returns:
        True if all required configuration is present, False otherwise.
    """
    provider = settings.assist.provider
    if provider == "anthropic" and not settings.has_anthropic_key():
        print_error("Missing ANTHROPIC_API_KEY for the anthropic assist provider.")
        console.print()
        print_info("Set the key using one of these methods:")
        print_muted("  1. Create a .env file with ANTHROPIC_API_KEY=sk-ant-...")
        print_muted("  2. Export in your shell: export ANTHROPIC_API_KEY=sk-ant-...")
        print_muted("  3. Switch to the offline assistant: assist.provider: simulated")
        return False

    print_success(f"Assist provider '{provider}' is ready.")
    return True
