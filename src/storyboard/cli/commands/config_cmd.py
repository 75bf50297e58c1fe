"""Config command: view current configuration settings."""

import typer

from storyboard.cli.ui.console import (
    console,
    print_header,
    print_key_value_table,
    print_muted,
)
from storyboard.cli.ui.setup import run_setup_check
from storyboard.config import load_settings


def config(
    check: bool = typer.Option(
        False,
        "--check",
        help="Validate that the assist provider is configured.",
    ),
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file.",
    ),
) -> None:
    """View current configuration and validate setup.

    API keys are masked. Use --check to verify the AI assist provider can run.
    """
    settings = load_settings(config_file)

    if check:
        if not run_setup_check(settings):
            raise typer.Exit(code=1)
        return

    print_header("Storyboard Configuration")

    anthropic = settings.api.anthropic_api_key.get_secret_value()
    print_key_value_table(
        "API",
        {
            "ANTHROPIC_API_KEY": _mask_key(anthropic) if anthropic else "[red]not set[/red]",
            "Model": settings.api.anthropic_model,
        },
    )
    console.print()

    print_key_value_table(
        "AI Assist",
        {
            "Provider": settings.assist.provider,
            "Simulated Delay": f"{settings.assist.delay_seconds}s",
        },
    )
    console.print()

    print_key_value_table(
        "Editor",
        {
            "Id Strategy": settings.editor.id_strategy,
            "Seed Library": str(settings.editor.seed_library),
            "Seed Scenes": str(settings.editor.seed_scenes),
        },
    )
    console.print()

    export = settings.export
    print_key_value_table(
        "Export Defaults",
        {
            "Resolution": export.resolution.value,
            "Format": export.format.label,
            "Watermark": str(export.include_watermark),
            "Branding Text": export.branding_text or "[dim]none[/dim]",
            "Captions": str(export.include_captions),
        },
    )
    console.print()

    print_key_value_table(
        "Build",
        {
            "Build Directory": settings.build_dir,
            "Render Queue": str(settings.build.exports_dir),
        },
    )

    print_muted("\nTip: use 'storyboard config --check' to validate your setup.")


def _mask_key(key: str) -> str:
    """Mask an API key, showing only the last 4 characters."""
    if len(key) <= 4:
        return "****"
    return f"{'*' * (len(key) - 4)}{key[-4:]}"
