"""Assist command: rewrite the script outline with the AI assistant."""

import asyncio
from pathlib import Path

import typer
from rich.panel import Panel

from storyboard.api.factory import create_script_assistant
from storyboard.cli.commands.common import open_session
from storyboard.cli.ui.console import (
    BRAND_COLOR,
    console,
    print_error,
    print_readiness,
    print_scene_table,
    print_success,
)
from storyboard.cli.ui.progress import spinner
from storyboard.cli.ui.setup import run_setup_check
from storyboard.config import load_settings


def assist(
    script: Path | None = typer.Option(
        None,
        "--script",
        "-s",
        help="Text file with the script outline. Defaults to the starter outline.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rewritten script to this file.",
    ),
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file.",
    ),
) -> None:
    """Rewrite the script with AI and append the scenes it suggests.

    Uses the configured assist provider: the offline simulated assistant
    by default, or Claude when assist.provider is 'anthropic'.
    """
    settings = load_settings(config_file)
    if not run_setup_check(settings):
        raise typer.Exit(code=1)

    session = open_session(settings, script=script)
    try:
        assistant = create_script_assistant(settings)
        with spinner(session.status_message or "Generating AI-assisted rewrite..."):
            asyncio.run(session.run_assist(assistant))

        console.print(Panel(session.script, title="Script", border_style=BRAND_COLOR))
        print_success(session.ai_summary)
        asset_names = {a.id: a.name for a in session.catalog.list()}
        print_scene_table(session.timeline.scenes(), session.timeline.selected_id, asset_names)
        print_readiness(session.readiness())

        if output is not None:
            output.write_text(session.script, encoding="utf-8")
            print_success(f"Script written to {output}")
    except ValueError as exc:
        print_error(f"AI assist failed: {exc}")
        raise typer.Exit(code=1)
    finally:
        session.close()
