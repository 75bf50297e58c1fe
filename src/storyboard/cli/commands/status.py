"""Status command: show the storyboard, media library and readiness."""

from pathlib import Path

import typer

from storyboard.cli.commands.common import open_session
from storyboard.cli.ui.console import (
    console,
    print_asset_table,
    print_header,
    print_info,
    print_muted,
    print_readiness,
    print_scene_table,
    print_warning,
)
from storyboard.config import load_settings


def status(
    script: Path | None = typer.Option(
        None,
        "--script",
        "-s",
        help="Text file with the script outline. Defaults to the starter outline.",
    ),
    asset: list[Path] | None = typer.Option(
        None,
        "--asset",
        "-a",
        help="Media file to import into the library. Repeatable.",
    ),
    narration: Path | None = typer.Option(
        None,
        "--narration",
        "-n",
        help="Audio file to use as the voiceover.",
    ),
    config_file: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration YAML file.",
    ),
) -> None:
    """Show the storyboard timeline, media library and readiness score.

    The editor keeps no state between runs: every invocation starts from
    the starter storyboard and applies the files given as options.
    """
    settings = load_settings(config_file)
    session = open_session(settings, script=script, assets=asset, narration=narration)
    try:
        print_header("Storyboard Studio")
        asset_names = {a.id: a.name for a in session.catalog.list()}
        print_scene_table(session.timeline.scenes(), session.timeline.selected_id, asset_names)
        print_info(f"Total runtime: {session.timeline.total_duration()}s")
        console.print()
        print_asset_table(session.catalog.list())
        console.print()

        resource = session.narration.resource
        if resource is not None:
            print_info(f"Voiceover: {resource.name}")
        else:
            print_warning("Voiceover: pending upload")
        console.print()

        print_readiness(session.readiness())
        if session.status_message:
            print_muted(session.status_message)
    finally:
        session.close()
