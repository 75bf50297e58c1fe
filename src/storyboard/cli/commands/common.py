"""Helpers shared by commands that build an editor session."""

from pathlib import Path

import typer

from storyboard.cli.ui.console import print_error
from storyboard.config.settings import Settings
from storyboard.models.assets import RawFile
from storyboard.state import EditorSession


def _require_file(path: Path, label: str) -> Path:
    if not path.is_file():
        print_error(f"{label} not found: {path}")
        raise typer.Exit(code=1)
    return path


def open_session(
    settings: Settings,
    *,
    script: Path | None = None,
    assets: list[Path] | None = None,
    narration: Path | None = None,
) -> EditorSession:
    """Create a seeded session and apply the files given on the command line.

    Exits with code 1 if any of the files does not exist.
    """
    session = EditorSession.from_settings(settings)
    if script is not None:
        session.set_script(_require_file(script, "Script file").read_text(encoding="utf-8"))
    if assets:
        session.import_assets(
            RawFile.from_path(_require_file(path, "Asset file")) for path in assets
        )
    if narration is not None:
        session.import_voiceover(RawFile.from_path(_require_file(narration, "Voiceover file")))
    return session
