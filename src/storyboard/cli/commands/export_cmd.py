"""Export command: build an export request and queue it for rendering."""

from pathlib import Path

import typer
from pydantic import ValidationError

from storyboard.api.render_queue import FileRenderQueue
from storyboard.cli.commands.common import open_session
from storyboard.cli.ui.console import (
    console,
    print_error,
    print_info,
    print_muted,
    print_success,
    print_warning,
)
from storyboard.cli.ui.prompts import confirm_export
from storyboard.config import load_settings
from storyboard.models.export import ExportFormat, Resolution


def export_storyboard(
    script: Path | None = typer.Option(
        None, "--script", "-s", help="Text file with the script outline."
    ),
    asset: list[Path] | None = typer.Option(
        None, "--asset", "-a", help="Media file to import into the library. Repeatable."
    ),
    narration: Path | None = typer.Option(
        None, "--narration", "-n", help="Audio file to use as the voiceover."
    ),
    resolution: Resolution | None = typer.Option(
        None, "--resolution", "-r", help="Output resolution."
    ),
    export_format: ExportFormat | None = typer.Option(
        None, "--format", "-f", help="mp4 (H.264) or mov (Apple ProRes)."
    ),
    watermark: bool | None = typer.Option(
        None, "--watermark/--no-watermark", help="Include the branding watermark."
    ),
    captions: bool | None = typer.Option(
        None, "--captions/--no-captions", help="Embed captions."
    ),
    branding: str | None = typer.Option(
        None, "--branding", "-b", help="Branding text; pass '' to clear it."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the export request as JSON without queueing it."
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip the confirmation prompt."
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="Path to configuration YAML file."
    ),
) -> None:
    """Package the storyboard into an export request for the renderer.

    Export is never blocked: a missing voiceover or unresolved assets are
    flagged on the request. The request is written to the render queue in
    the build directory unless --dry-run is given.
    """
    settings = load_settings(config_file)
    session = open_session(settings, script=script, assets=asset, narration=narration)
    try:
        changes = {
            "resolution": resolution,
            "format": export_format,
            "include_watermark": watermark,
            "include_captions": captions,
            "branding_text": branding,
        }
        try:
            session.update_export(**{k: v for k, v in changes.items() if v is not None})
        except ValidationError as exc:
            print_error(f"Invalid export settings: {exc}")
            raise typer.Exit(code=1)

        request = session.build_export()
        readiness = session.readiness()

        if dry_run:
            console.print_json(request.model_dump_json())
            print_info(request.format_summary())
            return

        if request.narration.pending:
            print_warning("No voiceover attached; exporting anyway.")
        if readiness.score < 100:
            print_muted(f"Readiness {readiness.score}%: {', '.join(readiness.missing())}")

        if not yes and not confirm_export(request):
            print_info("Export cancelled.")
            raise typer.Exit()

        queue = FileRenderQueue(settings.build.exports_dir)
        session.export(queue, request)
        print_success(session.status_message or request.status_line())
        print_info(f"Request queued at {queue.path_for(request)}")
    finally:
        session.close()
