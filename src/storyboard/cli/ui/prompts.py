"""Confirmation dialogs for the Storyboard CLI."""

import typer
from rich.panel import Panel
from rich.text import Text

from storyboard.models.export import ExportRequest

from .console import BRAND_COLOR, WARNING_COLOR, console


def confirm_export(request: ExportRequest) -> bool:
    """Show the export settings in a panel and ask the user to confirm.

    Returns:
        True if the user confirmed the handoff to the renderer.
    """
    settings = request.settings
    content = Text()
    content.append("Resolution: ", style="bold")
    content.append(f"{settings.resolution.value}\n")
    content.append("Format: ", style="bold")
    content.append(f"{settings.format.label}\n")
    content.append("Watermark: ", style="bold")
    content.append(f"{'yes' if settings.include_watermark else 'no'}\n")
    content.append("Branding: ", style="bold")
    content.append(f"{settings.branding_text or '(none)'}\n")
    content.append("Captions: ", style="bold")
    content.append(f"{'embedded' if settings.include_captions else 'off'}\n\n")
    content.append(
        request.format_summary(),
        style=WARNING_COLOR if request.narration.pending else "",
    )

    console.print(
        Panel(
            content,
            title="Export Storyboard",
            title_align="left",
            border_style=BRAND_COLOR,
        )
    )

    return typer.confirm("Send to renderer?", default=True)
