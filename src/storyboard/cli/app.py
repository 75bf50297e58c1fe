"""Main Typer application for the Storyboard Studio CLI."""

import logging

import typer

from storyboard import __version__
from storyboard.cli.commands.assist import assist
from storyboard.cli.commands.config_cmd import config
from storyboard.cli.commands.export_cmd import export_storyboard
from storyboard.cli.commands.status import status
from storyboard.cli.ui.console import console

app = typer.Typer(
    name="storyboard",
    help="Compose short-video storyboards and hand them off for rendering.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"storyboard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log editor operations to stderr.",
    ),
) -> None:
    """Storyboard Studio: script, scenes, voiceover and export.

    Quick start: run [bold]storyboard status[/bold] to see the starter
    storyboard, [bold]storyboard assist[/bold] for an AI rewrite, and
    [bold]storyboard export[/bold] to queue a render.
    """
    setup_logging(verbose)


app.command()(status)
app.command()(assist)
app.command(name="export")(export_storyboard)
app.command()(config)
