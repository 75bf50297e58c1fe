"""Rich console singleton and styled output helpers for the Storyboard CLI."""

from rich.console import Console
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from storyboard.core.readiness import ReadinessReport
from storyboard.models.assets import Asset
from storyboard.models.scenes import Scene

# Singleton console instance used throughout the CLI
console = Console()

# Style constants
BRAND_COLOR = "bright_magenta"
SUCCESS_COLOR = "green"
WARNING_COLOR = "yellow"
ERROR_COLOR = "red"
MUTED_COLOR = "dim"


def print_header(title: str) -> None:
    """Print a styled header panel for a CLI section."""
    console.print(
        Panel(
            Text(title, style=f"bold {BRAND_COLOR}", justify="center"),
            border_style=BRAND_COLOR,
            padding=(1, 2),
        )
    )


def print_success(message: str) -> None:
    console.print(f"[{SUCCESS_COLOR}]\\[+][/{SUCCESS_COLOR}] {message}")


def print_warning(message: str) -> None:
    console.print(f"[{WARNING_COLOR}]\\[!][/{WARNING_COLOR}] {message}")


def print_error(message: str) -> None:
    console.print(f"[{ERROR_COLOR}]\\[x][/{ERROR_COLOR}] {message}")


def print_info(message: str) -> None:
    console.print(f"[{BRAND_COLOR}]\\[*][/{BRAND_COLOR}] {message}")


def print_muted(message: str) -> None:
    console.print(f"[{MUTED_COLOR}]{message}[/{MUTED_COLOR}]")


def print_key_value_table(
    title: str, data: dict[str, str], title_style: str = BRAND_COLOR
) -> None:
    """Print a two-column key-value table."""
    table = Table(title=title, title_style=title_style, show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, value)
    console.print(table)


def print_scene_table(
    scenes: list[Scene],
    selected_id: str | None = None,
    asset_names: dict[str, str] | None = None,
) -> None:
    """Print the timeline as a table, marking the selected scene.

    Args:
        scenes: Scenes in playback order.
        selected_id: Id of the selected scene, highlighted with an arrow.
        asset_names: Asset id to display name; unknown ids show as missing.
    """
    asset_names = asset_names or {}
    table = Table(title="Storyboard", title_style=BRAND_COLOR)
    table.add_column("", width=2)
    table.add_column("#", justify="right")
    table.add_column("Scene", style="bold")
    table.add_column("Duration", justify="right")
    table.add_column("Transition")
    table.add_column("Assets")
    for position, scene in enumerate(scenes, start=1):
        assets = ", ".join(
            asset_names.get(aid, f"[{ERROR_COLOR}]missing:{aid}[/{ERROR_COLOR}]")
            for aid in scene.asset_ids
        )
        table.add_row(
            "▶" if scene.id == selected_id else "",
            str(position),
            scene.title,
            f"{scene.duration}s",
            scene.transition.value,
            assets or f"[{MUTED_COLOR}]none[/{MUTED_COLOR}]",
        )
    console.print(table)


def print_asset_table(assets: list[Asset]) -> None:
    """Print the asset catalog in display order."""
    table = Table(title="Media Library", title_style=BRAND_COLOR)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Source")
    for asset in assets:
        table.add_row(asset.name, asset.type.value.title(), asset.size, asset.source.value)
    console.print(table)


def print_readiness(report: ReadinessReport) -> None:
    """Print the readiness score as a bar followed by any unmet signals."""
    console.print(f"[bold]Timeline Progress[/bold]  {report.score}%")
    console.print(ProgressBar(total=100, completed=report.score, width=40))
    for label in report.missing():
        print_muted(f"  - {label}")
