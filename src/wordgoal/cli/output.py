"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with a goal bar tinted by progress, tables, and formatted messages.
"""

import colorsys

from rich.color import Color
from rich.console import Console
from rich.progress_bar import ProgressBar
from rich.style import Style
from rich.table import Table
from rich.text import Text

from wordgoal.core import ProgressState
from wordgoal.domain import Point, Rect

console = Console()

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# Saturation and brightness of the goal bar color.
BAR_SATURATION = 0.95
BAR_BRIGHTNESS = 0.95

BAR_WIDTH = 40


def progress_color(state: ProgressState) -> Color:
    """Map a progress state to a terminal color.

    Args:
        state: Progress snapshot

    Returns:
        Red when over the limit, otherwise the state's hue as RGB
    """
    if state.is_over_limit:
        return Color.parse("red")
    r, g, b = colorsys.hsv_to_rgb(state.color_hue, BAR_SATURATION, BAR_BRIGHTNESS)
    return Color.from_rgb(r * 255, g * 255, b * 255)


def print_progress(state: ProgressState, source: str | None = None) -> None:
    """Print the goal line: counts, tinted bar and remaining/over.

    Args:
        state: Progress snapshot
        source: Optional label for the counted text (e.g. a file name)
    """
    if source:
        label = Text("  ")
        label.append(source, style="bold")
        console.print(label)

    color = progress_color(state)
    console.print(f"  Goal: {state.limit:,} {SYM_DOT} Written Words: {state.count:,}")
    console.print(
        ProgressBar(
            total=1.0,
            completed=state.fraction,
            width=BAR_WIDTH,
            complete_style=Style(color=color),
            finished_style=Style(color=color),
        )
    )
    if state.is_over_limit:
        console.print(f"  [red]Over: {state.over_by:,}[/red]")
    else:
        console.print(f"  [dim]Remaining: {state.remaining:,}[/dim]")


def print_preferences(
    word_limit: int,
    font_size: float,
    focus_mode: bool,
    geometry: dict[str, float],
) -> None:
    """Print stored preferences as a table."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Word goal", f"{word_limit:,}")
    table.add_row("Font size", f"{font_size:g}pt")
    table.add_row("Focus mode", "on" if focus_mode else "off")
    for key, value in geometry.items():
        table.add_row(key, f"{value:g}")
    console.print(table)


def print_origin(desired: Point, origin: Point, display: Rect) -> None:
    """Print a placement result."""
    console.print(
        f"  ({desired.x:g}, {desired.y:g}) {SYM_DOT} display "
        f"({display.x:g}, {display.y:g}, {display.width:g}x{display.height:g})"
    )
    console.print(f"[bold green]{SYM_OK}[/bold green] origin ({origin.x:g}, {origin.y:g})")


def print_success(message: str) -> None:
    console.print(f"[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
