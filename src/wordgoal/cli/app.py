"""CLI application entry point for wordgoal.

This module provides the main CLI interface using Typer.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from wordgoal import __version__
from wordgoal.cli.output import (
    console,
    print_error,
    print_origin,
    print_preferences,
    print_progress,
    print_success,
)
from wordgoal.config import LoggingConfig, StoreConfig, WordgoalSettings
from wordgoal.core import compute_progress, count_words
from wordgoal.domain import Point, Rect, Size
from wordgoal.exceptions import WordgoalError
from wordgoal.store import JsonFileStore, Preferences, parse_word_limit_text
from wordgoal.utils import configure_logging
from wordgoal.window import StaticDisplayLayout, clamp_origin, select_visible_rect

DEFAULT_STORE_PATH = Path("~/.wordgoal.json")

# Create the Typer app
app = typer.Typer(
    name="wordgoal",
    help="Count words against a goal and manage editor preferences.",
    add_completion=False,
    no_args_is_help=True,
)


class FontAction(str, Enum):
    UP = "up"
    DOWN = "down"
    RESET = "reset"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]wordgoal[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    store: Annotated[
        Path,
        typer.Option(
            "--store",
            "-s",
            help="Preferences file",
            envvar="WORDGOAL_STORE",
        ),
    ] = DEFAULT_STORE_PATH,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors to the console",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Count words against a goal and manage editor preferences."""
    settings = WordgoalSettings(
        store=StoreConfig(path=store.expanduser()),
        logging=LoggingConfig(log_file=log_file, log_level=log_level, quiet=quiet),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=settings.logging.quiet,
    )
    ctx.obj = settings


def _preferences(ctx: typer.Context) -> Preferences:
    settings: WordgoalSettings = ctx.obj
    if settings.store.path is None:
        print_error("No preferences file configured", details="Pass --store or set WORDGOAL_STORE.")
        raise typer.Exit(code=1)
    return Preferences(
        JsonFileStore(settings.store.path),
        counter=settings.counter,
        editor=settings.editor,
    )


def _read_text(source: str) -> str:
    if source == "-":
        return typer.get_text_stream("stdin").read()
    path = Path(source)
    if not path.is_file():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Could not read {path}", details=str(e))
        raise typer.Exit(code=1) from e


def _parse_rect(value: str) -> Rect:
    parts = value.split(",")
    if len(parts) != 4:
        raise typer.BadParameter(f"expected x,y,width,height, got {value!r}")
    try:
        x, y, width, height = (float(p) for p in parts)
    except ValueError as e:
        raise typer.BadParameter(f"non-numeric rectangle {value!r}") from e
    return Rect(x, y, width, height)


@app.command()
def count(
    ctx: typer.Context,
    source: Annotated[
        str,
        typer.Argument(
            help="Text file to count, or '-' for stdin",
            show_default=False,
        ),
    ],
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Word goal for this run (default: stored goal)",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the progress state as JSON",
        ),
    ] = False,
) -> None:
    """Count words and show progress toward the goal.

    A single hyphen joins words ("well-being" is one word); en dashes, em
    dashes and runs of two or more hyphens separate them.
    """
    text = _read_text(source)
    settings: WordgoalSettings = ctx.obj

    if limit is None:
        goal = _preferences(ctx).word_limit
    else:
        goal = settings.counter.clamp(limit)

    state = compute_progress(count_words(text), goal)
    if as_json:
        console.print_json(data=state.to_dict())
    else:
        print_progress(state, source=None if source == "-" else source)


@app.command()
def goal(
    ctx: typer.Context,
    value: Annotated[
        str | None,
        typer.Argument(
            help="New word goal (clamped to 1-10000); omit to show the current goal",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Show or set the word goal."""
    prefs = _preferences(ctx)
    try:
        if value is None:
            console.print(f"Word goal: {prefs.word_limit:,}")
            return
        requested = parse_word_limit_text(value)
        if requested is None:
            print_error(f"Invalid word goal: {value}", details="Expected a whole number.")
            raise typer.Exit(code=1)
        prefs.word_limit = requested
        print_success(f"Word goal set to {prefs.word_limit:,}")
    except WordgoalError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def font(
    ctx: typer.Context,
    action: Annotated[
        FontAction,
        typer.Argument(help="up, down or reset", show_default=False),
    ],
) -> None:
    """Change the editor font size."""
    prefs = _preferences(ctx)
    try:
        if action is FontAction.UP:
            size = prefs.increase_font_size()
        elif action is FontAction.DOWN:
            size = prefs.decrease_font_size()
        else:
            size = prefs.reset_font_size()
    except WordgoalError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Font size {size:g}pt")


@app.command()
def focus(ctx: typer.Context) -> None:
    """Toggle focus mode."""
    prefs = _preferences(ctx)
    try:
        enabled = prefs.toggle_focus_mode()
    except WordgoalError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Focus mode {'enabled' if enabled else 'disabled'}")


@app.command()
def reset(ctx: typer.Context) -> None:
    """Reset font size and word goal to their defaults."""
    prefs = _preferences(ctx)
    try:
        prefs.reset_defaults()
    except WordgoalError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(
        f"Defaults restored ({prefs.editor_font_size:g}pt / {prefs.word_limit:,} words)"
    )


@app.command()
def show(ctx: typer.Context) -> None:
    """Show stored preferences."""
    prefs = _preferences(ctx)
    geometry = prefs.window_geometry
    print_preferences(
        word_limit=prefs.word_limit,
        font_size=prefs.editor_font_size,
        focus_mode=prefs.focus_mode,
        geometry={
            "Window width": geometry.width,
            "Window height": geometry.height,
            "Window x": geometry.origin_x,
            "Window y": geometry.origin_y,
        },
    )


@app.command()
def place(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Desired origin x")],
    y: Annotated[float, typer.Argument(help="Desired origin y")],
    width: Annotated[float, typer.Argument(help="Frame width", min=0.0)],
    height: Annotated[float, typer.Argument(help="Frame height", min=0.0)],
    display: Annotated[
        list[str] | None,
        typer.Option(
            "--display",
            "-d",
            help="Visible display frame as x,y,width,height (repeatable)",
        ),
    ] = None,
    main: Annotated[
        str | None,
        typer.Option(
            "--main",
            help="Visible frame of the main display as x,y,width,height",
        ),
    ] = None,
) -> None:
    """Compute where a window restored at (x, y) would be placed."""
    settings: WordgoalSettings = ctx.obj
    layout = StaticDisplayLayout(
        rects=[_parse_rect(d) for d in display or []],
        main=_parse_rect(main) if main else None,
    )
    desired = Point(x, y)
    target = select_visible_rect(
        desired,
        layout.visible_rects(),
        layout.main_visible_rect(),
        settings.window.default_visible_rect,
    )
    print_origin(desired, clamp_origin(desired, Size(width, height), target), target)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
