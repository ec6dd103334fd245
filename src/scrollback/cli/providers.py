"""Provider functions for the CLI.

Centralizes creation of the message log and window configuration from
command options and environment variables. Hides configuration details
from command implementations.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..config import WindowConfig
from ..log import MessageSource, create_message_log

# Default console for output
_console = Console()


def get_message_log(
    size: int,
    source: Path | None = None,
    console: Console | None = None,
) -> MessageSource:
    """Create the message log for a command.

    Args:
        size: Number of messages in the generated demo channel
        source: JSON fixture to load instead of the demo channel
        console: Optional Rich console for output

    Raises:
        typer.Exit: If the log cannot be created
    """
    con = console or _console
    try:
        if source is not None:
            return create_message_log("json", path=source)
        return create_message_log("demo", size=size)
    except (OSError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        con.print(f"[red]Error: could not load message log: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def get_window_config(console: Console | None = None, **overrides: object) -> WindowConfig:
    """Create the window configuration from environment variables.

    Environment variables:
        SCROLLBACK_PAGE_SIZE, SCROLLBACK_JUMP_HALF_WIDTH,
        SCROLLBACK_HIGHLIGHT_ON_DELAY, SCROLLBACK_HIGHLIGHT_OFF_DELAY,
        SCROLLBACK_FETCH_LATENCY

    Raises:
        typer.Exit: If a value is invalid
    """
    con = console or _console
    try:
        return WindowConfig.from_env(**overrides)
    except ValidationError as e:
        con.print(f"[red]Error: invalid configuration:[/red]\n{escape(str(e))}")
        raise typer.Exit(code=1)
