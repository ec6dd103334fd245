"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import logging_setup
from ..errors import WindowError
from ..log import InMemoryMessageLog, build_demo_channel
from ..log.factory import DEMO_CHANNEL_SIZE
from ..sync import ListViewAdapter, ViewSync
from ..window import WindowController, WindowState
from .providers import get_message_log, get_window_config

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="scrollback",
    help="Windowed chat scrollback with jump-to-message and highlight pulses",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _render_window(adapter: ListViewAdapter, state: WindowState, log_size: int) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Id", style="cyan", width=6)
    table.add_column("Sender", style="yellow", width=6)
    table.add_column("Text")
    table.add_column("Reply to", style="magenta", width=8)

    target = adapter.scroll_target[0] if adapter.scroll_target is not None else None
    for index, message in enumerate(adapter.items):
        marker = ">" if index == target else str(index)
        style = "bold black on yellow" if message.highlighted else None
        table.add_row(
            marker,
            message.id,
            message.sender.value,
            message.text,
            message.reply_to or "",
            style=style,
        )
    console.print(table)

    summary = Table(show_header=False, box=None)
    summary.add_column("Field", style="bold cyan", width=15)
    summary.add_column("Value")
    if state.messages:
        summary.add_row("Window", f"{state.first_id}..{state.last_id} ({len(state)} of {log_size})")
    else:
        summary.add_row("Window", "empty")
    summary.add_row("Epoch", str(state.epoch))
    summary.add_row("Newer below", "yes" if state.has_more_newer else "no")
    highlighted = adapter.highlighted_ids()
    summary.add_row("Highlighted", ", ".join(highlighted) or "none")
    console.print(summary)


@app.command()
def show(
    size: int = typer.Option(
        DEMO_CHANNEL_SIZE,
        "--size",
        "-n",
        help="Number of messages in the demo channel"
    ),
    source: Path | None = typer.Option(
        None,
        "--source",
        "-s",
        help="JSON message fixture to browse instead of the demo channel"
    ),
    jump: str | None = typer.Option(
        None,
        "--jump",
        "-j",
        help="Re-center the window on this message id"
    ),
    older: int = typer.Option(
        0,
        "--older",
        min=0,
        help="Number of older pages to load"
    ),
    newer: int = typer.Option(
        0,
        "--newer",
        min=0,
        help="Number of newer pages to load"
    ),
    highlight: str | None = typer.Option(
        None,
        "--highlight",
        help="Bring this message into view as a reply link would"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, or error"
    ),
):
    """Run the window engine headless and print the resulting window."""
    logging_setup.configure(log_level)
    message_log = get_message_log(size, source, console)
    config = get_window_config(console)

    async def _show():
        controller = WindowController(message_log, config)
        view_sync = ViewSync(controller)
        adapter = ListViewAdapter()
        view_sync.attach(adapter)
        try:
            if jump is not None:
                await controller.jump_to_window(jump)
            else:
                await controller.load_initial()
            for _ in range(older):
                if not await controller.load_older():
                    break
            for _ in range(newer):
                if not await controller.load_newer():
                    break
            if highlight is not None:
                await controller.scroll_or_jump(highlight)

            if jump is not None or highlight is not None:
                # Render midway through the pulse, after on and before off
                await asyncio.sleep(
                    (config.highlight_on_delay + config.highlight_off_delay) / 2
                )

            _render_window(adapter, controller.state, len(message_log))
        except WindowError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)
        finally:
            view_sync.detach(adapter)

    asyncio.run(_show())


@app.command(name="tui")
def tui_command(
    size: int = typer.Option(
        DEMO_CHANNEL_SIZE,
        "--size",
        "-n",
        help="Number of messages in the demo channel"
    ),
    source: Path | None = typer.Option(
        None,
        "--source",
        "-s",
        help="JSON message fixture to browse instead of the demo channel"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive channel viewer."""
    # Records go to the in-app log panel, never to the terminal
    logging_setup.configure(log_level, console=False)
    message_log = get_message_log(size, source, console)
    config = get_window_config(console)

    async def _tui():
        from ..ui import run_textual_tui

        await run_textual_tui(message_log, config=config, log_level=log_level)

    asyncio.run(_tui())


@app.command(name="export-demo")
def export_demo(
    path: Path = typer.Argument(..., help="Where to write the JSON fixture"),
    size: int = typer.Option(
        DEMO_CHANNEL_SIZE,
        "--size",
        "-n",
        help="Number of messages in the demo channel"
    ),
):
    """Write the demo channel as a JSON fixture usable with --source."""
    try:
        message_log = InMemoryMessageLog(build_demo_channel(size))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(message_log.to_json(), encoding="utf-8")
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Wrote {len(message_log)} messages to {path}[/green]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
