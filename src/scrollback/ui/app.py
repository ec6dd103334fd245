"""Main Textual TUI application.

Wires the window controller, the view sync bridge and the widgets together,
and turns user interaction into window commands.
"""

import asyncio
import logging

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..config import WindowConfig
from ..log.base import MessageSource
from ..logging_setup import LOGGER_NAME
from ..sync.view_sync import ViewSync
from ..window.commands import (
    LOAD_COMMANDS,
    Command,
    Jump,
    LoadInitial,
    LoadNewer,
    LoadOlder,
    ScrollToMessage,
    dispatch,
)
from ..window.controller import WindowController
from ..window.events import WindowEvent
from .config import LogLevel
from .screens import JumpScreen
from .styles import APP_CSS
from .themes import NIGHT_CHANNEL
from .widgets import LogPanel, MessageListView, PanelLogHandler, ReplyLink, StatusBar

logger = logging.getLogger(__name__)


class ScrollbackApp(App):
    """Textual TUI over a windowed message channel."""

    CSS = APP_CSS
    TITLE = "Scrollback"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+g", "jump", "Jump"),
        Binding("end", "latest", "Latest"),
        Binding("ctrl+d", "toggle_log", "Log"),
    ]

    def __init__(
        self,
        log: MessageSource,
        config: WindowConfig | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._message_log = log
        self._controller = WindowController(log, config)
        self._view_sync = ViewSync(self._controller)
        self._log_level = log_level
        self._log_handler: PanelLogHandler | None = None
        self._dispose_status = None
        self._message_list: MessageListView | None = None

    @property
    def controller(self) -> WindowController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield MessageListView(id="message-list")
        yield LogPanel(id="log-panel")
        yield StatusBar(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(NIGHT_CHANNEL)
        self.theme = "night-channel"

        log_panel = self.query_one("#log-panel", LogPanel)
        self._log_handler = PanelLogHandler(log_panel)
        logging.getLogger(LOGGER_NAME).addHandler(self._log_handler)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()

        # Latched: a remount of the list does not double-register
        self._message_list = self.query_one("#message-list", MessageListView)
        self._view_sync.attach(self._message_list)
        self._dispose_status = self._controller.subscribe(self._on_window_event)

        self.sub_title = f"{len(self._message_log)} messages | {self._message_log.source_type}"
        self.send(LoadInitial())

    def on_unmount(self) -> None:
        """Release subscriptions and the log handler."""
        if self._message_list is not None:
            self._view_sync.detach(self._message_list)
        if self._dispose_status is not None:
            self._dispose_status()
            self._dispose_status = None
        if self._log_handler is not None:
            logging.getLogger(LOGGER_NAME).removeHandler(self._log_handler)
            self._log_handler = None

    def _on_window_event(self, event: WindowEvent) -> None:
        status = self.query_one("#status-bar", StatusBar)
        status.update_state(self._controller.state, len(self._message_log))

    def send(self, command: Command) -> bool:
        """Issue ``command`` unless another load is already in flight.

        Returns:
            True if the command was issued
        """
        state = self._controller.state
        needs_fetch = isinstance(command, LOAD_COMMANDS) or (
            isinstance(command, ScrollToMessage) and not state.contains(command.target_id)
        )
        if needs_fetch and state.loading:
            logger.debug("Dropping %s while loading", type(command).__name__)
            return False
        self._run_command(command)
        return True

    @work(group="window")
    async def _run_command(self, command: Command) -> None:
        """Run a window command as a background async worker."""
        await dispatch(self._controller, command)

    def on_message_list_view_edge_reached(self, event: MessageListView.EdgeReached) -> None:
        """Extend the window when scrolling near an edge."""
        if event.edge == "top":
            self.send(LoadOlder())
        elif event.edge == "bottom" and self._controller.state.has_more_newer:
            self.send(LoadNewer())

    def on_reply_link_clicked(self, event: ReplyLink.Clicked) -> None:
        """Bring the replied-to message into view."""
        self.send(ScrollToMessage(event.target_id))

    def action_jump(self) -> None:
        """Ask for a message id and jump to it."""
        def _on_dismiss(target_id: str | None) -> None:
            if target_id:
                self.send(Jump(target_id))

        self.push_screen(JumpScreen(), _on_dismiss)

    def action_latest(self) -> None:
        """Reload the newest page."""
        self.send(LoadInitial())

    def action_toggle_log(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#log-panel", LogPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(
    log: MessageSource,
    config: WindowConfig | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        log: Message log to browse
        config: Window configuration
        log_level: Level for the log panel (debug/info/warning/error), None to hide
    """
    app = ScrollbackApp(log=log, config=config, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
