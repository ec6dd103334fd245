"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering and highlight styling
- Reply link clicks
- How the message list mounts, prepends and scrolls
- Log panel filtering and colouring
"""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from rich.text import Text
from textual.containers import Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as UIMessage
from textual.widgets import RichLog, Static

from ..log.models import Message, Sender
from ..sync.adapter import ViewAdapter
from ..window.models import Align, ItemLocation, WindowState
from .config import (
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    SCROLL_BOTTOM_THRESHOLD,
    SCROLL_TOP_THRESHOLD,
    STATUS_LOADED,
    STATUS_LOADING,
    LogLevel,
)


class ReplyLink(Static):
    """Quoted reference to the message being replied to. Clickable."""

    class Clicked(UIMessage):
        """Posted when the user clicks a reply reference."""

        def __init__(self, target_id: str) -> None:
            super().__init__()
            self.target_id = target_id

    def __init__(self, target_id: str, *args, **kwargs) -> None:
        super().__init__(
            f"{target_id} Message", *args, classes="reply-link", markup=False, **kwargs
        )
        self.target_id = target_id

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Clicked(self.target_id))


class MessageBubble(Vertical):
    """A single chat message.

    Own messages align right, the other party's align left. The
    ``-highlighted`` class is toggled by the highlight pulse.
    """

    def __init__(self, message: Message, *args, **kwargs) -> None:
        classes = "bubble -self" if message.sender == Sender.SELF else "bubble -other"
        if message.highlighted:
            classes += " -highlighted"
        super().__init__(*args, classes=classes, **kwargs)
        self.message = message

    def compose(self):
        if self.message.reply_to is not None:
            yield ReplyLink(self.message.reply_to)
        yield Static(self.message.text, classes="message-text", markup=False)

    def update_message(self, message: Message) -> None:
        """Swap in a new copy of the same message."""
        self.message = message
        self.set_class(message.highlighted, "-highlighted")


class MessageListView(VerticalScroll):
    """Scrollable message list driven as a view adapter.

    Keeps its own list of bubbles in step with every command, so lookups
    never depend on when Textual finishes mounting.
    """

    BORDER_TITLE = "Channel"
    BORDER_SUBTITLE = "No messages"

    class EdgeReached(UIMessage):
        """Posted when scrolling comes within the threshold of an edge."""

        def __init__(self, edge: str) -> None:
            super().__init__()
            self.edge = edge  # "top" or "bottom"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._bubbles: list[MessageBubble] = []

    @property
    def items(self) -> list[Message]:
        return [bubble.message for bubble in self._bubbles]

    def watch_scroll_y(self, old_value: float, new_value: float) -> None:
        super().watch_scroll_y(old_value, new_value)
        if not self._bubbles or round(old_value) == round(new_value):
            return
        if new_value <= SCROLL_TOP_THRESHOLD:
            self.post_message(self.EdgeReached("top"))
        elif self.max_scroll_y - new_value <= SCROLL_BOTTOM_THRESHOLD:
            self.post_message(self.EdgeReached("bottom"))

    def _update_subtitle(self) -> None:
        if self._bubbles:
            first, last = self._bubbles[0].message.id, self._bubbles[-1].message.id
            self.border_subtitle = f"{len(self._bubbles)} messages ({first}..{last})"
        else:
            self.border_subtitle = "No messages"

    def prepend(self, items: Sequence[Message]) -> None:
        if not items:
            return
        bubbles = [MessageBubble(item) for item in items]
        previous_first = self._bubbles[0] if self._bubbles else None
        if previous_first is not None:
            self.mount(*bubbles, before=previous_first)
            # Keep the message the user was looking at in place
            self.call_after_refresh(
                self.scroll_to_widget, previous_first, animate=False, top=True
            )
        else:
            self.mount(*bubbles)
        self._bubbles[:0] = bubbles
        self._update_subtitle()

    def append(self, items: Sequence[Message]) -> None:
        if not items:
            return
        bubbles = [MessageBubble(item) for item in items]
        self.mount(*bubbles)
        self._bubbles.extend(bubbles)
        self._update_subtitle()

    def scroll_to_item(self, index: int, align: Align = Align.START) -> None:
        if not 0 <= index < len(self._bubbles):
            return
        bubble = self._bubbles[index]
        self.call_after_refresh(self._scroll_to_bubble, bubble, align)

    def _scroll_to_bubble(self, bubble: MessageBubble, align: Align) -> None:
        if align == Align.CENTER:
            self.scroll_to_widget(bubble, animate=False, center=True)
        elif align == Align.START:
            self.scroll_to_widget(bubble, animate=False, top=True)
        elif bubble is self._bubbles[-1]:
            self.scroll_end(animate=False)
        else:
            self.scroll_to_widget(bubble, animate=False)

    def find_index(self, predicate: Callable[[Message], bool]) -> int:
        for index, bubble in enumerate(self._bubbles):
            if predicate(bubble.message):
                return index
        return -1

    def map_items(self, transform: Callable[[Message], Message]) -> None:
        for bubble in self._bubbles:
            updated = transform(bubble.message)
            if updated != bubble.message:
                bubble.update_message(updated)

    def reset(self, items: Sequence[Message], location: ItemLocation) -> None:
        self.remove_children()
        self._bubbles = [MessageBubble(item) for item in items]
        if self._bubbles:
            self.mount(*self._bubbles)
            self.scroll_to_item(location.resolve(len(self._bubbles)), location.align)
        self._update_subtitle()


# Textual widgets carry their own metaclass, so register instead of inheriting
ViewAdapter.register(MessageListView)


class StatusBar(Static):
    """Loading indicator plus a one-line summary of the window."""

    def on_mount(self) -> None:
        self.update(STATUS_LOADED)

    def update_state(self, state: WindowState, log_size: int) -> None:
        """Render the current window state."""
        status = f"[yellow]{STATUS_LOADING}[/]" if state.loading else f"[green]{STATUS_LOADED}[/]"
        parts = [status, f"[dim]epoch[/] {state.epoch}"]
        if state.messages:
            parts.append(f"[dim]window[/] {state.first_id}..{state.last_id} of {log_size}")
        if state.has_more_newer:
            parts.append("[cyan]newer messages below[/]")
        self.update("  ".join(parts))


_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}


class LogPanel(RichLog):
    """Log panel showing engine activity with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    def __init__(self, *args, log_level: int = LogLevel.INFO, **kwargs) -> None:
        super().__init__(*args, markup=False, highlight=False, wrap=False, **kwargs)
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def write_entry(self, component: str, message: str, level: int = LogLevel.INFO) -> None:
        """Write one record if it passes the level threshold.

        Args:
            component: Short logger name (controller, view_sync, ...)
            message: Record text, shown verbatim
            level: Numeric log level
        """
        if level < self._log_level:
            return
        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        self.write(Text.assemble(
            (datetime.now().strftime(LOG_TIMESTAMP_FORMAT) + " ", "dim"),
            (f"{LogLevel.name(level):<8}", _LEVEL_STYLES.get(level, "white")),
            (f"[{component}] ", "bright_blue"),
            message,
        ))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class PanelLogHandler(logging.Handler):
    """Routes ``logging`` records into a ``LogPanel``."""

    def __init__(self, panel: LogPanel) -> None:
        super().__init__()
        self._panel = panel

    def emit(self, record: logging.LogRecord) -> None:
        if not self._panel.is_mounted:
            return
        try:
            message = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                message = f"{message}: {record.exc_info[1]!r}"
            component = record.name.rsplit(".", 1)[-1]
            self._panel.write_entry(component, message, record.levelno)
        except Exception:
            self.handleError(record)
