"""Terminal UI module for scrollback.

Provides a Textual-based viewer for a windowed message channel.

Module structure (each module hides a design decision):
- config.py: UI constants and log level handling
- widgets.py: Custom widgets (message bubbles, list view adapter, status bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (jump to message)
- app.py: Application orchestration (user interaction flow)
"""

from .app import ScrollbackApp, run_textual_tui
from .config import LogLevel
from .widgets import LogPanel, MessageBubble, MessageListView, PanelLogHandler, StatusBar

__all__ = [
    "LogLevel",
    "LogPanel",
    "MessageBubble",
    "MessageListView",
    "PanelLogHandler",
    "ScrollbackApp",
    "StatusBar",
    "run_textual_tui",
]
