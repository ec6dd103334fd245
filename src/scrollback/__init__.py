"""
Scrollback: a windowed view over long chat channels.

Keeps a bounded slice of an ordered message log materialized, extends it
page by page in both directions, re-centers it on jump targets and pulses a
highlight on the message the user asked for. Each module hides a specific
design decision.
"""

__version__ = "0.1.0"

from .config import WindowConfig
from .errors import FetchFailure, MessageNotFoundError, StaleCompletionError, WindowError
from .log import InMemoryMessageLog, Message, MessageSource, Sender, create_message_log
from .sync import ListViewAdapter, ViewAdapter, ViewSync
from .window import WindowController, WindowState, dispatch

__all__ = [
    "FetchFailure",
    "InMemoryMessageLog",
    "ListViewAdapter",
    "Message",
    "MessageNotFoundError",
    "MessageSource",
    "Sender",
    "StaleCompletionError",
    "ViewAdapter",
    "ViewSync",
    "WindowConfig",
    "WindowController",
    "WindowError",
    "WindowState",
    "create_message_log",
    "dispatch",
]
