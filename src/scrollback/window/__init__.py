"""Window module for scrollback.

Provides the materialized window over the message log, the controller that
mutates it, and the command set that drives the controller.
"""

from .commands import (
    LOAD_COMMANDS,
    Command,
    Highlight,
    Jump,
    LoadInitial,
    LoadNewer,
    LoadOlder,
    ScrollToMessage,
    dispatch,
)
from .controller import WindowController
from .events import (
    HighlightResolved,
    LoadingChanged,
    NewerLoaded,
    OlderLoaded,
    WindowEvent,
    WindowReplaced,
)
from .models import LAST, Align, ItemLocation, WindowState

__all__ = [
    "LAST",
    "LOAD_COMMANDS",
    "Align",
    "Command",
    "Highlight",
    "HighlightResolved",
    "ItemLocation",
    "Jump",
    "LoadInitial",
    "LoadNewer",
    "LoadOlder",
    "LoadingChanged",
    "NewerLoaded",
    "OlderLoaded",
    "ScrollToMessage",
    "WindowController",
    "WindowEvent",
    "WindowReplaced",
    "WindowState",
    "dispatch",
]
