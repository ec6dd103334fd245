"""Closed command set for driving the window controller.

Every user interaction becomes one of these commands and goes through
``dispatch``, which is also the single place where window errors are
recovered.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

from ..errors import MessageNotFoundError, StaleCompletionError, WindowError
from .controller import WindowController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadInitial:
    """Load the newest page as a fresh window."""


@dataclass(frozen=True)
class LoadOlder:
    """Extend the window towards the start of the log."""


@dataclass(frozen=True)
class LoadNewer:
    """Extend the window towards the end of the log."""


@dataclass(frozen=True)
class Jump:
    """Re-center the window on a message."""

    target_id: str


@dataclass(frozen=True)
class Highlight:
    """Pulse a message that is already in the window."""

    target_id: str


@dataclass(frozen=True)
class ScrollToMessage:
    """Highlight in place when visible, jump otherwise (reply links)."""

    target_id: str


Command = Union[LoadInitial, LoadOlder, LoadNewer, Jump, Highlight, ScrollToMessage]

# Commands that fetch from the log and flip the loading flag
LOAD_COMMANDS = (LoadInitial, LoadOlder, LoadNewer, Jump)


async def dispatch(controller: WindowController, command: Command) -> Any:
    """Run ``command`` against ``controller``.

    Window errors are logged and turned into a ``None`` result so that no
    interaction can crash the caller.

    Returns:
        The operation's result, or None if it failed

    Raises:
        TypeError: If ``command`` is not part of the command set
    """
    try:
        if isinstance(command, LoadInitial):
            return await controller.load_initial()
        elif isinstance(command, LoadOlder):
            return await controller.load_older()
        elif isinstance(command, LoadNewer):
            return await controller.load_newer()
        elif isinstance(command, Jump):
            return await controller.jump_to_window(command.target_id)
        elif isinstance(command, Highlight):
            return await controller.highlight(command.target_id)
        elif isinstance(command, ScrollToMessage):
            return await controller.scroll_or_jump(command.target_id)
    except (MessageNotFoundError, StaleCompletionError) as e:
        logger.warning("Ignoring %s: %s", type(command).__name__, e)
        return None
    except WindowError:
        # FetchFailure and anything else unexpected from the engine
        logger.exception("%s failed", type(command).__name__)
        return None

    raise TypeError(f"Unknown window command: {command!r}")
