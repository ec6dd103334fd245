"""Completion events emitted by the window controller.

Subscribers receive one of these after each successful mutation. Events
carry copies of the data they describe, never the live window.
"""

from dataclasses import dataclass
from typing import Callable, Union

from ..log.models import Message
from .models import ItemLocation


@dataclass(frozen=True)
class WindowReplaced:
    """The window was replaced wholesale and the epoch changed."""

    messages: tuple[Message, ...]
    epoch: int
    initial_location: ItemLocation
    has_more_newer: bool


@dataclass(frozen=True)
class OlderLoaded:
    """A batch was prepended to the window."""

    batch: tuple[Message, ...]
    epoch: int


@dataclass(frozen=True)
class NewerLoaded:
    """A batch was appended to the window."""

    batch: tuple[Message, ...]
    epoch: int
    has_more_newer: bool


@dataclass(frozen=True)
class HighlightResolved:
    """A highlight was requested for ``target_id``."""

    target_id: str


@dataclass(frozen=True)
class LoadingChanged:
    """The loading flag flipped."""

    loading: bool


WindowEvent = Union[WindowReplaced, OlderLoaded, NewerLoaded, HighlightResolved, LoadingChanged]
EventHandler = Callable[[WindowEvent], None]
