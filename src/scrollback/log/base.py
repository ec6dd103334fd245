"""Abstract base class for message log sources.

This module defines the read-only interface the window controller samples
from. The abstraction hides:
- Where the history came from (generated demo channel, JSON fixture)
- How lookups by id are indexed
"""

from abc import ABC, abstractmethod

from ..errors import MessageNotFoundError
from .models import Message


class MessageSource(ABC):
    """Abstract, read-only, totally ordered message history.

    Positions run from 0 to ``len(source) - 1``.
    """

    @abstractmethod
    def slice_by_range(self, start: int, end: int) -> list[Message]:
        """
        Return messages in positions ``[start, end)``.

        Bounds are clamped to the log, so out-of-range requests yield a
        shorter (possibly empty) list rather than an error.

        Args:
            start: First position, inclusive
            end: Last position, exclusive

        Returns:
            Messages in log order
        """

    @abstractmethod
    def index_of(self, message_id: str) -> int:
        """
        Return the position of a message.

        Args:
            message_id: Message id to locate

        Returns:
            Position in the log

        Raises:
            MessageNotFoundError: If no message has this id
        """

    @abstractmethod
    def get(self, index: int) -> Message:
        """Return the message at ``index``."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of messages in the log."""

    def __contains__(self, message_id: object) -> bool:
        if not isinstance(message_id, str):
            return False
        try:
            self.index_of(message_id)
        except MessageNotFoundError:
            return False
        return True

    @property
    def last_id(self) -> str | None:
        """Id of the newest message, or None for an empty log."""
        if len(self) == 0:
            return None
        return self.get(len(self) - 1).id

    @property
    @abstractmethod
    def source_type(self) -> str:
        """Get the source type identifier."""
