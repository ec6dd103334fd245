"""In-memory message log.

Holds the complete channel history in a list with a dict index by id.
The log is built once and never mutated afterwards.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import TypeAdapter

from ..errors import MessageNotFoundError
from .base import MessageSource
from .models import Message

_MESSAGE_LIST = TypeAdapter(list[Message])


class InMemoryMessageLog(MessageSource):
    """Immutable ordered message history backed by a list.

    Lookup by position and by id are both O(1).
    """

    def __init__(self, messages: Iterable[Message]):
        self._messages: tuple[Message, ...] = tuple(messages)
        self._positions: dict[str, int] = {}
        for position, message in enumerate(self._messages):
            if message.id in self._positions:
                raise ValueError(f"Duplicate message id in log: {message.id!r}")
            self._positions[message.id] = position

    @classmethod
    def from_json(cls, path: str | Path) -> "InMemoryMessageLog":
        """Load a log from a JSON array of messages.

        Args:
            path: Path to the JSON fixture

        Returns:
            Log containing the messages in file order

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the content is not a message list
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls(_MESSAGE_LIST.validate_json(raw))

    def to_json(self) -> str:
        """Serialize the log as a JSON array of messages."""
        return _MESSAGE_LIST.dump_json(
            list(self._messages), indent=2, exclude_defaults=True
        ).decode("utf-8")

    def slice_by_range(self, start: int, end: int) -> list[Message]:
        start = max(start, 0)
        end = min(end, len(self._messages))
        if start >= end:
            return []
        return list(self._messages[start:end])

    def index_of(self, message_id: str) -> int:
        try:
            return self._positions[message_id]
        except KeyError:
            raise MessageNotFoundError(message_id) from None

    def get(self, index: int) -> Message:
        return self._messages[index]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    @property
    def source_type(self) -> str:
        return "memory"
