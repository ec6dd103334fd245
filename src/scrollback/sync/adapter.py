"""View adapter interface.

The window engine never renders anything. It drives whatever displays the
window through this small imperative command set.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from ..log.models import Message
from ..window.models import Align, ItemLocation


class ViewAdapter(ABC):
    """Abstract view of the materialized messages."""

    @abstractmethod
    def prepend(self, items: Sequence[Message]) -> None:
        """Insert items before the first materialized item."""

    @abstractmethod
    def append(self, items: Sequence[Message]) -> None:
        """Insert items after the last materialized item."""

    @abstractmethod
    def scroll_to_item(self, index: int, align: Align = Align.START) -> None:
        """Scroll so the item at ``index`` lands at ``align``."""

    @abstractmethod
    def find_index(self, predicate: Callable[[Message], bool]) -> int:
        """Index of the first item matching ``predicate``, or -1."""

    @abstractmethod
    def map_items(self, transform: Callable[[Message], Message]) -> None:
        """Replace every materialized item with ``transform(item)``."""

    @abstractmethod
    def reset(self, items: Sequence[Message], location: ItemLocation) -> None:
        """Discard everything and re-anchor on ``location``.

        Called when the window epoch changes.
        """


class ListViewAdapter(ViewAdapter):
    """Headless view adapter backed by a plain list.

    Records the last scroll target so callers can inspect where the view
    would be looking.
    """

    def __init__(self) -> None:
        self._items: list[Message] = []
        self.scroll_target: tuple[int, Align] | None = None
        self.resets = 0

    @property
    def items(self) -> list[Message]:
        return list(self._items)

    def highlighted_ids(self) -> list[str]:
        return [item.id for item in self._items if item.highlighted]

    def prepend(self, items: Sequence[Message]) -> None:
        self._items[:0] = items
        # Keep looking at the same item after the insert
        if self.scroll_target is not None:
            index, align = self.scroll_target
            self.scroll_target = (index + len(items), align)

    def append(self, items: Sequence[Message]) -> None:
        self._items.extend(items)

    def scroll_to_item(self, index: int, align: Align = Align.START) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"Scroll target {index} outside view of {len(self._items)} items")
        self.scroll_target = (index, align)

    def find_index(self, predicate: Callable[[Message], bool]) -> int:
        for index, item in enumerate(self._items):
            if predicate(item):
                return index
        return -1

    def map_items(self, transform: Callable[[Message], Message]) -> None:
        self._items = [transform(item) for item in self._items]

    def reset(self, items: Sequence[Message], location: ItemLocation) -> None:
        self._items = list(items)
        self.resets += 1
        if self._items:
            self.scroll_target = (location.resolve(len(self._items)), location.align)
        else:
            self.scroll_target = None

    def __len__(self) -> int:
        return len(self._items)
