"""Data models for the materialized window.

These models define the slice of the log currently shown to the view and
the metadata a view needs to anchor itself.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from ..log.models import Message

LAST: Literal["LAST"] = "LAST"


class Align(str, Enum):
    """Where a scroll target lands in the viewport."""

    START = "start"
    CENTER = "center"
    END = "end"


class ItemLocation(BaseModel):
    """An anchor position inside the window."""

    index: int | Literal["LAST"] = Field(
        default=LAST,
        description="Position inside the window, or LAST for the final item"
    )
    align: Align = Field(default=Align.END, description="Viewport alignment")

    def resolve(self, length: int) -> int:
        """Return the concrete index for a window of ``length`` items."""
        if self.index == LAST:
            return length - 1
        return self.index


class WindowState(BaseModel):
    """The bounded slice of the log currently materialized for display.

    Owned and mutated exclusively by ``WindowController``.
    """

    messages: list[Message] = Field(default_factory=list)
    loading: bool = Field(default=False, description="Any operation in flight")
    epoch: int = Field(
        default=0,
        description="Changes only when the window is discontinuous with its predecessor"
    )
    initial_location: ItemLocation = Field(default_factory=ItemLocation)
    has_more_newer: bool = Field(
        default=False,
        description="Window's last id differs from the log's last id"
    )

    @property
    def first_id(self) -> str | None:
        return self.messages[0].id if self.messages else None

    @property
    def last_id(self) -> str | None:
        return self.messages[-1].id if self.messages else None

    def index_of(self, message_id: str) -> int:
        """Position of a message inside the window, or -1 when absent."""
        for index, message in enumerate(self.messages):
            if message.id == message_id:
                return index
        return -1

    def contains(self, message_id: str) -> bool:
        return self.index_of(message_id) != -1

    def __len__(self) -> int:
        return len(self.messages)
