"""Data models for the message log.

These models define a single chat message as it exists in the channel
history, independent of where the history was loaded from.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who wrote a message."""

    SELF = "me"        # Local user
    OTHER = "other"    # Anyone else in the channel


class Message(BaseModel):
    """A single message in the channel history.

    Messages are immutable. ``highlighted`` is view-local state: a view
    holds copies with the flag flipped, the log never changes.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable unique ordering key")
    sender: Sender = Field(description="Author of the message")
    text: str = Field(description="Message body")
    reply_to: str | None = Field(
        default=None,
        description="Id of the message this one replies to"
    )
    highlighted: bool = Field(
        default=False,
        description="Transient highlight flag, only ever set on view copies"
    )

    def with_highlight(self, highlighted: bool) -> "Message":
        """Return a copy with the highlight flag set to ``highlighted``."""
        if self.highlighted == highlighted:
            return self
        return self.model_copy(update={"highlighted": highlighted})
