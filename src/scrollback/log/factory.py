"""Factory for creating message log sources."""

from typing import Any

from .base import MessageSource
from .in_memory import InMemoryMessageLog
from .models import Message, Sender

DEMO_CHANNEL_SIZE = 1000

# Reply links seeded into the demo channel: message id -> replied-to id.
# One points inside the initial page, one far outside it.
DEMO_REPLIES = {
    "996": "560",
    "997": "985",
}


def build_demo_channel(size: int = DEMO_CHANNEL_SIZE) -> list[Message]:
    """Generate the demo channel history.

    Ids are "0".."size-1" in log order. Even positions are written by the
    other party, odd positions by the local user.

    Args:
        size: Number of messages to generate

    Returns:
        Messages in log order
    """
    if size < 0:
        raise ValueError(f"Channel size must be non-negative, got {size}")

    messages = []
    for position in range(size):
        message_id = str(position)
        reply_to = DEMO_REPLIES.get(message_id)
        # Drop replies that would point past the end of a short channel
        if reply_to is not None and int(reply_to) >= size:
            reply_to = None
        messages.append(Message(
            id=message_id,
            sender=Sender.SELF if position % 2 else Sender.OTHER,
            text=f"Message {position}",
            reply_to=reply_to,
        ))
    return messages


def create_message_log(
    source: str = "demo",
    **kwargs: Any
) -> MessageSource:
    """Create a message log source.

    Args:
        source: Source type ("demo" or "json")
        **kwargs: Source-specific configuration
            - demo: size (int, default 1000)
            - json: path (str or Path, required)

    Returns:
        MessageSource instance

    Raises:
        ValueError: If source type is not supported or arguments are missing
    """
    if source == "demo":
        return InMemoryMessageLog(build_demo_channel(kwargs.get("size", DEMO_CHANNEL_SIZE)))

    elif source == "json":
        path = kwargs.get("path")
        if path is None:
            raise ValueError("The json source requires a 'path' argument")
        return InMemoryMessageLog.from_json(path)

    raise ValueError(
        f"Unsupported message log source: {source}. "
        f"Supported sources: demo, json"
    )
