"""Message log module for scrollback.

Provides the immutable, ordered channel history the window samples from.
"""

from .base import MessageSource
from .factory import build_demo_channel, create_message_log
from .in_memory import InMemoryMessageLog
from .models import Message, Sender

__all__ = [
    "InMemoryMessageLog",
    "Message",
    "MessageSource",
    "Sender",
    "build_demo_channel",
    "create_message_log",
]
