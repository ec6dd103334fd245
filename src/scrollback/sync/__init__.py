"""View synchronization module for scrollback.

Drives an external view from window events: batch inserts, epoch resets,
scroll-to and the highlight pulse.
"""

from .adapter import ListViewAdapter, ViewAdapter
from .highlight import HighlightTimer
from .view_sync import Registration, ViewSync

__all__ = [
    "HighlightTimer",
    "ListViewAdapter",
    "Registration",
    "ViewAdapter",
    "ViewSync",
]
