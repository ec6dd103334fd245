"""Bridge from window events to view adapter commands.

Hides how controller completions become imperative view operations.
ViewSync owns no window state: it holds the adapters it drives and one
subscription per adapter.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from ..config import WindowConfig
from ..window.controller import WindowController
from ..window.events import (
    HighlightResolved,
    NewerLoaded,
    OlderLoaded,
    WindowEvent,
    WindowReplaced,
)
from ..window.models import Align
from .adapter import ViewAdapter
from .highlight import HighlightTimer

logger = logging.getLogger(__name__)


@dataclass
class Registration:
    """Live subscription of one adapter."""

    adapter: ViewAdapter
    timer: HighlightTimer
    dispose: Callable[[], None]


class ViewSync:
    """Translates controller completions into view adapter commands.

    ``attach`` is idempotent per adapter instance, so a view that is
    mounted repeatedly still receives every command exactly once.
    """

    def __init__(
        self,
        controller: WindowController,
        config: WindowConfig | None = None,
    ) -> None:
        self._controller = controller
        self._config = config or controller.config
        self._registrations: dict[int, Registration] = {}

    def is_attached(self, adapter: ViewAdapter) -> bool:
        return id(adapter) in self._registrations

    def attach(self, adapter: ViewAdapter) -> Registration:
        """Start driving ``adapter``.

        Returns:
            The adapter's registration; the existing one if already attached
        """
        existing = self._registrations.get(id(adapter))
        if existing is not None:
            logger.debug("Adapter %r already attached, skipping", adapter)
            return existing

        timer = HighlightTimer(
            adapter,
            on_delay=self._config.highlight_on_delay,
            off_delay=self._config.highlight_off_delay,
        )

        def handle(event: WindowEvent) -> None:
            self._apply(adapter, timer, event)

        registration = Registration(
            adapter=adapter,
            timer=timer,
            dispose=self._controller.subscribe(handle),
        )
        self._registrations[id(adapter)] = registration
        return registration

    def detach(self, adapter: ViewAdapter) -> None:
        """Stop driving ``adapter`` and neutralise its pending highlights."""
        registration = self._registrations.pop(id(adapter), None)
        if registration is None:
            return
        registration.dispose()
        registration.timer.dispose()

    def _apply(self, adapter: ViewAdapter, timer: HighlightTimer, event: WindowEvent) -> None:
        if isinstance(event, WindowReplaced):
            adapter.reset(event.messages, event.initial_location)
        elif isinstance(event, OlderLoaded):
            adapter.prepend(event.batch)
        elif isinstance(event, NewerLoaded):
            adapter.append(event.batch)
        elif isinstance(event, HighlightResolved):
            target_id = event.target_id
            index = adapter.find_index(lambda message: message.id == target_id)
            if index == -1:
                logger.warning("Highlight target %s is not in the view", target_id)
                return
            adapter.scroll_to_item(index, Align.CENTER)
            timer.pulse(target_id)
