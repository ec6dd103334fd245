"""Two-phase highlight pulse.

Turns the highlight on for one message shortly after it is reached and
clears every highlight after a fixed delay. Each pulse is tagged with a
generation; a timer whose generation is no longer current does nothing.
"""

import asyncio
import logging

from .adapter import ViewAdapter

logger = logging.getLogger(__name__)


class HighlightTimer:
    """Schedules highlight pulses on one view adapter."""

    def __init__(
        self,
        adapter: ViewAdapter,
        on_delay: float = 0.0,
        off_delay: float = 0.8,
    ) -> None:
        if off_delay <= on_delay:
            raise ValueError(
                f"off_delay ({off_delay}) must be greater than on_delay ({on_delay})"
            )
        self._adapter = adapter
        self._on_delay = on_delay
        self._off_delay = off_delay
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def pulse(self, target_id: str) -> int:
        """Schedule the on and off phases for ``target_id``.

        Must be called from a running event loop.

        Returns:
            The generation token of this pulse
        """
        self._generation += 1
        generation = self._generation
        loop = asyncio.get_running_loop()
        loop.call_later(self._on_delay, self._turn_on, generation, target_id)
        loop.call_later(self._off_delay, self._turn_off, generation)
        return generation

    def _turn_on(self, generation: int, target_id: str) -> None:
        if generation != self._generation:
            logger.debug("Skipping stale highlight-on for %s", target_id)
            return

        self._adapter.map_items(
            lambda message: message.with_highlight(True) if message.id == target_id else message
        )

    def _turn_off(self, generation: int) -> None:
        if generation != self._generation:
            return
        # Clears every flagged item, not only the pulse target
        self._adapter.map_items(lambda message: message.with_highlight(False))

    def dispose(self) -> None:
        """Turn every pending phase into a no-op."""
        self._generation += 1
