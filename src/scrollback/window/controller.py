"""Window controller.

Owns the ``WindowState`` and mutates it by sampling the message log:
initial load, older/newer extensions, re-centered jumps and highlights.
Every mutation is announced to subscribers as a ``WindowEvent``.

Hidden design decisions:
- How fetch latency is simulated
- How the loading flag survives overlapping operations
- How late extensions are detected and discarded
"""

import asyncio
import contextlib
import itertools
import logging
from collections.abc import Awaitable, Callable, Iterator

from ..config import WindowConfig
from ..errors import FetchFailure, StaleCompletionError, WindowError
from ..log.base import MessageSource
from ..log.models import Message
from .events import (
    EventHandler,
    HighlightResolved,
    LoadingChanged,
    NewerLoaded,
    OlderLoaded,
    WindowEvent,
    WindowReplaced,
)
from .models import LAST, Align, ItemLocation, WindowState

logger = logging.getLogger(__name__)


class WindowController:
    """Keeps a bounded window over a message log in sync with user intent.

    The controller does not queue or reject overlapping calls. Callers check
    ``state.loading`` before issuing a load-class operation.
    """

    def __init__(
        self,
        log: MessageSource,
        config: WindowConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._log = log
        self._config = config or WindowConfig()
        self._sleep = sleep or asyncio.sleep
        self._state = WindowState()
        self._epochs = itertools.count(1)
        self._in_flight = 0
        self._handlers: list[EventHandler] = []

    @property
    def state(self) -> WindowState:
        """Current window. Read-only for everyone but the controller."""
        return self._state

    @property
    def log(self) -> MessageSource:
        return self._log

    @property
    def config(self) -> WindowConfig:
        return self._config

    def subscribe(self, handler: EventHandler) -> Callable[[], None]:
        """Register ``handler`` for window events.

        Returns:
            A disposer that removes the handler; calling it twice is harmless
        """
        self._handlers.append(handler)

        def dispose() -> None:
            with contextlib.suppress(ValueError):
                self._handlers.remove(handler)

        return dispose

    def _emit(self, event: WindowEvent) -> None:
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Handler %r failed on %s", handler, type(event).__name__)

    @contextlib.contextmanager
    def _loading(self) -> Iterator[None]:
        # Idle -> Loading on entry, Loading -> Idle on exit whatever happened
        self._in_flight += 1
        if self._in_flight == 1:
            self._state.loading = True
            self._emit(LoadingChanged(loading=True))
        try:
            yield
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self._state.loading = False
                self._emit(LoadingChanged(loading=False))

    async def _fetch(self, operation: str, start: int, end: int) -> list[Message]:
        await self._sleep(self._config.fetch_latency)
        try:
            return self._log.slice_by_range(start, end)
        except WindowError:
            raise
        except Exception as e:
            raise FetchFailure(operation, str(e)) from e

    def _refresh_has_more_newer(self) -> None:
        last_id = self._state.last_id
        self._state.has_more_newer = last_id is not None and last_id != self._log.last_id

    def _replace_window(self, messages: list[Message], location: ItemLocation) -> WindowReplaced:
        self._state.messages = messages
        self._state.epoch = next(self._epochs)
        self._state.initial_location = location
        self._refresh_has_more_newer()
        return WindowReplaced(
            messages=tuple(messages),
            epoch=self._state.epoch,
            initial_location=location,
            has_more_newer=self._state.has_more_newer,
        )

    async def load_initial(self) -> list[Message]:
        """Load the newest page of the log as a fresh window."""
        with self._loading():
            total = len(self._log)
            batch = await self._fetch("load_initial", total - self._config.page_size, total)
            event = self._replace_window(batch, ItemLocation(index=LAST, align=Align.END))
        logger.info("Loaded initial window of %d messages (epoch %d)", len(batch), event.epoch)
        self._emit(event)
        return batch

    async def load_older(self) -> list[Message]:
        """Prepend the page that precedes the window.

        Returns an empty batch without touching the window when the window
        is empty or already starts at the beginning of the log.

        Raises:
            StaleCompletionError: If the window changed while fetching
            FetchFailure: If the log source failed
        """
        anchor_id = self._state.first_id
        if anchor_id is None:
            return []
        position = self._log.index_of(anchor_id)
        if position == 0:
            logger.debug("Window already starts at the beginning of the log")
            return []

        issued_epoch = self._state.epoch
        with self._loading():
            batch = await self._fetch(
                "load_older", position - self._config.page_size, position
            )
            if self._state.epoch != issued_epoch or self._state.first_id != anchor_id:
                raise StaleCompletionError(
                    "load_older", issued_epoch, self._state.epoch, anchor_id
                )
            self._state.messages = batch + self._state.messages
            self._refresh_has_more_newer()
        logger.debug("Prepended %d messages before %s", len(batch), anchor_id)
        self._emit(OlderLoaded(batch=tuple(batch), epoch=issued_epoch))
        return batch

    async def load_newer(self) -> list[Message]:
        """Append the page that follows the window.

        When the window already ends at the newest message this returns an
        empty batch immediately: no latency, no loading flag, no mutation.

        Raises:
            StaleCompletionError: If the window changed while fetching
            FetchFailure: If the log source failed
        """
        anchor_id = self._state.last_id
        if anchor_id is None:
            return []
        position = self._log.index_of(anchor_id)
        if position == len(self._log) - 1:
            return []

        issued_epoch = self._state.epoch
        with self._loading():
            batch = await self._fetch(
                "load_newer", position + 1, position + 1 + self._config.page_size
            )
            if self._state.epoch != issued_epoch or self._state.last_id != anchor_id:
                raise StaleCompletionError(
                    "load_newer", issued_epoch, self._state.epoch, anchor_id
                )
            self._state.messages = self._state.messages + batch
            self._refresh_has_more_newer()
        logger.debug("Appended %d messages after %s", len(batch), anchor_id)
        self._emit(NewerLoaded(
            batch=tuple(batch),
            epoch=issued_epoch,
            has_more_newer=self._state.has_more_newer,
        ))
        return batch

    async def jump_to_window(self, target_id: str) -> list[Message]:
        """Replace the window with one centered on ``target_id``.

        Bumps the epoch and highlights the target once the new window is
        announced.

        Raises:
            MessageNotFoundError: If the target is not in the log
            FetchFailure: If the log source failed
        """
        with self._loading():
            position = self._log.index_of(target_id)
            half_width = self._config.jump_half_width
            start = max(position - half_width, 0)
            batch = await self._fetch("jump_to_window", start, position + half_width)
            event = self._replace_window(
                batch, ItemLocation(index=position - start, align=Align.CENTER)
            )
        logger.info(
            "Jumped to message %s: window %s..%s (epoch %d)",
            target_id, event.messages[0].id, event.messages[-1].id, event.epoch,
        )
        self._emit(event)
        await self.highlight(target_id)
        return batch

    async def scroll_or_jump(self, target_id: str) -> ItemLocation:
        """Bring ``target_id`` into view.

        Highlights in place when the target is already in the window,
        otherwise jumps to a window centered on it.

        Returns:
            Where the target sits in the (possibly new) window

        Raises:
            MessageNotFoundError: If the target is not in the log
        """
        index = self._state.index_of(target_id)
        if index != -1:
            await self.highlight(target_id)
            return ItemLocation(index=index, align=Align.CENTER)

        await self.jump_to_window(target_id)
        return self._state.initial_location

    async def highlight(self, target_id: str) -> str:
        """Request a highlight pulse on ``target_id``."""
        self._emit(HighlightResolved(target_id=target_id))
        return target_id
