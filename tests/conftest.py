"""Pytest configuration and shared fixtures."""
import asyncio

import pytest

from scrollback import logging_setup
from scrollback.config import WindowConfig
from scrollback.log import InMemoryMessageLog, build_demo_channel
from scrollback.sync import ListViewAdapter, ViewSync
from scrollback.window import WindowController


class SleepGate:
    """Stand-in for ``asyncio.sleep`` that can hold fetches until released."""

    def __init__(self):
        self.hold = False
        self.calls: list[float] = []
        self._waiters: list[asyncio.Future] = []

    @property
    def pending(self) -> int:
        return len(self._waiters)

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)
        if not self.hold:
            await asyncio.sleep(0)
            return
        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        await waiter

    def release_all(self) -> None:
        for waiter in self._waiters:
            if not waiter.done():
                waiter.set_result(None)
        self._waiters.clear()


@pytest.fixture(autouse=True)
def clean_logging():
    """Undo any logging configuration a test (or CLI run) installed."""
    yield
    logging_setup.reset()


@pytest.fixture(scope="session")
def demo_messages():
    """Return the 1000-message demo channel."""
    return build_demo_channel()


@pytest.fixture
def demo_log(demo_messages):
    """Return the demo channel as a message log."""
    return InMemoryMessageLog(demo_messages)


@pytest.fixture
def fast_config():
    """Return a config with no fetch latency and a short highlight pulse."""
    return WindowConfig(fetch_latency=0.0, highlight_on_delay=0.0, highlight_off_delay=0.05)


@pytest.fixture
def sleep_gate():
    """Return a controllable sleep function."""
    return SleepGate()


@pytest.fixture
def controller(demo_log, fast_config, sleep_gate):
    """Return a controller over the demo channel with a gated sleep."""
    return WindowController(demo_log, fast_config, sleep=sleep_gate)


@pytest.fixture
def adapter():
    """Return an in-memory view adapter."""
    return ListViewAdapter()


@pytest.fixture
def view_sync(controller):
    """Return a ViewSync bound to the controller fixture."""
    return ViewSync(controller)
