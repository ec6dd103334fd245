"""Unit tests for the highlight pulse."""
import asyncio

import pytest

from scrollback.config import WindowConfig
from scrollback.log import Message, Sender
from scrollback.sync import HighlightTimer, ListViewAdapter, ViewSync
from scrollback.window import WindowController


def make(message_id, highlighted=False):
    return Message(
        id=message_id,
        sender=Sender.SELF,
        text=f"Message {message_id}",
        highlighted=highlighted,
    )


@pytest.fixture
def filled_adapter():
    adapter = ListViewAdapter()
    adapter.append([make(str(i)) for i in range(5)])
    return adapter


class TestHighlightTimer:
    """Tests for HighlightTimer."""

    @pytest.mark.asyncio
    async def test_pulse_on_then_off(self, filled_adapter):
        """Test that a pulse turns on and clears after the off delay."""
        timer = HighlightTimer(filled_adapter, on_delay=0.0, off_delay=0.05)

        timer.pulse("2")
        await asyncio.sleep(0.01)
        assert filled_adapter.highlighted_ids() == ["2"]

        await asyncio.sleep(0.1)
        assert filled_adapter.highlighted_ids() == []

    @pytest.mark.asyncio
    async def test_on_leaves_other_items_alone(self):
        """Test that turning on only touches the target."""
        adapter = ListViewAdapter()
        adapter.append([make("0", highlighted=True), make("1")])
        timer = HighlightTimer(adapter, on_delay=0.0, off_delay=10)

        timer.pulse("1")
        await asyncio.sleep(0.01)

        assert adapter.highlighted_ids() == ["0", "1"]
        timer.dispose()

    @pytest.mark.asyncio
    async def test_off_clears_everything(self):
        """Test that turning off clears every flag, not only the target."""
        adapter = ListViewAdapter()
        adapter.append([make("0", highlighted=True), make("1")])
        timer = HighlightTimer(adapter, on_delay=0.0, off_delay=0.02)

        timer.pulse("1")
        await asyncio.sleep(0.06)

        assert adapter.highlighted_ids() == []

    @pytest.mark.asyncio
    async def test_newer_pulse_supersedes_older(self, filled_adapter):
        """Test that a stale off phase cannot clear a newer pulse."""
        timer = HighlightTimer(filled_adapter, on_delay=0.0, off_delay=0.2)

        first = timer.pulse("1")
        await asyncio.sleep(0.05)
        second = timer.pulse("3")
        assert second > first

        # The first pulse's off phase has fired by now but is stale
        await asyncio.sleep(0.17)
        assert "3" in filled_adapter.highlighted_ids()

        await asyncio.sleep(0.1)
        assert filled_adapter.highlighted_ids() == []

    @pytest.mark.asyncio
    async def test_dispose_cancels_pending_phases(self, filled_adapter):
        """Test that nothing fires after dispose."""
        timer = HighlightTimer(filled_adapter, on_delay=0.02, off_delay=0.05)

        timer.pulse("2")
        timer.dispose()
        await asyncio.sleep(0.04)

        assert filled_adapter.highlighted_ids() == []

    def test_off_before_on_fails(self, filled_adapter):
        """Test that a pulse whose off phase precedes its on phase is rejected."""
        with pytest.raises(ValueError, match="off_delay"):
            HighlightTimer(filled_adapter, on_delay=0.05, off_delay=0.02)

    def test_pulse_requires_running_loop(self, filled_adapter):
        """Test that pulses are scheduled on the running event loop."""
        timer = HighlightTimer(filled_adapter)
        with pytest.raises(RuntimeError):
            timer.pulse("1")


class TestHighlightThroughViewSync:
    """End-to-end highlight pulses driven by the controller."""

    @pytest.mark.asyncio
    async def test_reply_in_window_pulses(self, controller, view_sync, adapter):
        """Test the in-window reply link: scroll, highlight, then clear."""
        view_sync.attach(adapter)
        await controller.load_initial()

        await controller.scroll_or_jump("985")
        await asyncio.sleep(0.01)
        assert adapter.highlighted_ids() == ["985"]

        await asyncio.sleep(0.1)
        assert adapter.highlighted_ids() == []

    @pytest.mark.asyncio
    async def test_delayed_on_phase_is_still_cleared(self, demo_log, sleep_gate):
        """Test that a pulse with a non-zero on delay ends with nothing highlighted."""
        config = WindowConfig(fetch_latency=0, highlight_on_delay=0.02, highlight_off_delay=0.05)
        controller = WindowController(demo_log, config, sleep=sleep_gate)
        view_sync = ViewSync(controller)
        adapter = ListViewAdapter()
        view_sync.attach(adapter)
        await controller.load_initial()

        await controller.highlight("985")
        await asyncio.sleep(0.035)
        assert adapter.highlighted_ids() == ["985"]

        await asyncio.sleep(0.1)
        assert adapter.highlighted_ids() == []

    @pytest.mark.asyncio
    async def test_jump_highlights_target(self, controller, view_sync, adapter):
        """Test that a jump ends with the target highlighted."""
        view_sync.attach(adapter)
        await controller.load_initial()

        await controller.jump_to_window("560")
        await asyncio.sleep(0.01)

        assert adapter.highlighted_ids() == ["560"]
        assert adapter.items[10].highlighted is True

    @pytest.mark.asyncio
    async def test_repeated_attach_pulses_once(self, controller, view_sync, adapter):
        """Test that a re-attached view gets one timer, not two."""
        registration = view_sync.attach(adapter)
        view_sync.attach(adapter)
        await controller.load_initial()

        await controller.highlight("990")

        assert registration.timer.generation == 1

    @pytest.mark.asyncio
    async def test_detach_neutralises_pending_pulse(self, demo_log, fast_config):
        """Test that detaching mid-pulse leaves the view untouched."""
        config = fast_config.model_copy(update={"highlight_on_delay": 0.02})
        controller = WindowController(demo_log, config)
        view_sync = ViewSync(controller)
        adapter = ListViewAdapter()
        view_sync.attach(adapter)
        await controller.load_initial()

        await controller.highlight("990")
        view_sync.detach(adapter)
        await asyncio.sleep(0.05)

        assert adapter.highlighted_ids() == []
