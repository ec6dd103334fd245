"""Unit tests for configuration and logging setup."""
import logging

import pytest
from pydantic import ValidationError

from scrollback import logging_setup
from scrollback.config import WindowConfig


class TestWindowConfig:
    """Tests for WindowConfig."""

    def test_defaults(self):
        """Test the default session constants."""
        config = WindowConfig()

        assert config.page_size == 20
        assert config.jump_half_width == 10
        assert config.highlight_on_delay == 0.0
        assert config.highlight_off_delay == 0.8
        assert config.fetch_latency == 1.0

    def test_page_size_must_be_positive(self):
        """Test that a zero page size fails validation."""
        with pytest.raises(ValidationError):
            WindowConfig(page_size=0)

    def test_negative_latency_fails(self):
        """Test that negative delays fail validation."""
        with pytest.raises(ValidationError):
            WindowConfig(fetch_latency=-1)

    def test_highlight_off_before_on_fails(self):
        """Test that the pulse cannot turn off before it turns on."""
        with pytest.raises(ValidationError, match="highlight_off_delay"):
            WindowConfig(fetch_latency=0, highlight_on_delay=0.05, highlight_off_delay=0.02)

    def test_highlight_equal_delays_fail(self):
        """Test that a zero-length pulse is rejected."""
        with pytest.raises(ValidationError):
            WindowConfig(highlight_on_delay=0.3, highlight_off_delay=0.3)

    def test_highlight_order_checked_from_env(self, monkeypatch):
        """Test that environment values go through the same check."""
        monkeypatch.setenv("SCROLLBACK_HIGHLIGHT_ON_DELAY", "1.0")
        with pytest.raises(ValidationError):
            WindowConfig.from_env()

    def test_from_env(self, monkeypatch):
        """Test reading values from the environment."""
        monkeypatch.setenv("SCROLLBACK_PAGE_SIZE", "5")
        monkeypatch.setenv("SCROLLBACK_FETCH_LATENCY", "0.25")

        config = WindowConfig.from_env()

        assert config.page_size == 5
        assert config.fetch_latency == 0.25
        assert config.jump_half_width == 10

    def test_overrides_win_over_env(self, monkeypatch):
        """Test that explicit overrides beat environment values."""
        monkeypatch.setenv("SCROLLBACK_PAGE_SIZE", "5")

        config = WindowConfig.from_env(page_size=7, jump_half_width=None)

        assert config.page_size == 7
        assert config.jump_half_width == 10

    def test_blank_env_is_ignored(self, monkeypatch):
        """Test that empty variables fall back to defaults."""
        monkeypatch.setenv("SCROLLBACK_PAGE_SIZE", "  ")
        assert WindowConfig.from_env().page_size == 20

    def test_malformed_env_fails(self, monkeypatch):
        """Test that unparsable values are reported."""
        monkeypatch.setenv("SCROLLBACK_JUMP_HALF_WIDTH", "wide")
        with pytest.raises(ValidationError):
            WindowConfig.from_env()


class TestLoggingSetup:
    """Tests for logging_setup."""

    def test_parse_level(self):
        """Test level name parsing with fallback."""
        assert logging_setup.parse_level("debug") == ("DEBUG", logging.DEBUG)
        assert logging_setup.parse_level("bogus") == ("INFO", logging.INFO)
        assert logging_setup.parse_level(None) == ("INFO", logging.INFO)

    def test_configure_is_idempotent(self):
        """Test that a second configure call keeps the first runtime."""
        first = logging_setup.configure("warning")
        second = logging_setup.configure("debug")

        assert second is first
        assert logging.getLogger(logging_setup.LOGGER_NAME).level == logging.WARNING

    def test_configure_reads_env(self, monkeypatch, tmp_path):
        """Test SCROLLBACK_LOG_LEVEL and SCROLLBACK_LOG_FILE."""
        log_file = tmp_path / "logs" / "scrollback.log"
        monkeypatch.setenv("SCROLLBACK_LOG_LEVEL", "error")
        monkeypatch.setenv("SCROLLBACK_LOG_FILE", str(log_file))

        runtime = logging_setup.configure(console=False)

        assert runtime.level == logging.ERROR
        assert runtime.file_path == str(log_file)
        assert log_file.parent.is_dir()

    def test_extra_handlers_attached(self):
        """Test that extra handlers receive records."""
        records = []

        class Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        logging_setup.configure("info", console=False, extra_handlers=[Collect()])
        logging.getLogger("scrollback.window.controller").info("hello")

        assert [r.getMessage() for r in records] == ["hello"]

    def test_reset_allows_reconfigure(self):
        """Test that reset clears the runtime."""
        logging_setup.configure("warning", console=False)
        logging_setup.reset()

        assert logging_setup.get_runtime() is None
        assert logging_setup.configure("debug", console=False).level == logging.DEBUG
