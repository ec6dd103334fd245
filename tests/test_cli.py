"""Tests for the command line interface."""
import json

from typer.testing import CliRunner

from scrollback.cli.app import app

runner = CliRunner()

FAST_ENV = {
    "SCROLLBACK_FETCH_LATENCY": "0",
    "SCROLLBACK_LOG_LEVEL": "warning",
}


def invoke(*args, **env):
    return runner.invoke(app, list(args), env={**FAST_ENV, **env})


class TestShowCommand:
    """Tests for `scrollback show`."""

    def test_initial_window(self):
        """Test that the default window is the newest page."""
        result = invoke("show")

        assert result.exit_code == 0, result.output
        assert "980..999 (20 of 1000)" in result.output
        assert "Message 999" in result.output
        assert "Message 979" not in result.output

    def test_jump(self):
        """Test that --jump re-centers and highlights the target."""
        result = invoke("show", "--jump", "560")

        assert result.exit_code == 0, result.output
        assert "550..569 (20 of 1000)" in result.output
        assert "Newer below" in result.output
        assert "yes" in result.output
        assert "Highlighted" in result.output
        assert "560" in result.output.split("Highlighted", 1)[1]

    def test_jump_unknown_id(self):
        """Test that a missing jump target exits with an error."""
        result = invoke("show", "--jump", "nope")

        assert result.exit_code == 1
        assert "Message not found" in result.output

    def test_older_pages(self):
        """Test loading older pages after the initial window."""
        result = invoke("show", "--older", "2")

        assert result.exit_code == 0, result.output
        assert "940..999 (60 of 1000)" in result.output

    def test_newer_after_jump(self):
        """Test loading newer pages after a jump."""
        result = invoke("show", "--jump", "560", "--newer", "1")

        assert result.exit_code == 0, result.output
        assert "550..589 (40 of 1000)" in result.output

    def test_highlight_in_window(self):
        """Test that a visible reply target keeps the window."""
        result = invoke("show", "--highlight", "985")

        assert result.exit_code == 0, result.output
        assert "980..999" in result.output
        assert "985" in result.output.split("Highlighted", 1)[1]

    def test_small_channel(self):
        """Test the --size option."""
        result = invoke("show", "--size", "15")

        assert result.exit_code == 0, result.output
        assert "0..14 (15 of 15)" in result.output

    def test_invalid_config(self):
        """Test that a bad environment value is reported."""
        result = invoke("show", SCROLLBACK_PAGE_SIZE="0")

        assert result.exit_code == 1
        assert "invalid configuration" in result.output

    def test_short_pulse_still_shown(self):
        """Test that the highlight is rendered even when it clears quickly."""
        result = invoke("show", "--jump", "560", SCROLLBACK_HIGHLIGHT_OFF_DELAY="0.01")

        assert result.exit_code == 0, result.output
        assert "560" in result.output.split("Highlighted", 1)[1]

    def test_delayed_pulse_shown(self):
        """Test that a pulse with an on delay is rendered once it is on."""
        result = invoke(
            "show",
            "--highlight",
            "985",
            SCROLLBACK_HIGHLIGHT_ON_DELAY="0.05",
            SCROLLBACK_HIGHLIGHT_OFF_DELAY="0.1",
        )

        assert result.exit_code == 0, result.output
        assert "985" in result.output.split("Highlighted", 1)[1]

    def test_pulse_ending_before_start_rejected(self):
        """Test that an off delay shorter than the on delay is reported."""
        result = invoke(
            "show",
            SCROLLBACK_HIGHLIGHT_ON_DELAY="0.05",
            SCROLLBACK_HIGHLIGHT_OFF_DELAY="0.02",
        )

        assert result.exit_code == 1
        assert "invalid configuration" in result.output

    def test_missing_source(self, tmp_path):
        """Test that an unreadable fixture is reported."""
        result = invoke("show", "--source", str(tmp_path / "missing.json"))

        assert result.exit_code == 1
        assert "could not load message log" in result.output


class TestExportDemoCommand:
    """Tests for `scrollback export-demo`."""

    def test_export_and_browse(self, tmp_path):
        """Test that an exported fixture can be browsed with --source."""
        path = tmp_path / "fixtures" / "channel.json"

        result = invoke("export-demo", str(path), "--size", "30")
        assert result.exit_code == 0, result.output
        assert "Wrote 30 messages" in result.output

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data) == 30
        assert data[0] == {"id": "0", "sender": "other", "text": "Message 0"}

        result = invoke("show", "--source", str(path))
        assert result.exit_code == 0, result.output
        assert "10..29 (20 of 30)" in result.output

    def test_negative_size(self, tmp_path):
        """Test that a negative channel size is rejected."""
        result = invoke("export-demo", str(tmp_path / "out.json"), "--size", "-1")

        assert result.exit_code == 1
        assert "non-negative" in result.output
