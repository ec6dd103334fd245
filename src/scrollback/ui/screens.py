"""Modal screens for the TUI.

This module hides the design decisions about:
- Jump dialog appearance (CSS, layout)
- Keyboard shortcuts for dialogs
- How a jump target is collected from the user

To change how the dialog looks, modify only this file.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static


class JumpScreen(ModalScreen[str | None]):
    """Modal dialog asking for the id of the message to jump to.

    Dismisses with the entered id, or None when cancelled.
    """

    CSS = """
    JumpScreen {
        align: center middle;
        background: $background 70%;
    }

    #jump-dialog {
        width: 50;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #jump-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #jump-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    #jump-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="jump-dialog"):
            yield Static("Jump to message", id="jump-title")
            yield Input(placeholder="Message id, e.g. 560", id="jump-input")
            with Horizontal(id="jump-buttons"):
                yield Button("Jump", id="btn-jump", variant="success")
                yield Button("Cancel", id="btn-cancel", variant="error")

    def on_mount(self) -> None:
        self.query_one("#jump-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-jump":
            self._submit(self.query_one("#jump-input", Input).value)
        else:
            self.dismiss(None)

    def _submit(self, value: str) -> None:
        target_id = value.strip()
        self.dismiss(target_id or None)

    def action_cancel(self) -> None:
        self.dismiss(None)
