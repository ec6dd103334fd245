"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Dark/light mode configuration

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Muted dark palette; warning doubles as the highlight pulse colour
NIGHT_CHANNEL = Theme(
    name="night-channel",
    primary="#7aa2f7",      # Blue - own messages, focus borders
    secondary="#bb9af7",    # Purple
    accent="#e0af68",       # Amber - dialogs, reply hover
    foreground="#c0caf5",
    background="#16161e",
    success="#9ece6a",      # Green - other party's messages
    warning="#ff9e64",      # Orange - highlight pulse, log panel
    error="#f7768e",
    surface="#1a1b26",
    panel="#1f2335",
    dark=True,
    variables={
        "border": "#3b4261",
        "border-blurred": "#292e42",
        "scrollbar": "#292e42",
        "scrollbar-hover": "#3b4261",
        "scrollbar-active": "#7aa2f7",
        "scrollbar-background": "#1f2335",
        "footer-key-foreground": "#e0af68",
        "text-muted": "#565f89",
    },
)
