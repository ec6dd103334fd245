"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - list over status bar
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Message List
   ============================================ */
#message-list {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }
}

/* ============================================
   Message Bubbles
   ============================================ */
.bubble {
    width: 60%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    background: $surface;
    transition: background 500ms;
}

/* Own messages on the right, blue accent */
.bubble.-self {
    margin-left: 40%;
    border-right: tall $primary;
    background: $primary 15%;
}

/* The other party on the left, green accent */
.bubble.-other {
    border-left: tall $success;
    background: $success 15%;
}

/* Highlight pulse wins over sender colours */
.bubble.-highlighted {
    background: $warning 60%;
    transition: background 0ms;
}

.message-text {
    height: auto;
    color: $foreground;
}

/* Quoted reply reference */
.reply-link {
    width: 80%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
    background: $background 60%;
    color: $text-muted;
    text-style: italic;

    &:hover {
        color: $accent;
        text-style: italic underline;
    }
}

/* ============================================
   Log Panel
   ============================================ */
#log-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}

/* ============================================
   Status Bar - loading indicator
   ============================================ */
#status-bar {
    height: 1;
    padding: 0 2;
    background: $surface;
    color: $foreground;
}
"""
