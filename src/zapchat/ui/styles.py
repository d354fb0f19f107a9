"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout, top to bottom: header, status line, message thread, typing
indicator, hints, command palette, attachments, input bar, command
buttons, log panel, footer. Optional panels take no space while hidden.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Loading Splash
   ============================================ */
#loading-splash {
    width: 100%;
    height: 1fr;
    content-align: center middle;
    text-align: center;
    color: $primary;
}

#main {
    height: 1fr;
    padding: 0 2;
}

#status-line {
    height: 1;
    width: 100%;
    text-align: center;
    color: $text-muted;
    margin: 1 0;
}

/* ============================================
   Message Thread
   ============================================ */
#message-log {
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

    &:focus-within {
        border: round $primary;
    }
}

.chat-message {
    width: auto;
    max-width: 80%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    border: none;
}

/* User messages - violet, on the right */
.user-message {
    border-right: tall $primary;
    background: $primary 20%;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }

    & .message-content {
        text-align: right;
    }
}

/* Assistant messages - muted card, on the left */
.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.file-message {
    border-left: tall $accent;
    background: $accent 10%;

    & .message-content {
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

.download-btn {
    margin-top: 1;
    min-width: 14;
}

/* ============================================
   Typing Indicator
   ============================================ */
#typing-indicator {
    height: 1;
    width: 100%;
    text-align: center;
    color: $text-muted;
    margin-top: 1;
}

/* ============================================
   Attachments
   ============================================ */
#attachment-bar {
    height: 3;
    margin-top: 1;

    & .attachment-name {
        width: auto;
        height: 3;
        content-align: center middle;
        padding: 0 1;
        background: $surface;
        color: $text-muted;
    }

    & .attachment-remove {
        min-width: 5;
        width: 5;
        margin-right: 2;
    }
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    margin-top: 1;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    border: none;
    background: transparent;
}

#send-btn {
    width: 10;
    min-width: 8;
    margin: 0 0 0 1;
    text-style: bold;
}

/* ============================================
   Command Buttons, Palette, Hints
   ============================================ */
#command-bar {
    height: 3;
    width: 100%;
    align: center middle;
    margin-top: 1;

    & .command-btn {
        margin: 0 1;
        min-width: 12;
        background: $surface;
        color: $text-muted;
        border: none;

        &:hover {
            color: $foreground;
            background: $primary 15%;
        }
    }
}

#command-palette {
    height: auto;
    max-height: 9;
    background: $surface;
    border: round $accent 60%;
    border-title-color: $accent;
    padding: 0 1;

    & .palette-row {
        height: 1;
        color: $text-muted;

        &.-active {
            background: $accent 25%;
            color: $foreground;
        }
    }
}

#hints-panel {
    height: auto;
    width: 36;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-align: center;
    padding: 0 1;

    & .hint-btn {
        width: 100%;
        margin-bottom: 1;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    margin-top: 1;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }
}

* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}

Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}
"""
