"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Near-black background with violet and indigo accents
FINAL_SITE_NIGHT = Theme(
    name="final-site-night",
    primary="#8b5cf6",      # Violet - main accent
    secondary="#6366f1",    # Indigo - assistant messages
    accent="#d946ef",       # Fuchsia - dialogs and highlights
    foreground="#e5e5e5",   # Light text
    background="#000000",   # Black page
    success="#4ade80",      # Green - AI enabled, send
    warning="#fbbf24",      # Amber - notices
    error="#f87171",        # Red - decline buttons
    surface="#0d0d0f",      # Cards
    panel="#08080a",        # Panels
    dark=True,
    variables={
        "block-cursor-foreground": "#000000",
        "block-cursor-background": "#c4b5fd",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#1f1f23 20%",

        "input-cursor-background": "#e5e5e5",
        "input-cursor-foreground": "#000000",
        "input-selection-background": "#8b5cf6 30%",

        "border": "#27272a",
        "border-blurred": "#18181b",

        "scrollbar": "#18181b",
        "scrollbar-hover": "#27272a",
        "scrollbar-active": "#8b5cf6",
        "scrollbar-background": "#08080a",
        "scrollbar-corner-color": "#08080a",

        "footer-foreground": "#a1a1aa",
        "footer-background": "#000000",
        "footer-key-foreground": "#c4b5fd",
        "footer-key-background": "#18181b",
        "footer-description-foreground": "#a1a1aa",

        "text-muted": "#71717a",
        "text-disabled": "#3f3f46",

        "button-foreground": "#e5e5e5",
        "button-color-foreground": "#000000",
        "button-focus-text-style": "bold reverse",
    },
)
