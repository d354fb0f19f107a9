"""Modal screens for the TUI.

This module hides the design decisions about:
- Dialog appearance (CSS, layout)
- Button styling and variants
- Keyboard shortcuts for dialogs

Screens only collect the user's answer and dismiss with it; the app hands
the answer to the controller.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from ..config import CREDENTIAL_HELP_URL

DIALOG_CSS = """
{screen} {{
    align: center middle;
    background: $background 70%;
}}

{screen} .dialog {{
    width: 64;
    height: auto;
    max-height: 24;
    border: tall $accent;
    background: $surface;
    padding: 1 2;
}}

{screen} .dialog-title {{
    width: 100%;
    height: auto;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding: 0 0 1 0;
    border-bottom: solid $border;
    margin-bottom: 1;
}}

{screen} .dialog-prompt {{
    width: 100%;
    height: auto;
    padding: 0 1;
    color: $foreground;
    margin-bottom: 1;
}}

{screen} .dialog-help {{
    width: 100%;
    height: auto;
    padding: 0 1;
    color: $text-muted;
    margin-bottom: 1;
}}

{screen} .dialog-buttons {{
    width: 100%;
    height: 3;
    align: right middle;
    margin-top: 1;
}}

{screen} .dialog-buttons Button {{
    margin: 0 0 0 1;
    min-width: 10;
}}
"""


class CredentialScreen(ModalScreen[str | None]):
    """Asks for the completion-service API key.

    Dismisses with the typed key on save and with None on skip. Saving a
    blank key behaves like skip, which the controller decides.
    """

    CSS = DIALOG_CSS.format(screen="CredentialScreen")

    BINDINGS = [
        Binding("escape", "skip", "Skip", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static("🤖 Enable AI Chat", classes="dialog-title")
            yield Static(
                "To enable AI responses, please enter your Cohere API key:",
                classes="dialog-prompt",
            )
            yield Input(
                placeholder="Your Cohere API key...",
                password=True,
                id="credential-input",
            )
            yield Static(
                f"• Get your API key from the Cohere Dashboard: {CREDENTIAL_HELP_URL}\n"
                "• Your key is stored locally and never shared\n"
                "• You can change it anytime in settings (Ctrl+S)",
                classes="dialog-help",
                markup=False,
            )
            with Horizontal(classes="dialog-buttons"):
                yield Button("Skip (Demo Mode)", id="btn-skip")
                yield Button("Save & Continue", id="btn-save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#credential-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-save":
            self.dismiss(self.query_one("#credential-input", Input).value)
        elif event.button.id == "btn-skip":
            self.dismiss(None)

    def action_skip(self) -> None:
        self.dismiss(None)


class LeaveSiteScreen(ModalScreen[bool]):
    """Confirms leaving for the community server.

    Dismisses with True to open the link, False to stay.
    """

    CSS = DIALOG_CSS.format(screen="LeaveSiteScreen")

    BINDINGS = [
        Binding("y", "confirm_yes", "Yes", show=False),
        Binding("n", "confirm_no", "No", show=False),
        Binding("escape", "confirm_no", "Cancel", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static("Leave this site?", classes="dialog-title")
            yield Static(
                "Would you like to leave this site to join our discord server?",
                classes="dialog-prompt",
            )
            with Horizontal(classes="dialog-buttons"):
                yield Button("No", id="btn-no", variant="error")
                yield Button("↗ Yes, join Discord", id="btn-yes", variant="success")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")

    def action_confirm_yes(self) -> None:
        """Keyboard shortcut for Yes."""
        self.dismiss(True)

    def action_confirm_no(self) -> None:
        """Keyboard shortcut for No."""
        self.dismiss(False)
