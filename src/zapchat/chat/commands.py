"""Command suggestions and message hints.

These are input shortcuts only. Picking one fills the input buffer; the
text is then submitted like any other message. ``/discord`` is the only
prefix the controller intercepts.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSuggestion:
    """An entry of the command palette."""

    icon: str
    label: str
    description: str
    prefix: str

    @property
    def fill_text(self) -> str:
        """Text placed in the input when the suggestion is picked."""
        return f"{self.prefix} "


COMMAND_SUGGESTIONS: tuple[CommandSuggestion, ...] = (
    CommandSuggestion("🖼️", "Clone UI", "Generate a UI from a screenshot", "/clone"),
    CommandSuggestion("🎨", "Import Figma", "Import a design from Figma", "/figma"),
    CommandSuggestion("📄", "Create Page", "Generate a new web page", "/page"),
    CommandSuggestion("✨", "Improve", "Improve existing UI design", "/improve"),
    CommandSuggestion("🔗", "Discord", "Join our Discord server", "/discord"),
)

MESSAGE_HINTS: tuple[str, ...] = ("Scripts", "Help", "Hi")


def match_commands(text: str) -> list[CommandSuggestion]:
    """Suggestions whose prefix starts with what has been typed so far.

    Only text starting with "/" is matched; anything else yields nothing.
    """
    typed = text.strip().lower()
    if not typed.startswith("/"):
        return []
    word = typed.split()[0]
    return [s for s in COMMAND_SUGGESTIONS if s.prefix.startswith(word)]


def find_command(prefix: str) -> CommandSuggestion | None:
    prefix = prefix.strip().lower()
    for suggestion in COMMAND_SUGGESTIONS:
        if suggestion.prefix == prefix:
            return suggestion
    return None
