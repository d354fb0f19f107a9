"""Message rendering for the TUI and the line-mode chat.

Hides how a message is laid out: which side it sits on, what its header
says, and how a file offer is described. ``render_message`` is a pure
projection; the widgets and the CLI only draw what it returns.
"""

from dataclasses import dataclass

from rich.panel import Panel
from rich.text import Text

from ..chat.models import Message, Sender
from .config import ASSISTANT_TAG, MESSAGE_TIMESTAMP_FORMAT


@dataclass(frozen=True)
class MessageView:
    """What the view shows for one message."""

    message_id: str
    align: str  # "left" or "right"
    header: str
    body: str
    download_name: str | None = None

    @property
    def is_file(self) -> bool:
        return self.download_name is not None


def describe_file(file_type: str, size: str) -> str:
    """Secondary line of a file message, e.g. "ZIP file • 2.4 MB"."""
    if file_type and size:
        return f"{file_type} • {size}"
    return file_type or size


def render_message(message: Message) -> MessageView:
    """Project a message to its on-screen form.

    User messages sit on the right, assistant messages on the left. A file
    message shows the file name, its type and size, and is downloadable.
    """
    timestamp = message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
    if message.sender == Sender.USER:
        align, author = "right", "You"
    else:
        align, author = "left", ASSISTANT_TAG

    if message.attachment is not None:
        attachment = message.attachment
        body = f"{attachment.name}\n{describe_file(attachment.file_type, attachment.size)}".rstrip()
        return MessageView(
            message_id=message.id,
            align=align,
            header=f"{author} · {timestamp}",
            body=body,
            download_name=attachment.name,
        )

    return MessageView(
        message_id=message.id,
        align=align,
        header=f"{author} · {timestamp}",
        body=message.content,
    )


def render_log(messages) -> list[MessageView]:
    """Render messages in log order."""
    return [render_message(message) for message in messages]


def render_panel(view: MessageView) -> Panel:
    """Rich panel for line-mode output."""
    style = "green" if view.align == "right" else "magenta"
    return Panel(
        Text(view.body, overflow="fold"),
        title=view.header,
        title_align=view.align,
        subtitle="⬇ download" if view.is_file else None,
        subtitle_align=view.align,
        border_style=style,
        expand=False,
    )
