"""Data models for the chat engine.

Hides the representation of messages and of the widget state. Both are
frozen: messages never change after creation, and state changes go through
the reducers in ``state.py``.
"""

import time
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

_last_message_id = 0


def next_message_id() -> str:
    """Return a timestamp-derived id, strictly increasing within the process."""
    global _last_message_id
    candidate = time.time_ns() // 1000
    _last_message_id = max(candidate, _last_message_id + 1)
    return str(_last_message_id)


class Sender(str, Enum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatStatus(str, Enum):
    """Conversation state machine."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"  # typing indicator active


class FileAttachment(BaseModel):
    """File metadata carried by a message. There are no file bytes."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="File name shown and offered for download")
    file_type: str = Field(default="", description="Human-readable type label")
    size: str = Field(default="", description="Human-readable size label")


class Message(BaseModel):
    """A single entry of the message log."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=next_message_id)
    content: str
    sender: Sender
    timestamp: datetime = Field(default_factory=datetime.now)
    attachment: FileAttachment | None = None

    @property
    def is_file(self) -> bool:
        return self.attachment is not None


class ChatState(BaseModel):
    """Everything the widget shows besides the message log.

    The flags are independent toggles. The only coupling is that a reply
    being typed, or a blank input buffer, disables sending.
    """

    model_config = ConfigDict(frozen=True)

    loading: bool = True
    input_text: str = ""
    typing: bool = False
    pending_replies: int = 0
    attachments: tuple[str, ...] = ()
    credential: str = ""
    credential_draft: str = ""
    credential_modal_open: bool = False
    link_confirm_open: bool = False
    hints_open: bool = False
    palette_open: bool = False
    active_suggestion: int = -1
    notice: str | None = None

    @property
    def status(self) -> ChatStatus:
        return ChatStatus.AWAITING_REPLY if self.typing else ChatStatus.IDLE

    @property
    def can_send(self) -> bool:
        return bool(self.input_text.strip()) and not self.typing

    @property
    def demo_mode(self) -> bool:
        return not self.credential
