"""Chat engine for zapchat.

Module structure (each module hides a design decision):
- models.py: Message and widget state representation
- state.py: State transitions (reducers)
- responses.py: Canned replies and keyword matching
- scheduler.py: How delayed callbacks run
- simulator.py: Typing delay model
- log.py: Append-only message storage
- commands.py: Command palette and hints content
- services.py: Download and completion collaborators
- controller.py: Conversation flow
"""

from .commands import COMMAND_SUGGESTIONS, MESSAGE_HINTS, CommandSuggestion, find_command, match_commands
from .controller import ConversationController
from .log import MessageLog
from .models import ChatState, ChatStatus, FileAttachment, Message, Sender
from .responses import ResponseSelector, wants_scripts_offer
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from .services import (
    CompletionClient,
    DemoCompletionClient,
    FileDownloader,
    MockFileDownloader,
)
from .simulator import TypingSimulator, typing_delay_ms

__all__ = [
    "COMMAND_SUGGESTIONS",
    "MESSAGE_HINTS",
    "AsyncioScheduler",
    "ChatState",
    "ChatStatus",
    "CommandSuggestion",
    "CompletionClient",
    "ConversationController",
    "DemoCompletionClient",
    "FileAttachment",
    "FileDownloader",
    "ManualScheduler",
    "Message",
    "MessageLog",
    "MockFileDownloader",
    "ResponseSelector",
    "Scheduler",
    "Sender",
    "TypingSimulator",
    "find_command",
    "match_commands",
    "typing_delay_ms",
    "wants_scripts_offer",
]
