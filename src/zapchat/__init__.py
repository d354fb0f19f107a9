"""
Zapchat: Zap, the Final Site chat assistant, as a terminal chat widget.

Replies come from canned strings picked by keyword matching, delivered
behind a simulated typing delay. Each module hides a specific design
decision.
"""

__version__ = "0.1.0"

from .chat import (
    ConversationController,
    Message,
    MessageLog,
    ResponseSelector,
    Sender,
)
from .config import ChatConfig

__all__ = [
    "ChatConfig",
    "ConversationController",
    "Message",
    "MessageLog",
    "ResponseSelector",
    "Sender",
]
