"""Canned replies and the keyword matcher that picks between them.

This module hides which words trigger which reply. It is the whole of the
assistant's "intelligence" in demo mode: ordered substring checks with a
random generic fallback.
"""

import random

SCRIPTS_REPLY = (
    "I'd love to tell you about our scripts! We have a huge collection of completely "
    "free automation tools, utilities, and development helpers. Our Discord community "
    "has even more resources and people who can help you find exactly what you need. "
    "Want me to share our scripts collection?"
)

HELP_REPLY = (
    "I'm here to help! While I'm running in demo mode right now, I can still try to "
    "assist you. Our Discord community is also incredibly active - we have developers, "
    "scripters, and tech enthusiasts who love helping each other out. What specific "
    "help are you looking for?"
)

COMMUNITY_REPLY = (
    "Our Discord server is the heart of the Final Site community! It's where we share "
    "scripts, help each other with coding problems, discuss new tech, and just hang out. "
    "We've got channels for different programming languages, script sharing, general "
    "tech talk, and more. It's a really welcoming community for all skill levels."
)

INTRODUCTION_REPLY = (
    "I'm Zap, the AI assistant for Final Site! I'm here to help you learn about our "
    "community, find scripts, answer tech questions, and connect you with our awesome "
    "Discord community. Think of me as your friendly guide to everything Final Site "
    "has to offer. What would you like to know?"
)

FALLBACK_RESPONSES: tuple[str, ...] = (
    "I'm currently running in demo mode, so my responses might be a bit limited. For "
    "the full AI experience, you can add your Cohere API key in the settings! In the "
    "meantime, our Discord community is always active and ready to help with any "
    "questions you might have.",
    "That's a great question! While I'm in demo mode right now, I'd love to help you "
    "find the answer. Our Discord community has tons of knowledgeable members who could "
    "dive deep into that topic with you.",
    "Interesting topic! I'm running with limited capabilities at the moment, but our "
    "Discord server has some really smart people who love discussing these kinds of "
    "questions. You might get some fascinating insights there!",
    "I'd love to give you a more detailed response, but I'm currently in demo mode. For "
    "better AI interactions, consider adding your Cohere API key in settings. Otherwise, "
    "our Discord community is incredibly helpful for questions like this!",
    "Good question! While my demo mode responses are pretty basic, our Final Site "
    "community has members with deep expertise in all sorts of tech topics. They'd "
    "probably have some great insights to share!",
)

SCRIPTS_PROMO = "Here's our complete scripts collection! 📁"

DECLINE_LINK_REPLY = (
    "No problem! The Discord link is always here when you're ready. "
    "Feel free to ask me anything else! 🤖"
)

# Order matters: the first group with a matching keyword wins.
KEYWORD_REPLIES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("script",), SCRIPTS_REPLY),
    (("help", "support"), HELP_REPLY),
    (("discord",), COMMUNITY_REPLY),
    (("who are you", "what are you"), INTRODUCTION_REPLY),
)

# Words that make a message "about scripts" for the file offer.
SCRIPT_KEYWORDS: tuple[str, ...] = ("script", "download", "file", "code", "automation", "tool")


def match_keyword_reply(text: str) -> str | None:
    """Return the reply of the first keyword group found in ``text``, if any."""
    lowered = text.lower()
    for keywords, reply in KEYWORD_REPLIES:
        if any(keyword in lowered for keyword in keywords):
            return reply
    return None


def wants_scripts_offer(text: str) -> bool:
    """True when a message should be followed by the scripts file offer.

    The message must mention one of the script keywords and, specifically,
    the word "script".
    """
    lowered = text.lower()
    has_keyword = any(keyword in lowered for keyword in SCRIPT_KEYWORDS)
    return has_keyword and "script" in lowered


class ResponseSelector:
    """Maps a user utterance to a canned reply.

    Deterministic except for the generic fallback, which draws from
    ``FALLBACK_RESPONSES`` with the injected random source.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        fallbacks: tuple[str, ...] = FALLBACK_RESPONSES,
    ) -> None:
        if not fallbacks:
            raise ValueError("ResponseSelector needs at least one fallback reply")
        self._rng = rng or random.Random()
        self._fallbacks = fallbacks

    @property
    def fallbacks(self) -> tuple[str, ...]:
        return self._fallbacks

    def select(self, user_text: str) -> str:
        reply = match_keyword_reply(user_text)
        if reply is not None:
            return reply
        return self._rng.choice(self._fallbacks)
