"""Configuration for the chat engine.

Centralizes every timing constant and every piece of fixed content that is
not a canned reply: storage key, community link, scripts file metadata.
"""

import os
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# (level, component, message), level one of debug/info/warning/error
DebugCallback = Callable[[str, str, str], None]

# Typing simulation (milliseconds)
TYPING_BASE_DELAY_MS = 1000
TYPING_PER_CHAR_MS = 30
TYPING_MAX_EXTRA_MS = 3000

# Scripts offer follow-ups (milliseconds)
PROMO_DELAY_MS = 1500
FILE_OFFER_DELAY_MS = 500

# Startup flow (milliseconds)
LOADING_DELAY_MS = 2000
FIRST_RUN_PROMPT_DELAY_MS = 1000

# Persistence
CREDENTIAL_KEY = "cohere_api_key"
DEFAULT_STORE_PATH = Path.home() / ".config" / "zapchat" / "storage.json"

# External links
COMMUNITY_URL = "https://discord.gg/nn9Gzppq6V"
CREDENTIAL_HELP_URL = "https://dashboard.cohere.ai/api-keys"

DISCORD_COMMAND = "/discord"


class ScriptsFile(BaseModel):
    """Metadata of the scripts bundle offered in chat."""

    model_config = ConfigDict(frozen=True)

    name: str = "All_Scripts.zip"
    file_type: str = "ZIP file"
    size: str = "2.4 MB"


class ChatConfig(BaseModel):
    """Runtime configuration for the conversation controller."""

    model_config = ConfigDict(frozen=True)

    typing_base_delay_ms: int = Field(default=TYPING_BASE_DELAY_MS, ge=0)
    typing_per_char_ms: int = Field(default=TYPING_PER_CHAR_MS, ge=0)
    typing_max_extra_ms: int = Field(default=TYPING_MAX_EXTRA_MS, ge=0)
    promo_delay_ms: int = Field(default=PROMO_DELAY_MS, ge=0)
    file_offer_delay_ms: int = Field(default=FILE_OFFER_DELAY_MS, ge=0)
    loading_delay_ms: int = Field(default=LOADING_DELAY_MS, ge=0)
    first_run_prompt_delay_ms: int = Field(default=FIRST_RUN_PROMPT_DELAY_MS, ge=0)
    speed: float = Field(
        default=1.0,
        ge=0.0,
        description="Multiplier applied to every delay (0 makes timers fire immediately)",
    )
    serialize_replies: bool = Field(
        default=False,
        description="Reject submissions while a reply is still being typed",
    )
    credential_key: str = CREDENTIAL_KEY
    community_url: str = COMMUNITY_URL
    scripts_file: ScriptsFile = Field(default_factory=ScriptsFile)
    store_backend: str = "file"
    store_path: Path = DEFAULT_STORE_PATH

    def seconds(self, delay_ms: int) -> float:
        """Convert a delay in milliseconds to scaled seconds for a scheduler."""
        return delay_ms * self.speed / 1000

    @classmethod
    def from_env(cls, **overrides) -> "ChatConfig":
        """Build a config from ZAPCHAT_* environment variables.

        Environment variables:
            ZAPCHAT_STORE: Credential store backend (file or memory; default: file)
            ZAPCHAT_STORE_PATH: JSON file used by the file backend
            ZAPCHAT_SERIALIZE_REPLIES: "1"/"true" to block input while typing
            ZAPCHAT_SPEED: Delay multiplier (default: 1.0)
        """
        values: dict = {}
        if backend := os.getenv("ZAPCHAT_STORE"):
            values["store_backend"] = backend.lower()
        if path := os.getenv("ZAPCHAT_STORE_PATH"):
            values["store_path"] = Path(path).expanduser()
        if serialize := os.getenv("ZAPCHAT_SERIALIZE_REPLIES"):
            values["serialize_replies"] = serialize.lower() in ("1", "true", "yes", "on")
        if speed := os.getenv("ZAPCHAT_SPEED"):
            values["speed"] = float(speed)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
