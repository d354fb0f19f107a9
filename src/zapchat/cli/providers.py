"""Factory functions for CLI.

Centralizes creation of the chat configuration and the credential store from
environment variables and command-line overrides. Hides configuration
details from command implementations.
"""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import ChatConfig
from ..errors import UnknownBackendError
from ..storage import SUPPORTED_BACKENDS, CredentialStore, create_store

# Default console for output
_console = Console()


def get_config(
    console: Console | None = None,
    store: str | None = None,
    store_path: Path | None = None,
    serialize: bool | None = None,
    speed: float | None = None,
) -> ChatConfig:
    """Build the chat configuration.

    Command-line values win over ZAPCHAT_* environment variables; options
    left unset fall back to the environment, then to defaults.

    Raises:
        SystemExit: If the configuration is invalid
    """
    con = console or _console
    try:
        config = ChatConfig.from_env(
            store_backend=store.lower() if store else None,
            store_path=store_path,
            serialize_replies=serialize,
            speed=speed,
        )
    except (ValidationError, ValueError) as e:
        con.print(f"[red]Error: invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)

    if config.store_backend not in SUPPORTED_BACKENDS:
        con.print(
            f"[red]Error: {UnknownBackendError(config.store_backend, SUPPORTED_BACKENDS)}[/red]"
        )
        raise typer.Exit(code=1)
    return config


def get_credentials(config: ChatConfig, console: Console | None = None) -> CredentialStore:
    """Create the credential store named by ``config``.

    Environment variables:
        ZAPCHAT_STORE: Backend type (file or memory; default: file)
        ZAPCHAT_STORE_PATH: JSON file for the file backend
            (default: ~/.config/zapchat/storage.json)
    """
    store_config = {}
    if config.store_backend == "file":
        store_config["path"] = config.store_path
    store = create_store(config.store_backend, **store_config)
    credentials = CredentialStore(store, key=config.credential_key)

    con = console or _console
    if config.store_backend == "memory":
        con.print("[dim]Using in-memory key storage; the key is forgotten on exit.[/dim]")
    return credentials
