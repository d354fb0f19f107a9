"""Main CLI application using Typer."""
import asyncio
import random
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..chat import (
    COMMAND_SUGGESTIONS,
    MESSAGE_HINTS,
    AsyncioScheduler,
    ConversationController,
    ManualScheduler,
    Message,
    MockFileDownloader,
)
from ..config import COMMUNITY_URL
from ..ui.formatting import render_message, render_panel
from .providers import get_config, get_credentials

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="zapchat",
    help="Chat with Zap, the Final Site assistant, in your terminal",
    no_args_is_help=True,
    add_completion=True,
)

key_app = typer.Typer(help="Manage the stored Cohere API key", no_args_is_help=True)
app.add_typer(key_app, name="key")

# Console for rich output
console = Console()

STORE_OPTION = typer.Option(
    None,
    "--store",
    help="Key storage: 'file' (persistent) or 'memory' (session-only)",
)
STORE_PATH_OPTION = typer.Option(
    None,
    "--store-path",
    help="JSON file used by the file store",
)

EXIT_WORDS = ("exit", "quit", "q")


def _print_message(message: Message) -> None:
    console.print(render_panel(render_message(message)))


def _mask(value: str) -> str:
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}…{value[-4:]}"


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    store: str | None = STORE_OPTION,
    store_path: Path | None = STORE_PATH_OPTION,
    serialize: bool | None = typer.Option(
        None,
        "--serialize/--no-serialize",
        help="Ignore new messages while Zap is still typing"
    ),
    speed: float | None = typer.Option(
        None,
        "--speed",
        help="Delay multiplier (0 = instant, 1 = normal)"
    ),
):
    """Launch the interactive TUI chat widget."""
    from ..ui import run_textual_tui

    config = get_config(console, store=store, store_path=store_path, serialize=serialize, speed=speed)
    try:
        asyncio.run(run_textual_tui(config=config, log_level=log_level))
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def chat(
    store: str | None = STORE_OPTION,
    store_path: Path | None = STORE_PATH_OPTION,
    speed: float | None = typer.Option(
        None,
        "--speed",
        help="Delay multiplier (0 = instant, 1 = normal)"
    ),
):
    """Interactive line-mode chat."""
    config = get_config(console, store=store, store_path=store_path, speed=speed)
    credentials = get_credentials(config, console)

    async def _chat():
        scheduler = AsyncioScheduler()
        downloader = MockFileDownloader()
        controller = ConversationController(
            scheduler,
            config,
            credentials=credentials,
            downloader=downloader,
        )
        controller.log.subscribe(_print_message)
        credential = controller.load_credential()
        if controller.state.notice:
            console.print(f"[yellow]{controller.state.notice}[/yellow]")

        mode = "[green]AI Enabled[/green]" if credential else "[magenta]Demo Mode[/magenta]"
        console.print(f"[bold cyan]Final Site · Chat with Zap[/bold cyan] ({mode})")
        console.print("[dim]Type ':download' to fetch the last offered file[/dim]")
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

        try:
            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input.strip():
                    continue

                if user_input.strip().lower() in EXIT_WORDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                if user_input.strip() == ":download":
                    offered = [m for m in controller.log if m.is_file]
                    if not offered:
                        console.print("[yellow]No file has been offered yet[/yellow]")
                        continue
                    controller.download(offered[-1].attachment.name)
                    console.print(f"[dim]Downloading {offered[-1].attachment.name}…[/dim]")
                    continue

                controller.submit(user_input)

                if controller.state.link_confirm_open:
                    if typer.confirm("Would you like to leave this site to join our discord server?"):
                        controller.confirm_link()
                        console.print(f"[dim]Opening {config.community_url}[/dim]")
                    else:
                        controller.decline_link()

                if scheduler.pending:
                    with console.status("[dim]zap is thinking...[/dim]"):
                        await scheduler.wait_idle()
        finally:
            controller.close()

    asyncio.run(_chat())


@app.command()
def ask(
    text: str = typer.Argument(..., help="Message to send"),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for the fallback reply choice"
    ),
    store: str | None = STORE_OPTION,
    store_path: Path | None = STORE_PATH_OPTION,
):
    """Send one message and print every reply it triggers."""
    config = get_config(console, store=store, store_path=store_path)
    credentials = get_credentials(config, console)

    scheduler = ManualScheduler()
    controller = ConversationController(
        scheduler,
        config,
        rng=random.Random(seed),
        credentials=credentials,
    )
    controller.log.subscribe(_print_message)
    controller.load_credential()

    if controller.submit(text) is None:
        console.print("[yellow]Nothing to send[/yellow]")
        raise typer.Exit(code=1)

    if controller.state.link_confirm_open:
        console.print(f"[dim]Join our Discord server: {config.community_url}[/dim]")

    scheduler.run_all()
    controller.close()


@key_app.command("set")
def key_set(
    value: str = typer.Argument(..., help="Cohere API key"),
    store: str | None = STORE_OPTION,
    store_path: Path | None = STORE_PATH_OPTION,
):
    """Store the API key and enable AI mode."""
    value = value.strip()
    if not value:
        console.print("[red]Error: API key is empty[/red]")
        raise typer.Exit(code=1)

    config = get_config(console, store=store, store_path=store_path)
    credentials = get_credentials(config, console)
    credentials.save(value)
    if credentials.degraded:
        console.print(f"[red]Error: {credentials.notice}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]API key saved[/green] ({credentials.backend_type})")


@key_app.command("show")
def key_show(
    store: str | None = STORE_OPTION,
    store_path: Path | None = STORE_PATH_OPTION,
):
    """Show the stored API key, masked."""
    config = get_config(console, store=store, store_path=store_path)
    credentials = get_credentials(config, console)
    value = credentials.load()
    if credentials.degraded:
        console.print(f"[yellow]{credentials.notice}[/yellow]")
    if value:
        console.print(f"API key: {_mask(value)} [green](AI Enabled)[/green]")
    else:
        console.print("No API key stored [magenta](Demo Mode)[/magenta]")


@key_app.command("clear")
def key_clear(
    store: str | None = STORE_OPTION,
    store_path: Path | None = STORE_PATH_OPTION,
):
    """Forget the stored API key."""
    config = get_config(console, store=store, store_path=store_path)
    credentials = get_credentials(config, console)
    credentials.clear()
    if credentials.degraded:
        console.print(f"[red]Error: {credentials.notice}[/red]")
        raise typer.Exit(code=1)
    console.print("[green]API key removed[/green] [magenta](Demo Mode)[/magenta]")


@app.command()
def commands():
    """List the slash commands and message hints."""
    table = Table(title="Commands", show_header=True, header_style="bold cyan")
    table.add_column("", width=2)
    table.add_column("Command", style="bold")
    table.add_column("Description")
    for suggestion in COMMAND_SUGGESTIONS:
        table.add_row(suggestion.icon, suggestion.prefix, suggestion.description)
    console.print(table)

    console.print(f"\n[dim]Hints:[/dim] {', '.join(MESSAGE_HINTS)}")
    console.print(f"[dim]Community:[/dim] {COMMUNITY_URL}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
