"""CLI for agentboot (Typer + Rich)."""

from __future__ import annotations

import asyncio
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from agentboot.characters.assembler import load_all_characters
from agentboot.characters.types import Character, ensure_identity
from agentboot.config import get_settings
from agentboot.config.logging import get_logger, init_logging
from agentboot.errors import AgentBootError, NotFoundError
from agentboot.plugins.activation import ActivationResult, import_plugins
from agentboot.plugins.catalog import builtin, builtin_names

app = typer.Typer(
    name="agentboot",
    help="Resolve agent characters and the capabilities they activate.",
    no_args_is_help=True,
)
console = Console()
logger = get_logger("cli")


def _setup() -> None:
    """Load .env for local runs and start logging."""
    load_dotenv()
    init_logging()


def _plugin_label(plugin: object) -> str:
    return getattr(plugin, "name", None) or type(plugin).__name__


async def _resolve(characters_arg: str | None) -> list[tuple[Character, ActivationResult]]:
    settings = get_settings()
    characters = await load_all_characters(characters_arg, settings=settings)
    resolved = []
    for character in characters:
        ensure_identity(character)
        resolved.append((character, await import_plugins(character, inference=settings.inference)))
    return resolved


def _character_table(resolved: list[tuple[Character, ActivationResult]]) -> Table:
    table = Table(title="Characters")
    table.add_column("Name", style="cyan")
    table.add_column("Id", style="dim")
    table.add_column("Clients")
    table.add_column("Capabilities")
    table.add_column("Inference")

    for character, activation in resolved:
        adapter = activation.verifiable_inference_adapter
        table.add_row(
            character.name,
            character.id or "",
            ", ".join(character.clients) or "-",
            ", ".join(_plugin_label(p) for p in activation.plugins) or "-",
            adapter.provider if adapter else "-",
        )
    return table


@app.command()
def resolve(
    character: Annotated[Optional[str], typer.Option(help="Path to the character JSON file")] = None,
    characters: Annotated[
        Optional[str], typer.Option(help="Comma separated list of paths to character JSON files")
    ] = None,
) -> None:
    """Resolve characters and show the capabilities each one activates."""
    _setup()
    characters_arg = characters or character

    try:
        resolved = asyncio.run(_resolve(characters_arg))
    except NotFoundError as e:
        console.print(f"[red]Error:[/] {e}")
        for path in e.attempted:
            console.print(f"  [dim]tried[/] {path}")
        raise typer.Exit(1)
    except AgentBootError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    logger.info(f"Resolved {len(resolved)} character(s)")
    console.print(_character_table(resolved))


@app.command()
def capabilities() -> None:
    """List the built-in capabilities."""
    table = Table(title="Built-in capabilities")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name in builtin_names():
        table.add_row(name, builtin(name).description)
    console.print(table)
