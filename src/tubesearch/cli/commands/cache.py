"""
CLI commands for managing the local search result cache.

Provides ``tubesearch cache status`` and ``tubesearch cache clear``.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from tubesearch.container import container

console = Console()

app = typer.Typer(
    name="cache",
    help="Manage the local search result cache.",
    no_args_is_help=True,
)


@app.command(name="status")
def status() -> None:
    """
    Display cache configuration and occupancy.

    Examples:
        tubesearch cache status
    """
    cache = container.cache
    if cache is None:
        console.print("[yellow]Caching is disabled[/yellow]")
        return

    table = Table(title="Search Cache Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Backend", container.settings.cache_backend)
    table.add_row("Namespace", cache.namespace)
    table.add_row("Entries", f"{len(cache)}/{cache.capacity}")
    table.add_row("Max age", f"{cache.max_age:g}s")
    console.print(table)


@app.command(name="clear")
def clear() -> None:
    """
    Remove every cached search result.

    Examples:
        tubesearch cache clear
    """
    cache = container.cache
    if cache is None:
        console.print("[yellow]Caching is disabled, nothing to clear[/yellow]")
        return

    count = len(cache)
    container.search_service.clear_cache()
    console.print(f"[green]Cleared {count} cached search(es)[/green]")
