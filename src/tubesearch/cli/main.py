"""
Main CLI entry point for tubesearch.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from tubesearch import __version__
from tubesearch.cli.commands.cache import app as cache_app
from tubesearch.container import container
from tubesearch.exceptions import SearchFailedError, ValidationError
from tubesearch.models.enums import SearchType
from tubesearch.models.results import search_results_adapter
from tubesearch.services.search_service import SearchService

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="tubesearch",
    help="Search YouTube through the InnerTube API",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(cache_app, name="cache", help="Result cache commands")


def _setup_logging(verbose: bool = False) -> None:
    """
    Attach a stderr handler to the ``tubesearch`` logger.

    Parameters
    ----------
    verbose : bool, optional
        If True, log at DEBUG; otherwise use the configured level
        (default False).
    """
    log_level = logging.DEBUG if verbose else container.settings.log_level

    root_logger = logging.getLogger("tubesearch")
    root_logger.setLevel(log_level)

    if not any(getattr(h, "_tubesearch_cli", False) for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handler._tubesearch_cli = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        help="Maximum number of results (default from settings)",
    ),
    type_: str = typer.Option(
        SearchType.VIDEO.value,
        "--type",
        "-t",
        help='Result type: "video", "channel", "playlist" or "all"',
    ),
    no_cache: bool = typer.Option(
        False,
        "--no-cache",
        help="Bypass the local result cache",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output to stderr",
    ),
) -> None:
    """
    Search and print the results as JSON.

    Examples:
        tubesearch search "lofi hip hop"
        tubesearch search "python" --type channel --limit 3
        tubesearch search "synthwave" --type all --no-cache
    """
    _setup_logging(verbose)

    service = container.search_service
    if no_cache:
        service = SearchService(
            paginator=container.paginator,
            cache=None,
            default_limit=container.settings.default_limit,
        )

    try:
        results = asyncio.run(service.search(query, limit=limit, search_type=type_))
    except ValidationError as e:
        err_console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(code=2)
    except SearchFailedError as e:
        err_console.print(f"[red]Search failed: {e.message}[/red]")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Search interrupted by user[/yellow]")
        raise typer.Exit(code=130)

    console.print_json(data=search_results_adapter.dump_python(results, mode="json"))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]tubesearch[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


if __name__ == "__main__":
    app()
