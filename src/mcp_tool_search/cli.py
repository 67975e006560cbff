# mcp_tool_search/cli.py
"""Command line entry point: search the merged project/user tool index."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mcp_tool_search.config.enums import CliScope, ConfigScope, IndexScope
from mcp_tool_search.config.defaults import DEFAULT_LOG_LEVEL
from mcp_tool_search.config.env_vars import EnvVar, get_env, is_debug_enabled
from mcp_tool_search.config.fingerprint import (
    create_all_config_fingerprints,
    get_config_path,
    get_package_version,
)
from mcp_tool_search.config.logging import setup_logging
from mcp_tool_search.config.models import ConfigOverride, SearchConfig
from mcp_tool_search.config.runtime import RuntimeConfig
from mcp_tool_search.context import SearchContext
from mcp_tool_search.errors import SearchError
from mcp_tool_search.index.scope import get_index_path, load_collection, load_index
from mcp_tool_search.search.models import SearchResult

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Search MCP tool indexes")


@app.callback()
def main_callback(
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress most log output"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Set log level (default: $MCP_SEARCH_LOG_LEVEL or WARNING)"
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Rotating log file"),
) -> None:
    """Configure logging before any subcommand runs."""
    setup_logging(
        level=log_level or get_env(EnvVar.LOG_LEVEL, DEFAULT_LOG_LEVEL),
        quiet=quiet,
        verbose=verbose or is_debug_enabled(),
        log_file=log_file,
    )


def _render_results(query: str, results: list[SearchResult]) -> None:
    if not results:
        console.print(f"[yellow]No tools matched[/yellow] '{query}'")
        return

    table = Table(title=f"Results for '{query}'")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tool", style="bold cyan")
    table.add_column("Server", style="green")
    table.add_column("Score", justify="right")
    table.add_column("Description")

    for position, result in enumerate(results, start=1):
        table.add_row(
            str(position),
            result.tool.name,
            result.tool.server_name,
            f"{result.score:.4f}",
            result.tool.description or "",
        )
    console.print(table)


@app.command("search")
def search_command(
    query: str = typer.Argument(..., help="Search query (a regex in pattern mode)"),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="pattern | bm25 | embedding | hybrid"
    ),
    top_k: Optional[int] = typer.Option(None, "--top-k", "-k", min=1, help="Max results"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", min=0.0, max=1.0, help="Minimum score"
    ),
    scope: CliScope = typer.Option(CliScope.ALL, "--scope", "-s", help="Index scope"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file (default: .please/mcp.json)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Rank tools in the merged index against a query."""

    async def _inner() -> list[SearchResult]:
        config_path = config_file or get_config_path(ConfigScope.PROJECT)
        file_config = await SearchConfig.load_async(config_path)
        runtime = RuntimeConfig(
            file_config,
            ConfigOverride(mode=mode, top_k=top_k, threshold=threshold),
        )
        options = runtime.get_search_options()
        collection = load_collection(scope)

        async with SearchContext.create(
            file_config, embed_timeout=runtime.resolve_embed_timeout().value
        ) as context:
            return await context.search(query, collection, options)

    try:
        results = asyncio.run(_inner())
    # pydantic ValidationError and JSON errors from the config file are ValueErrors
    except (SearchError, ValueError) as exc:
        err_console.print(Panel(str(exc), title="Search failed", style="bold red"))
        sys.exit(1)

    if as_json:
        console.print_json(json.dumps([r.to_dict() for r in results]))
    else:
        _render_results(query, results)


@app.command("scopes")
def scopes_command() -> None:
    """Show which index files exist for each scope."""
    table = Table(title="Index scopes")
    table.add_column("Scope", style="bold")
    table.add_column("Path")
    table.add_column("Tools", justify="right")
    table.add_column("Embeddings")

    for index_scope in IndexScope:
        path = get_index_path(index_scope)
        try:
            index = load_index(path)
        except SearchError as exc:
            table.add_row(index_scope.value, str(path), "-", f"[red]{exc}[/red]")
            continue
        if index is None:
            table.add_row(index_scope.value, str(path), "-", "[dim]missing[/dim]")
        else:
            table.add_row(
                index_scope.value,
                str(path),
                str(len(index.tools)),
                "yes" if index.has_embeddings else "no",
            )
    console.print(table)


@app.command("fingerprint")
def fingerprint_command() -> None:
    """Print config fingerprints (used to detect stale indexes)."""
    fingerprints = create_all_config_fingerprints()
    payload = {"version": get_package_version(), **fingerprints.model_dump()}
    console.print_json(json.dumps(payload))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
