#!/usr/bin/env python3
"""
Maplify - Command Line Entry Point

Runs a cross-source title search from a JSON sources file.

Usage:
    maplify search "spy x family" --sources sources.json
    maplify search naruto --sources sources.json --json
    maplify sources sources.json
"""

import json
import sys
from pathlib import Path

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from maplify.coordinator import Maplify
from maplify.errors import MaplifyError
from maplify.normalizers import title_variants
from maplify.sources import load_source_configs
from maplify.utils.logging import setup_logging

console = Console()
err_console = Console(stderr=True)


def _display_title(entry: dict) -> str:
    variants = title_variants(entry.get("title"))
    return variants[0] if variants else "-"


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug):
    """Maplify - cross-source title mapping"""
    setup_logging(level="DEBUG" if debug else None)


@cli.command()
@click.argument("query")
@click.option(
    "--sources",
    "sources_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON file with a list of source configurations",
)
@click.option("--min-score", type=click.FloatRange(0.0, 1.0), default=None, help="Ignore matches below this score")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
def search(query: str, sources_path: Path, min_score: float | None, as_json: bool):
    """
    Search all sources for QUERY and print the mapped titles.

    The first source in the file is the base source.
    """
    try:
        configs = load_source_configs(sources_path)
        result = Maplify(*configs, min_score=min_score).search_sync(query)
    except MaplifyError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        logger.debug(f"Search failed: {e!r}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2, default=str))
        return

    source_ids = [config.identifier(index) for index, config in enumerate(configs)]

    console.print(f"\n[bold blue]Maplify - {query}[/bold blue]")
    counts = ", ".join(f"{sid}: {len(entries)}" for sid, entries in zip(source_ids, result.extracted_data))
    console.print(f"Entries: {counts}\n")

    table = Table()
    table.add_column(source_ids[0])
    for source_id in source_ids[1:]:
        table.add_column(source_id)
    table.add_column("Score", justify="right")

    for group in result.mapped_titles:
        row = [_display_title(group.base)]
        for source_id in source_ids[1:]:
            entry = group.matches.get(source_id)
            row.append(_display_title(entry) if entry else "[dim]-[/dim]")
        row.append(f"{group.score:.2f}")
        table.add_row(*row)

    console.print(table)


@cli.command()
@click.argument("sources_path", type=click.Path(dir_okay=False, path_type=Path))
def sources(sources_path: Path):
    """Validate a sources file and list its sources."""
    try:
        configs = load_source_configs(sources_path)
    except MaplifyError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    table = Table()
    table.add_column("Source")
    table.add_column("Kind")
    table.add_column("URL")

    for index, config in enumerate(configs):
        table.add_row(config.identifier(index), config.kind.value, config.url)

    console.print(table)

    if len(configs) < 2:
        console.print("[yellow]At least two sources are required to map[/yellow]")


if __name__ == "__main__":
    cli()
