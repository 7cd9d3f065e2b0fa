from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.config import CLIConfig, load_config
from cli.export import write_collection_csv
from cli.render import render_collection, render_depot, render_issues, render_stats
from logging_config import configure_logging
from services.aggregator import Aggregator
from services.depot import extract_depot
from services.loader import CollectionLoader, LoadResult
from storage.collection_file import CollectionFile, CollectionLoadError


@dataclass
class CLIState:
    config: CLIConfig
    loader: CollectionLoader


app = typer.Typer(
    help="Model railway collection manager.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def _load(state: CLIState) -> LoadResult:
    source = CollectionFile(state.config.collection_file)
    try:
        result = state.loader.load_file(source)
    except (FileNotFoundError, CollectionLoadError) as exc:
        typer.secho(f"Unable to load collection: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    render_issues(result.issues)
    return result


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        dir_okay=False,
        help="Collection YAML file (defaults to RAILISTS_COLLECTION_FILE env or ./collection.yaml).",
    ),
    currency: Optional[str] = typer.Option(
        None,
        "--currency",
        help="Currency assumed for prices without an explicit code.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log loading and aggregation details to stderr.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(collection_file=file, currency=currency)
    configure_logging(logging.DEBUG if verbose else logging.WARNING, force=True)
    ctx.obj = CLIState(config=config, loader=CollectionLoader(default_currency=config.currency))


@app.command("list")
def list_command(ctx: typer.Context) -> None:
    """List the collection elements."""
    state = _get_state(ctx)
    result = _load(state)
    render_collection(
        result.collection.sorted_items(),
        description_width=state.config.description_width,
    )


@app.command("csv")
def csv_command(
    ctx: typer.Context,
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        dir_okay=False,
        help="The output CSV file.",
    ),
) -> None:
    """Export the collection as a CSV file."""
    state = _get_state(ctx)
    result = _load(state)
    written = write_collection_csv(result.collection, output)
    typer.secho(f"Exported {written} element(s) to {output}", fg=typer.colors.GREEN)


@app.command("stats")
def stats_command(ctx: typer.Context) -> None:
    """Calculate the collection statistics."""
    state = _get_state(ctx)
    result = _load(state)
    stats = Aggregator(default_currency=state.config.currency).aggregate(result.collection)
    render_stats(stats)


@app.command("depot")
def depot_command(ctx: typer.Context) -> None:
    """Extract the depot information for locomotives."""
    state = _get_state(ctx)
    result = _load(state)
    render_depot(extract_depot(result.collection))
