from __future__ import annotations

from typing import Iterable, List, Sequence

import typer

from models.records import Category, RollingStockItem
from services.aggregator import CollectionStats
from services.depot import Depot
from services.loader import LoadIssue

_STATS_CATEGORIES = (
    Category.LOCOMOTIVE,
    Category.TRAIN,
    Category.PASSENGER_CAR,
    Category.FREIGHT_CAR,
)


def truncate(text: str, width: int = 50) -> str:
    if len(text) < width:
        return text
    return text[: width - 3] + "..."


def echo_table(
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    right_aligned: Sequence[int] = (),
) -> None:
    """Print a plain bordered table with column widths fitted to content."""
    materialized: List[Sequence[str]] = [list(row) for row in rows]
    widths = [len(header) for header in headers]
    for row in materialized:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    separator = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def line(cells: Sequence[str], header: bool = False) -> str:
        parts = []
        for index, cell in enumerate(cells):
            if index in right_aligned and not header:
                parts.append(cell.rjust(widths[index]))
            else:
                parts.append(cell.ljust(widths[index]))
        return "| " + " | ".join(parts) + " |"

    typer.echo(separator)
    typer.echo(line(headers, header=True))
    typer.echo(separator)
    for row in materialized:
        typer.echo(line(row))
    typer.echo(separator)


def render_issues(issues: Sequence[LoadIssue]) -> None:
    for issue in issues:
        typer.secho(
            f"Skipped element #{issue.element_number}: {issue.reason}",
            fg=typer.colors.YELLOW,
            err=True,
        )


def render_collection(items: Sequence[RollingStockItem], description_width: int = 50) -> None:
    headers = ["#", "Brand", "Item number", "Scale", "PM", "Cat.", "Description", "Count", "Added", "Price", "Shop"]
    rows = [
        [
            str(index),
            item.brand,
            item.item_number,
            item.scale,
            item.power_method.value if item.power_method else "",
            item.category.symbol,
            truncate(item.description, description_width),
            str(item.count),
            item.acquired_on.isoformat() if item.acquired_on else "",
            str(item.value),
            item.shop,
        ]
        for index, item in enumerate(items, start=1)
    ]
    echo_table(headers, rows, right_aligned=(7, 9))


def render_stats(stats: CollectionStats) -> None:
    currency = stats.total_value.currency
    typer.echo(f"Total value........... {stats.total_value.amount:.2f} {currency}")
    typer.echo(f"Rolling stocks/sets... {stats.size}")

    headers = ["Year"]
    for category in _STATS_CATEGORIES:
        headers.append(f"{category.label} (no.)")
        headers.append(f"{category.label} ({currency})")
    headers.extend(["Total (no.)", f"Total ({currency})"])

    rows = []
    for row in stats.table():
        cells = [str(row.year)]
        for category in _STATS_CATEGORIES:
            totals = row.cell(category)
            cells.extend([str(totals.count), str(totals.value)])
        cells.extend([str(row.total_count), str(row.total_value)])
        rows.append(cells)

    echo_table(headers, rows, right_aligned=tuple(range(1, len(headers))))


def render_depot(depot: Depot) -> None:
    typer.echo(f"{len(depot)} locomotive(s)")
    headers = ["#", "Class name", "Road number", "Series", "Livery", "Brand", "Item Number", "With decoder", "DCC"]
    rows = [
        [
            str(index),
            card.class_name,
            card.road_number,
            card.series or "",
            card.livery or "",
            card.brand,
            card.item_number,
            "Y" if card.with_decoder else "N",
            card.dcc_interface.value if card.dcc_interface else "",
        ]
        for index, card in enumerate(depot, start=1)
    ]
    echo_table(headers, rows)
