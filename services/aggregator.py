"""Yearly statistics for a rolling stock collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Final, Iterable, Literal, Mapping, Union

from models.money import Money
from models.records import Category, RollingStockItem

logger = logging.getLogger(__name__)

TOTAL: Final = "TOTAL"

Year = Union[int, Literal["TOTAL"]]

_ZERO = Decimal("0.00")


@dataclass(frozen=True, slots=True)
class CategoryTotals:
    """Count and value accumulated for one category."""

    count: int = 0
    value: Decimal = _ZERO


@dataclass(frozen=True, slots=True)
class YearlyStatRow:
    """One line of the statistics table, either a year or the TOTAL row."""

    year: Year
    cells: Mapping[Category, CategoryTotals]
    total_count: int
    total_value: Decimal

    def cell(self, category: Category) -> CategoryTotals:
        return self.cells[category]


@dataclass(frozen=True, slots=True)
class CollectionStats:
    """Aggregator output: yearly rows, the TOTAL row and two summary figures.

    ``size`` counts collection entries, not the units they stand for.
    """

    rows: tuple[YearlyStatRow, ...]
    total: YearlyStatRow
    total_value: Money
    size: int

    def table(self) -> list[YearlyStatRow]:
        return [*self.rows, self.total]


class _Accumulator:
    """Exact running totals for one grouping key."""

    def __init__(self) -> None:
        self.counts: Dict[Category, int] = {category: 0 for category in Category}
        self.values: Dict[Category, Decimal] = {category: _ZERO for category in Category}

    def add(self, item: RollingStockItem) -> None:
        self.counts[item.category] += item.count
        self.values[item.category] += item.value.amount

    def finalize(self, year: Year) -> YearlyStatRow:
        cells = {
            category: CategoryTotals(
                count=self.counts[category],
                value=self.values[category],
            )
            for category in Category
        }
        return YearlyStatRow(
            year=year,
            cells=cells,
            total_count=sum(cell.count for cell in cells.values()),
            total_value=sum((cell.value for cell in cells.values()), _ZERO),
        )


class Aggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def __init__(self, default_currency: str = "EUR") -> None:
        self.default_currency = default_currency

    def aggregate(self, items: Iterable[RollingStockItem]) -> CollectionStats:
        materialized = list(items)
        by_year: Dict[int, _Accumulator] = {}

        for item in materialized:
            if item.acquisition_year is None:
                continue
            by_year.setdefault(item.acquisition_year, _Accumulator()).add(item)

        rows = tuple(by_year[year].finalize(year) for year in sorted(by_year))
        total = self._total_row(rows, materialized)

        currency = materialized[0].value.currency if materialized else self.default_currency
        total_value = Money(
            amount=sum((item.value.amount for item in materialized), _ZERO),
            currency=currency,
        )

        undated = sum(1 for item in materialized if item.acquisition_year is None)
        if undated:
            logger.debug(
                "Items without acquisition year left out of yearly rows",
                extra={"item_count": undated},
            )
        logger.debug(
            "Aggregated collection statistics",
            extra={"item_count": len(materialized), "year_count": len(rows), "currency": currency},
        )

        return CollectionStats(
            rows=rows,
            total=total,
            total_value=total_value,
            size=len(materialized),
        )

    @staticmethod
    def _total_row(
        rows: tuple[YearlyStatRow, ...], items: list[RollingStockItem]
    ) -> YearlyStatRow:
        # Per-category cells reconcile with the yearly rows; the grand figures
        # cover every item, including those without an acquisition year.
        cells = {
            category: CategoryTotals(
                count=sum(row.cells[category].count for row in rows),
                value=sum((row.cells[category].value for row in rows), _ZERO),
            )
            for category in Category
        }
        return YearlyStatRow(
            year=TOTAL,
            cells=cells,
            total_count=sum(item.count for item in items),
            total_value=sum((item.value.amount for item in items), _ZERO),
        )
