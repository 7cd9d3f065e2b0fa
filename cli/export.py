"""CSV export of the collection listing."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from models.records import RollingStockItem

CSV_COLUMNS = [
    "Brand",
    "ItemNumber",
    "Category",
    "Description",
    "Shop",
    "Date",
    "Count",
    "Price",
]


def write_collection_csv(items: Iterable[RollingStockItem], path: Path) -> int:
    """Write one row per collection entry and return the number of rows."""
    path.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=CSV_COLUMNS)
        writer.writeheader()

        for item in items:
            writer.writerow({
                "Brand": item.brand,
                "ItemNumber": item.item_number,
                "Category": item.category.value,
                "Description": item.description,
                "Shop": item.shop,
                "Date": item.acquired_on.isoformat() if item.acquired_on else "",
                "Count": str(item.count),
                "Price": str(item.value),
            })
            written += 1

    return written
