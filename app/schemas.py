"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from models.records import Category, DccInterface, RollingStockItem
from services.aggregator import CollectionStats, YearlyStatRow
from services.depot import Depot
from services.loader import LoadIssue


class LoadIssueModel(BaseModel):
    """A collection element skipped while loading."""

    element_number: int = Field(..., ge=1)
    reason: str

    @classmethod
    def from_issue(cls, issue: LoadIssue) -> LoadIssueModel:
        return cls(element_number=issue.element_number, reason=issue.reason)


class CollectionItemModel(BaseModel):
    brand: str
    item_number: str
    category: Category
    description: str
    scale: str
    power_method: Optional[str] = None
    count: int
    acquired_on: Optional[date] = None
    price: Decimal
    currency: str
    shop: str

    @classmethod
    def from_item(cls, item: RollingStockItem) -> CollectionItemModel:
        return cls(
            brand=item.brand,
            item_number=item.item_number,
            category=item.category,
            description=item.description,
            scale=item.scale,
            power_method=item.power_method.value if item.power_method else None,
            count=item.count,
            acquired_on=item.acquired_on,
            price=item.value.amount,
            currency=item.value.currency,
            shop=item.shop,
        )


class CollectionResponse(BaseModel):
    """Inventory listing, ordered by brand and item number."""

    description: str
    version: int
    modified_at: Optional[datetime] = None
    items: List[CollectionItemModel] = Field(default_factory=list)
    issues: List[LoadIssueModel] = Field(default_factory=list)


class CategoryTotalsModel(BaseModel):
    count: int
    value: Decimal


class YearlyStatRowModel(BaseModel):
    year: Union[int, str]
    locomotives: CategoryTotalsModel
    trains: CategoryTotalsModel
    passenger_cars: CategoryTotalsModel
    freight_cars: CategoryTotalsModel
    total_count: int
    total_value: Decimal

    @classmethod
    def from_row(cls, row: YearlyStatRow) -> YearlyStatRowModel:
        def cell(category: Category) -> CategoryTotalsModel:
            totals = row.cell(category)
            return CategoryTotalsModel(count=totals.count, value=totals.value)

        return cls(
            year=row.year,
            locomotives=cell(Category.LOCOMOTIVE),
            trains=cell(Category.TRAIN),
            passenger_cars=cell(Category.PASSENGER_CAR),
            freight_cars=cell(Category.FREIGHT_CAR),
            total_count=row.total_count,
            total_value=row.total_value,
        )


class StatsResponse(BaseModel):
    """Yearly statistics with the TOTAL row last."""

    total_value: Decimal
    currency: str
    size: int = Field(..., ge=0, description="Number of collection entries.")
    rows: List[YearlyStatRowModel] = Field(default_factory=list)
    issues: List[LoadIssueModel] = Field(default_factory=list)

    @classmethod
    def from_stats(cls, stats: CollectionStats, issues: List[LoadIssue]) -> StatsResponse:
        return cls(
            total_value=stats.total_value.amount,
            currency=stats.total_value.currency,
            size=stats.size,
            rows=[YearlyStatRowModel.from_row(row) for row in stats.table()],
            issues=[LoadIssueModel.from_issue(issue) for issue in issues],
        )


class DepotCardModel(BaseModel):
    class_name: str
    road_number: str
    series: Optional[str] = None
    livery: Optional[str] = None
    brand: str
    item_number: str
    with_decoder: bool
    dcc_interface: Optional[DccInterface] = None


class DepotResponse(BaseModel):
    count: int = Field(..., ge=0)
    locomotives: List[DepotCardModel] = Field(default_factory=list)

    @classmethod
    def from_depot(cls, depot: Depot) -> DepotResponse:
        return cls(
            count=len(depot),
            locomotives=[
                DepotCardModel(
                    class_name=card.class_name,
                    road_number=card.road_number,
                    series=card.series,
                    livery=card.livery,
                    brand=card.brand,
                    item_number=card.item_number,
                    with_decoder=card.with_decoder,
                    dcc_interface=card.dcc_interface,
                )
                for card in depot
            ],
        )
