"""Turns the YAML collection document into domain records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import yaml
from pydantic import ValidationError

from models.documents import (
    CollectionDocument,
    CollectionElementDocument,
    RollingStockDocument,
)
from models.money import Money
from models.records import Category, Collection, LocomotiveDetails, RollingStockItem
from storage.collection_file import CollectionFile, CollectionLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadIssue:
    """An element that was skipped because it could not be classified."""

    element_number: int
    reason: str


@dataclass(slots=True)
class LoadResult:
    collection: Collection
    issues: List[LoadIssue] = field(default_factory=list)


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def _element_category(rolling_stocks: List[RollingStockDocument]) -> Category:
    categories = {rs.category for rs in rolling_stocks}
    if len(categories) == 1:
        return categories.pop()
    return Category.TRAIN


def _locomotive_details(
    element: CollectionElementDocument,
) -> Optional[LocomotiveDetails]:
    for rs in element.rolling_stocks:
        if rs.category is not Category.LOCOMOTIVE:
            continue
        return LocomotiveDetails(
            class_name=rs.type_name,
            road_number=rs.road_number or "",
            brand=element.brand,
            item_number=element.item_number,
            series=rs.series,
            livery=rs.livery,
            with_decoder=rs.control.with_decoder if rs.control else False,
            dcc_interface=rs.dcc_interface,
        )
    return None


class CollectionLoader:
    """Parses collection documents, skipping elements that fail validation."""

    def __init__(self, default_currency: str = "EUR") -> None:
        self.default_currency = default_currency

    def load_file(self, source: CollectionFile) -> LoadResult:
        logger.info("Loading collection", extra={"path": str(source.path)})
        return self.load_text(source.read_text())

    def load_text(self, text: str) -> LoadResult:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CollectionLoadError(f"Invalid YAML document: {exc}") from exc

        if not isinstance(raw, dict):
            raise CollectionLoadError("Collection document must be a mapping.")

        try:
            document = CollectionDocument.model_validate(raw)
        except ValidationError as exc:
            raise CollectionLoadError(
                f"Invalid collection document: {_describe_validation_error(exc)}"
            ) from exc

        items: List[RollingStockItem] = []
        issues: List[LoadIssue] = []
        currency: Optional[str] = None

        for element_number, raw_element in enumerate(document.elements, start=1):
            try:
                item = self._to_item(raw_element)
            except ValidationError as exc:
                issues.append(LoadIssue(element_number, _describe_validation_error(exc)))
                continue
            except ValueError as exc:
                issues.append(LoadIssue(element_number, str(exc)))
                continue

            if currency is None:
                currency = item.value.currency
            elif item.value.currency != currency:
                issues.append(
                    LoadIssue(
                        element_number,
                        f"currency {item.value.currency} differs from collection currency {currency}",
                    )
                )
                continue

            items.append(item)

        for issue in issues:
            logger.warning(
                "Skipping collection element",
                extra={"element_number": issue.element_number, "reason": issue.reason},
            )

        collection = Collection(
            description=document.description,
            version=document.version,
            modified_at=document.modified_at,
            items=items,
        )
        logger.info(
            "Collection loaded",
            extra={"item_count": len(items), "issue_count": len(issues), "currency": currency},
        )
        return LoadResult(collection=collection, issues=issues)

    def _to_item(self, raw_element: Any) -> RollingStockItem:
        element = CollectionElementDocument.model_validate(raw_element)
        purchase = element.purchase_info
        value = Money.parse(purchase.price, self.default_currency)
        if value.amount < 0:
            raise ValueError("price must not be negative")
        category = _element_category(element.rolling_stocks)

        return RollingStockItem(
            category=category,
            value=value,
            acquisition_year=purchase.purchased_on.year if purchase.purchased_on else None,
            count=element.count,
            brand=element.brand,
            item_number=element.item_number,
            description=element.description,
            scale=element.scale,
            power_method=element.power_method,
            shop=purchase.shop,
            acquired_on=purchase.purchased_on,
            locomotive=_locomotive_details(element) if category is Category.LOCOMOTIVE else None,
        )


def load_collection(source: CollectionFile, default_currency: str = "EUR") -> LoadResult:
    return CollectionLoader(default_currency=default_currency).load_file(source)
