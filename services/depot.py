"""Locomotive-only view of a collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from models.records import DccInterface, RollingStockItem


@dataclass(frozen=True, slots=True)
class DepotCard:
    """The basic decoder-relevant facts about one model locomotive."""

    class_name: str
    road_number: str
    series: Optional[str]
    livery: Optional[str]
    brand: str
    item_number: str
    with_decoder: bool
    dcc_interface: Optional[DccInterface]


@dataclass(frozen=True, slots=True)
class Depot:
    cards: tuple[DepotCard, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[DepotCard]:
        return iter(self.cards)


def extract_depot(items: Iterable[RollingStockItem]) -> Depot:
    """Keep the locomotives, in their original relative order."""
    cards = []
    for item in items:
        if not item.is_locomotive or item.locomotive is None:
            continue
        details = item.locomotive
        cards.append(
            DepotCard(
                class_name=details.class_name,
                road_number=details.road_number,
                series=details.series,
                livery=details.livery,
                brand=details.brand,
                item_number=details.item_number,
                with_decoder=details.with_decoder,
                dcc_interface=details.dcc_interface,
            )
        )
    return Depot(cards=tuple(cards))
