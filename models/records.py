"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Iterator, Optional

from models.money import Money


class Category(str, Enum):
    """The closed set of rolling stock categories."""

    LOCOMOTIVE = "LOCOMOTIVE"
    TRAIN = "TRAIN"
    PASSENGER_CAR = "PASSENGER_CAR"
    FREIGHT_CAR = "FREIGHT_CAR"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def symbol(self) -> str:
        return _CATEGORY_SYMBOLS[self]


_CATEGORY_LABELS = {
    Category.LOCOMOTIVE: "Locomotives",
    Category.TRAIN: "Trains",
    Category.PASSENGER_CAR: "Passenger Cars",
    Category.FREIGHT_CAR: "Freight Cars",
}

_CATEGORY_SYMBOLS = {
    Category.LOCOMOTIVE: "L",
    Category.TRAIN: "T",
    Category.PASSENGER_CAR: "P",
    Category.FREIGHT_CAR: "F",
}


class PowerMethod(str, Enum):
    DC = "DC"
    AC = "AC"


class Control(str, Enum):
    """How a model is (or can be) driven digitally."""

    DCC_READY = "DCC_READY"
    DCC = "DCC"
    DCC_SOUND = "DCC_SOUND"

    @property
    def with_decoder(self) -> bool:
        return self is not Control.DCC_READY


class DccInterface(str, Enum):
    """NMRA and NEM connectors for digital control."""

    NEM_651 = "NEM_651"
    NEM_652 = "NEM_652"
    PLUX_8 = "PLUX_8"
    PLUX_16 = "PLUX_16"
    PLUX_22 = "PLUX_22"
    NEXT_18 = "NEXT_18"
    MTC_21 = "MTC_21"


@dataclass(frozen=True, slots=True)
class LocomotiveDetails:
    """Locomotive-only payload of a collection item."""

    class_name: str
    road_number: str
    brand: str
    item_number: str
    series: Optional[str] = None
    livery: Optional[str] = None
    with_decoder: bool = False
    dcc_interface: Optional[DccInterface] = None


@dataclass(frozen=True, slots=True)
class RollingStockItem:
    """One collection entry, possibly standing for several identical units.

    ``locomotive`` is the variant payload: it is set exactly when the
    category is ``Category.LOCOMOTIVE``.
    """

    category: Category
    value: Money
    acquisition_year: Optional[int] = None
    count: int = 1
    brand: str = ""
    item_number: str = ""
    description: str = ""
    scale: str = ""
    power_method: Optional[PowerMethod] = None
    shop: str = ""
    acquired_on: Optional[date] = None
    locomotive: Optional[LocomotiveDetails] = None

    def __post_init__(self) -> None:
        if self.category is Category.LOCOMOTIVE and self.locomotive is None:
            raise ValueError("Locomotive items require locomotive details.")
        if self.category is not Category.LOCOMOTIVE and self.locomotive is not None:
            raise ValueError(
                f"Locomotive details are not allowed on {self.category.value} items."
            )

    @property
    def is_locomotive(self) -> bool:
        return self.category is Category.LOCOMOTIVE

    @property
    def class_name(self) -> Optional[str]:
        return self.locomotive.class_name if self.locomotive else None

    @property
    def road_number(self) -> Optional[str]:
        return self.locomotive.road_number if self.locomotive else None

    @property
    def series(self) -> Optional[str]:
        return self.locomotive.series if self.locomotive else None

    @property
    def livery(self) -> Optional[str]:
        return self.locomotive.livery if self.locomotive else None

    @property
    def with_decoder(self) -> Optional[bool]:
        return self.locomotive.with_decoder if self.locomotive else None

    @property
    def dcc_interface(self) -> Optional[DccInterface]:
        return self.locomotive.dcc_interface if self.locomotive else None


@dataclass(slots=True)
class Collection:
    """A described collection of rolling stock items, as loaded from disk."""

    description: str
    version: int
    modified_at: Optional[datetime] = None
    items: list[RollingStockItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[RollingStockItem]:
        return iter(self.items)

    def sorted_items(self) -> list[RollingStockItem]:
        """Items ordered by brand, then catalog item number."""
        return sorted(self.items, key=lambda item: (item.brand, item.item_number))
