from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from models.money import Money, quantize_amount
from models.records import (
    Category,
    Collection,
    Control,
    LocomotiveDetails,
    RollingStockItem,
)

_ZERO_EUR = Money(Decimal("0.00"), "EUR")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("50", Money(Decimal("50.00"), "EUR")),
        ("49,90", Money(Decimal("49.90"), "EUR")),
        ("129.00 EUR", Money(Decimal("129.00"), "EUR")),
        ("CHF 75.5", Money(Decimal("75.50"), "CHF")),
        ("12.345", Money(Decimal("12.35"), "EUR")),
    ],
)
def test_money_parse(text: str, expected: Money) -> None:
    assert Money.parse(text, "EUR") == expected


@pytest.mark.parametrize("text", ["", "abc", "12 EURO", "1 2 3", "NaN", "Infinity", "1e30"])
def test_money_parse_rejects_invalid_text(text: str) -> None:
    with pytest.raises(ValueError):
        Money.parse(text, "EUR")


def test_money_holds_whole_cents() -> None:
    assert Money(Decimal("1.5"), "EUR").amount == Decimal("1.5")
    assert Money(Decimal("2.000"), "EUR").amount == Decimal("2.000")
    assert str(Money(Decimal("7"), "EUR")) == "7.00 EUR"

    with pytest.raises(ValueError):
        Money(Decimal("0.005"), "EUR")
    with pytest.raises(ValueError):
        Money(Decimal("NaN"), "EUR")


def test_quantize_amount_rounds_half_up() -> None:
    assert quantize_amount(Decimal("0.005")) == Decimal("0.01")
    assert quantize_amount(Decimal("2.344")) == Decimal("2.34")


def test_non_locomotive_accessors_return_none() -> None:
    car = RollingStockItem(category=Category.FREIGHT_CAR, value=_ZERO_EUR)

    assert car.is_locomotive is False
    assert car.class_name is None
    assert car.road_number is None
    assert car.series is None
    assert car.livery is None
    assert car.with_decoder is None
    assert car.dcc_interface is None
    assert car.count == 1


def test_locomotive_accessors_expose_details() -> None:
    loco = RollingStockItem(
        category=Category.LOCOMOTIVE,
        value=_ZERO_EUR,
        locomotive=LocomotiveDetails(
            class_name="E 444",
            road_number="E 444 005",
            brand="ACME",
            item_number="60410",
            with_decoder=True,
        ),
    )

    assert loco.is_locomotive is True
    assert loco.class_name == "E 444"
    assert loco.road_number == "E 444 005"
    assert loco.with_decoder is True
    assert loco.series is None


def test_variant_payload_must_match_category() -> None:
    details = LocomotiveDetails(class_name="E 444", road_number="1", brand="ACME", item_number="1")

    with pytest.raises(ValueError):
        RollingStockItem(category=Category.LOCOMOTIVE, value=_ZERO_EUR)
    with pytest.raises(ValueError):
        RollingStockItem(category=Category.TRAIN, value=_ZERO_EUR, locomotive=details)


def test_control_decoder_flag() -> None:
    assert Control.DCC_READY.with_decoder is False
    assert Control.DCC.with_decoder is True
    assert Control.DCC_SOUND.with_decoder is True


def test_collection_sorted_items_orders_by_brand_and_item_number() -> None:
    def item(brand: str, number: str) -> RollingStockItem:
        return RollingStockItem(
            category=Category.PASSENGER_CAR,
            value=_ZERO_EUR,
            brand=brand,
            item_number=number,
            acquired_on=date(2020, 1, 1),
        )

    collection = Collection(
        description="test",
        version=1,
        items=[item("Roco", "45000"), item("ACME", "50100"), item("ACME", "50010")],
    )

    assert len(collection) == 3
    assert [(it.brand, it.item_number) for it in collection.sorted_items()] == [
        ("ACME", "50010"),
        ("ACME", "50100"),
        ("Roco", "45000"),
    ]
    assert [it.brand for it in collection] == ["Roco", "ACME", "ACME"]
