"""Monetary amounts carried by collection items."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTS = Decimal("0.01")


def quantize_amount(amount: Decimal) -> Decimal:
    """Round an amount to two fraction digits (half up)."""
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _is_whole_cents(amount: Decimal) -> bool:
    if not amount.is_finite():
        return False
    _, digits, exponent = amount.as_tuple()
    while exponent < -2 and digits and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    return exponent >= -2


@dataclass(frozen=True, slots=True)
class Money:
    """An exact decimal amount tagged with a three-letter currency code.

    Amounts hold whole cents, so sums of them never need rounding.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if not _is_whole_cents(self.amount):
            raise ValueError(f"Amount {self.amount} is not a whole number of cents")

    @classmethod
    def parse(cls, text: str, default_currency: str) -> Money:
        """Parse ``"50.00"``, ``"50,00 EUR"`` or ``"EUR 50.00"``.

        The amount is rounded to cents here, once.
        """
        tokens = text.split()
        if not tokens or len(tokens) > 2:
            raise ValueError(f"Invalid price {text!r}")

        currency = default_currency
        if len(tokens) == 2:
            if tokens[0].isalpha():
                currency, raw_amount = tokens
            else:
                raw_amount, currency = tokens
            if len(currency) != 3 or not currency.isalpha():
                raise ValueError(f"Invalid currency code in price {text!r}")
        else:
            raw_amount = tokens[0]

        try:
            amount = quantize_amount(Decimal(raw_amount.replace(",", ".")))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount in price {text!r}") from exc

        return cls(amount=amount, currency=currency.upper())

    def __str__(self) -> str:
        return f"{quantize_amount(self.amount)} {self.currency}"
