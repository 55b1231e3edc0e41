"""
Monetary arithmetic for invoices.

All functions are pure and never round; rounding to cents happens only when
values are formatted for display (see billing_ui.utils.format_currency).
Negative inputs are accepted as-is, validation belongs to the form.
"""

from typing import Iterable, Protocol


class PricedLine(Protocol):
    """Anything with a piece count and a unit price."""

    pieces: int
    price_per_unit: float


def line_total(pieces: float, unit_price: float) -> float:
    """Return the extended price of a single line."""
    return pieces * unit_price


def subtotal(items: Iterable[PricedLine]) -> float:
    """Sum the line totals of all items; an empty sequence yields 0."""
    return sum((line_total(item.pieces, item.price_per_unit) for item in items), 0)


def total_amount(
    items: Iterable[PricedLine], shipping: float = 0, other: float = 0
) -> float:
    """Return subtotal plus shipping and other charges."""
    return subtotal(items) + shipping + other
