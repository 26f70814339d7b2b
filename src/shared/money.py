"""Money arithmetic shared by the cart client and the booking aggregate.

Prices travel as floats on the wire and in storage. Every total is computed
exactly in ``Decimal`` and rounded once, at the cent boundary, half away
from zero. Both sides of the checkout flow use these helpers so that the
total a client shows and the total the server persists always agree.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(amount) -> Decimal:
    """Convert a float/int/str amount to Decimal without binary noise."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def round_cents(amount) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount) -> int:
    """Integer minor units for an amount (rounded to the nearest cent)."""
    return int(round_cents(amount) * 100)


def from_cents(cents: int) -> float:
    return float(Decimal(cents) / 100)


def line_amount(price, quantity: int) -> Decimal:
    """Exact (unrounded) amount of a single line."""
    return to_decimal(price) * quantity


def total_amount(lines: Iterable[tuple]) -> float:
    """Sum ``price × quantity`` over ``(price, quantity)`` pairs.

    The sum is exact; only the final figure is rounded to cents.
    """
    exact = sum((line_amount(price, quantity) for price, quantity in lines), Decimal(0))
    return from_cents(to_cents(exact))


def total_quantity(quantities: Iterable[int]) -> int:
    return sum(quantities, 0)


def format_price(amount) -> str:
    """Display form used by the catalogue, e.g. ``$25.99``."""
    return f"${round_cents(amount)}"
