"""Money helpers shared by the pricing engine and the catalog.

All arithmetic is done on :class:`~decimal.Decimal` at full precision. Rounding
to cents happens only when a value is presented (:func:`round_money`), so a cart
with many discounted lines does not accumulate rounding error.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from .exceptions import InvalidPricingInput

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def to_decimal(value: Number, field: str = "amount") -> Decimal:
    """Convert caller input to ``Decimal``.

    Floats go through ``str`` so ``79.99`` becomes ``Decimal("79.99")`` rather
    than its binary approximation. Booleans, NaN and infinities are rejected.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise InvalidPricingInput(field, value, f"{field} must be a number")
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidPricingInput(field, value, f"{field} must be a number")
    else:
        raise InvalidPricingInput(field, value, f"{field} must be a number")
    if not result.is_finite():
        raise InvalidPricingInput(field, value, f"{field} must be finite")
    return result


def non_negative(value: Number, field: str) -> Decimal:
    amount = to_decimal(value, field)
    if amount < ZERO:
        raise InvalidPricingInput(field, value, f"{field} must not be negative")
    return amount


def discount_percent(value: Optional[Number], field: str = "discount_percent") -> Decimal:
    """Validate a percentage discount; ``None`` means no discount."""
    if value is None:
        return ZERO
    pct = to_decimal(value, field)
    if pct < ZERO or pct > HUNDRED:
        raise InvalidPricingInput(field, value, f"{field} must be between 0 and 100")
    return pct


def effective_price(unit_price: Number, discount: Optional[Number] = None) -> Decimal:
    """Unit price after applying a percentage discount.

    ``effective_price(p, 0)`` and ``effective_price(p)`` return ``p`` unchanged.
    """
    price = non_negative(unit_price, "unit_price")
    pct = discount_percent(discount)
    if pct == ZERO:
        return price
    return price * (1 - pct / HUNDRED)


def round_money(amount: Number) -> Decimal:
    """Round to cents for display."""
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Number) -> str:
    return format(round_money(amount), "f")
