from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .dtos import LineItem, PriceBreakdown, ShippingOption
from .money import ZERO, Number, effective_price, non_negative
from .shipping import DEFAULT_FREE_THRESHOLD, resolve_shipping

DEFAULT_TAX_RATE = Decimal("0.08")


def line_total(item: LineItem) -> Decimal:
    return effective_price(item.unit_price, item.discount_percent) * item.quantity


def item_count(items: Iterable[LineItem]) -> int:
    return sum(item.quantity for item in items)


def compute_totals(
    items: Iterable[LineItem],
    shipping_option: ShippingOption,
    tax_rate: Number = DEFAULT_TAX_RATE,
    free_threshold: Number = DEFAULT_FREE_THRESHOLD,
) -> PriceBreakdown:
    """Price a cart from scratch.

    Tax is charged on the merchandise subtotal only; shipping is not taxed.
    Nothing is rounded here, see :meth:`PriceBreakdown.rounded`.
    """
    rate = non_negative(tax_rate, "tax_rate")
    subtotal = ZERO
    for item in items:
        subtotal += line_total(item)
    shipping = resolve_shipping(subtotal, shipping_option, free_threshold)
    return PriceBreakdown(subtotal=subtotal, shipping=shipping, tax=subtotal * rate)
