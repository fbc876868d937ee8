from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from .exceptions import InvalidPricingInput
from .money import ZERO, discount_percent, non_negative, round_money


@dataclass(frozen=True)
class LineItem:
    id: str
    unit_price: Decimal
    quantity: int
    discount_percent: Decimal = ZERO
    name: str = ""
    image: str = ""

    def __post_init__(self):
        if not str(self.id or "").strip():
            raise InvalidPricingInput("id", self.id, "id must not be empty")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidPricingInput(
                "quantity", self.quantity, "quantity must be an integer"
            )
        if self.quantity < 1:
            raise InvalidPricingInput(
                "quantity", self.quantity, "quantity must be at least 1"
            )
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "unit_price", non_negative(self.unit_price, "unit_price"))
        object.__setattr__(
            self, "discount_percent", discount_percent(self.discount_percent)
        )


@dataclass(frozen=True)
class ShippingOption:
    id: str
    flat_price: Decimal
    estimated_days: str
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "flat_price", non_negative(self.flat_price, "flat_price"))


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Decimal = ZERO
    shipping: Decimal = ZERO
    tax: Decimal = ZERO
    total: Decimal = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total", self.subtotal + self.shipping + self.tax)

    def rounded(self) -> Dict[str, Decimal]:
        return {
            "subtotal": round_money(self.subtotal),
            "shipping": round_money(self.shipping),
            "tax": round_money(self.tax),
            "total": round_money(self.total),
        }


@dataclass(frozen=True)
class ShippingQuote:
    option: ShippingOption
    price: Decimal
    free: bool
    country: Optional[str] = None


@dataclass(frozen=True)
class Quote:
    option: ShippingOption
    breakdown: PriceBreakdown
    item_count: int = 0


"""DTO dataclasses only. Arithmetic lives in money.py, shipping.py and totals.py."""
