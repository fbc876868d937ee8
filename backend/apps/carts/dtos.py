from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from apps.pricing.dtos import LineItem, PriceBreakdown, ShippingOption


@dataclass
class Cart:
    id: str
    created_at: datetime
    items: List[LineItem] = field(default_factory=list)

    def find(self, product_id: str) -> Optional[LineItem]:
        for item in self.items:
            if item.id == product_id:
                return item
        return None


@dataclass
class CartDTO:
    id: str
    created_at: str
    items: List[LineItem]
    item_count: int
    shipping_option: ShippingOption
    breakdown: PriceBreakdown


@dataclass
class OrderConfirmationDTO:
    order_id: str
    cart_id: str
    placed_at: str
    items: List[LineItem]
    item_count: int
    shipping_option: ShippingOption
    breakdown: PriceBreakdown


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
