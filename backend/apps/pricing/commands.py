from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .dtos import LineItem
from .exceptions import InvalidPricingInput


def _first_present(raw: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def line_item_from_raw(raw: Dict[str, Any], position: int = 0) -> LineItem:
    """Build a line item from a camelCase or snake_case payload entry."""
    if not isinstance(raw, dict):
        raise InvalidPricingInput(
            f"items[{position}]", raw, "Each item must be an object"
        )
    item_id = _first_present(raw, "id", "productId", "product_id")
    unit_price = _first_present(raw, "unitPrice", "unit_price", "price")
    quantity = _first_present(raw, "quantity")
    discount = _first_present(raw, "discountPercent", "discount_percent", "discount")
    if unit_price is None:
        raise InvalidPricingInput("unit_price", None, "unit_price is required")
    if quantity is None:
        quantity = 1
    elif isinstance(quantity, str) and quantity.strip().lstrip("-").isdigit():
        quantity = int(quantity)
    return LineItem(
        id=item_id,
        unit_price=unit_price,
        quantity=quantity,
        discount_percent=discount,
        name=str(raw.get("name") or ""),
        image=str(raw.get("image") or ""),
    )


@dataclass
class QuoteCommand:
    items: List[LineItem] = field(default_factory=list)
    shipping_option_id: Optional[str] = None

    @staticmethod
    def from_raw(payload: Dict[str, Any]):
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a dict")
        raw_items = payload.get("items") or []
        items = [line_item_from_raw(r, i) for i, r in enumerate(raw_items)]
        option_id = _first_present(
            payload, "shippingOption", "shipping_option", "shippingOptionId"
        )
        return QuoteCommand(
            items=items,
            shipping_option_id=str(option_id) if option_id is not None else None,
        )
