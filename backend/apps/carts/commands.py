from dataclasses import dataclass
from typing import Any, Dict, Optional

from apps.pricing.exceptions import InvalidPricingInput


def _parse_quantity(raw: Any, default: Optional[int] = None) -> int:
    if raw is None:
        if default is None:
            raise InvalidPricingInput("quantity", raw, "quantity is required")
        return default
    if isinstance(raw, bool):
        raise InvalidPricingInput("quantity", raw, "quantity must be an integer")
    try:
        qty = int(raw)
    except (ValueError, TypeError):
        raise InvalidPricingInput("quantity", raw, "quantity must be an integer")
    if isinstance(raw, float) and raw != qty:
        raise InvalidPricingInput("quantity", raw, "quantity must be an integer")
    if qty < 1:
        raise InvalidPricingInput("quantity", raw, "quantity must be at least 1")
    return qty


@dataclass
class CartItemCommand:
    product_id: str
    quantity: int

    @staticmethod
    def from_raw(raw: Dict[str, Any]):
        if not isinstance(raw, dict):
            raise InvalidPricingInput("item", raw, "Item must be an object")
        pid = raw.get("productId") or raw.get("product_id")
        if pid is None:
            # nested product object fallback
            product = raw.get("product")
            if isinstance(product, dict):
                pid = product.get("id")
        if pid is None or not str(pid).strip():
            raise InvalidPricingInput("productId", pid, "productId is required")
        return CartItemCommand(
            product_id=str(pid).strip(),
            quantity=_parse_quantity(raw.get("quantity"), default=1),
        )


@dataclass
class QuantityUpdateCommand:
    product_id: str
    quantity: int

    @staticmethod
    def from_raw(product_id: str, raw: Dict[str, Any]):
        if not isinstance(raw, dict):
            raise InvalidPricingInput("quantity", raw, "Payload must be an object")
        return QuantityUpdateCommand(
            product_id=str(product_id),
            quantity=_parse_quantity(raw.get("quantity")),
        )
