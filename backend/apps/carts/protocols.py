from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, TYPE_CHECKING

from .dtos import Cart

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO, OrderConfirmationDTO
    from apps.catalog.dtos import CatalogProduct
    from apps.pricing.dtos import LineItem, Quote, ShippingOption


class CartRepositoryProtocol(Protocol):
    def get(self, item_id) -> Optional[Cart]:
        ...

    def save(self, item: Cart) -> Cart:
        ...

    def delete(self, item_id) -> bool:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, item_id) -> Optional["CatalogProduct"]:
        ...


class PricingServiceProtocol(Protocol):
    def quote(
        self, items: Iterable["LineItem"], shipping_option_id: Optional[str] = None
    ) -> "Quote":
        ...

    def get_shipping_option(self, option_id: Optional[str] = None) -> "ShippingOption":
        ...


class CartMapperProtocol(Protocol):
    def to_dto(self, cart: Cart, quote: "Quote") -> "CartDTO":
        ...

    def to_confirmation(
        self, order_id: str, cart_id: str, items: List["LineItem"], quote: "Quote"
    ) -> "OrderConfirmationDTO":
        ...
