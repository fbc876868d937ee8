from typing import List

from django.utils import timezone

from apps.catalog.dtos import CatalogProduct
from apps.pricing.dtos import LineItem, Quote
from .dtos import Cart, CartDTO, OrderConfirmationDTO


class LineItemMapper:
    @staticmethod
    def from_product(product: CatalogProduct, quantity: int) -> LineItem:
        # Snapshot of price and discount at the time the product is added.
        return LineItem(
            id=product.id,
            unit_price=product.price,
            quantity=quantity,
            discount_percent=product.discount_percent,
            name=product.name,
            image=product.image,
        )


class CartMapper:
    def to_dto(self, cart: Cart, quote: Quote) -> CartDTO:
        return CartDTO(
            id=cart.id,
            created_at=cart.created_at.isoformat(),
            items=list(cart.items),
            item_count=quote.item_count,
            shipping_option=quote.option,
            breakdown=quote.breakdown,
        )

    def to_confirmation(
        self, order_id: str, cart_id: str, items: List[LineItem], quote: Quote
    ) -> OrderConfirmationDTO:
        return OrderConfirmationDTO(
            order_id=order_id,
            cart_id=cart_id,
            placed_at=timezone.now().isoformat(),
            items=list(items),
            item_count=quote.item_count,
            shipping_option=quote.option,
            breakdown=quote.breakdown,
        )
