from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, Optional, Union

from django.utils import timezone

from apps.api.exceptions import ApplicationError
from apps.catalog.dtos import AFFILIATE
from apps.common import get_logger
from apps.pricing.exceptions import InvalidPricingInput
from .commands import CartItemCommand, QuantityUpdateCommand
from .dtos import Cart, CartDTO, OrderConfirmationDTO
from .mappers import LineItemMapper
from .protocols import (
    CartMapperProtocol,
    CartRepositoryProtocol,
    PricingServiceProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """Owns cart state and re-prices the cart after every change.

    Prices are never stored on the cart: each read recomputes the breakdown from
    the current line items through the pricing service.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        products: ProductRepositoryProtocol,
        pricing: PricingServiceProtocol,
        cart_mapper: CartMapperProtocol,
    ):
        self.carts = carts
        self.products = products
        self.pricing = pricing
        self.cart_mapper = cart_mapper
        self.logger = logger.bind(service="CartService")
        self._lock = threading.RLock()

    def _require_cart(self, cart_id: str) -> Cart:
        cart = self.carts.get(cart_id)
        if not cart:
            self.logger.info("Cart not found", cart_id=cart_id)
            raise ApplicationError.not_found("Cart not found", id=str(cart_id))
        return cart

    def _to_dto(self, cart: Cart, shipping_option_id: Optional[str]) -> CartDTO:
        quote = self.pricing.quote(cart.items, shipping_option_id)
        return self.cart_mapper.to_dto(cart, quote)

    def _resolve_option(self, shipping_option_id: Optional[str]) -> str:
        # Unknown options fail before any cart state is touched.
        return self.pricing.get_shipping_option(shipping_option_id).id

    @staticmethod
    def _invalid(exc: InvalidPricingInput) -> ApplicationError:
        return ApplicationError.invalid_input(exc.field, exc.value, exc.message)

    def create_cart(self, shipping_option_id: Optional[str] = None) -> CartDTO:
        shipping_option_id = self._resolve_option(shipping_option_id)
        cart = Cart(id=uuid.uuid4().hex, created_at=timezone.now())
        self.carts.save(cart)
        self.logger.info("Cart created", cart_id=cart.id)
        return self._to_dto(cart, shipping_option_id)

    def get_cart(self, cart_id: str, shipping_option_id: Optional[str] = None) -> CartDTO:
        self.logger.debug("Fetching cart", cart_id=cart_id, shipping_option=shipping_option_id)
        return self._to_dto(self._require_cart(cart_id), shipping_option_id)

    def delete_cart(self, cart_id: str) -> None:
        if not self.carts.delete(cart_id):
            self.logger.warning("Cart delete failed: not found", cart_id=cart_id)
            raise ApplicationError.not_found("Cart not found", id=str(cart_id))
        self.logger.info("Cart deleted", cart_id=cart_id)

    def add_item(
        self,
        cart_id: str,
        data: Union[Dict[str, Any], CartItemCommand],
        shipping_option_id: Optional[str] = None,
    ) -> CartDTO:
        try:
            cmd = data if isinstance(data, CartItemCommand) else CartItemCommand.from_raw(data)
        except InvalidPricingInput as exc:
            self.logger.warning("Rejected cart item", cart_id=cart_id, field=exc.field)
            raise self._invalid(exc)
        shipping_option_id = self._resolve_option(shipping_option_id)
        with self._lock:
            cart = self._require_cart(cart_id)
            product = self.products.get(cmd.product_id)
            if not product:
                self.logger.warning(
                    "Add to cart failed: product not found",
                    cart_id=cart_id,
                    product_id=cmd.product_id,
                )
                raise ApplicationError.not_found(
                    "Product not found", productId=cmd.product_id
                )
            if product.type == AFFILIATE:
                self.logger.warning(
                    "Add to cart refused for affiliate product",
                    cart_id=cart_id,
                    product_id=product.id,
                )
                raise ApplicationError(
                    "UNPROCESSABLE_ENTITY",
                    "Affiliate products are bought on the partner site",
                    details={"productId": product.id},
                    extra={"affiliateUrl": product.affiliate_url},
                )
            if not product.in_stock:
                self.logger.warning(
                    "Add to cart refused: out of stock",
                    cart_id=cart_id,
                    product_id=product.id,
                )
                raise ApplicationError(
                    "CONFLICT", "Product is out of stock", details={"productId": product.id}
                )
            existing = cart.find(product.id)
            if existing:
                updated = replace(existing, quantity=existing.quantity + cmd.quantity)
                cart.items = [updated if i.id == product.id else i for i in cart.items]
            else:
                cart.items = cart.items + [
                    LineItemMapper.from_product(product, cmd.quantity)
                ]
            self.carts.save(cart)
        self.logger.info(
            "Added item to cart",
            cart_id=cart_id,
            product_id=product.id,
            quantity=cmd.quantity,
            merged=existing is not None,
        )
        return self._to_dto(cart, shipping_option_id)

    def update_quantity(
        self,
        cart_id: str,
        product_id: str,
        data: Union[Dict[str, Any], QuantityUpdateCommand],
        shipping_option_id: Optional[str] = None,
    ) -> CartDTO:
        try:
            cmd = (
                data
                if isinstance(data, QuantityUpdateCommand)
                else QuantityUpdateCommand.from_raw(product_id, data)
            )
        except InvalidPricingInput as exc:
            self.logger.warning(
                "Rejected quantity update",
                cart_id=cart_id,
                product_id=product_id,
                value=exc.value,
            )
            raise self._invalid(exc)
        shipping_option_id = self._resolve_option(shipping_option_id)
        with self._lock:
            cart = self._require_cart(cart_id)
            existing = cart.find(cmd.product_id)
            if not existing:
                self.logger.warning(
                    "Quantity update failed: item not in cart",
                    cart_id=cart_id,
                    product_id=cmd.product_id,
                )
                raise ApplicationError.not_found(
                    "Item not in cart", productId=cmd.product_id
                )
            updated = replace(existing, quantity=cmd.quantity)
            cart.items = [updated if i.id == cmd.product_id else i for i in cart.items]
            self.carts.save(cart)
        self.logger.info(
            "Updated cart item quantity",
            cart_id=cart_id,
            product_id=cmd.product_id,
            quantity=cmd.quantity,
        )
        return self._to_dto(cart, shipping_option_id)

    def remove_item(
        self, cart_id: str, product_id: str, shipping_option_id: Optional[str] = None
    ) -> CartDTO:
        shipping_option_id = self._resolve_option(shipping_option_id)
        with self._lock:
            cart = self._require_cart(cart_id)
            remaining = [i for i in cart.items if i.id != str(product_id)]
            if len(remaining) == len(cart.items):
                self.logger.warning(
                    "Remove failed: item not in cart",
                    cart_id=cart_id,
                    product_id=product_id,
                )
                raise ApplicationError.not_found("Item not in cart", productId=str(product_id))
            cart.items = remaining
            self.carts.save(cart)
        self.logger.info("Removed item from cart", cart_id=cart_id, product_id=product_id)
        return self._to_dto(cart, shipping_option_id)

    def checkout(
        self, cart_id: str, shipping_option_id: Optional[str] = None
    ) -> OrderConfirmationDTO:
        """Accept the computed total, hand the order off and empty the cart."""
        shipping_option_id = self._resolve_option(shipping_option_id)
        with self._lock:
            cart = self._require_cart(cart_id)
            if not cart.items:
                self.logger.warning("Checkout refused: cart is empty", cart_id=cart_id)
                raise ApplicationError(
                    "CONFLICT", "Cart is empty", details={"id": cart_id}
                )
            items = list(cart.items)
            quote = self.pricing.quote(items, shipping_option_id)
            order_id = uuid.uuid4().hex
            # Order submission and payment happen outside this service.
            self.logger.info(
                "Order submitted",
                order_id=order_id,
                cart_id=cart_id,
                items=quote.item_count,
                shipping_option=quote.option.id,
                total=quote.breakdown.total,
            )
            cart.items = []
            self.carts.save(cart)
        return self.cart_mapper.to_confirmation(order_id, cart_id, items, quote)
