from __future__ import annotations

from functools import lru_cache

from django.conf import settings

from apps.catalog.container import build_product_repository
from apps.pricing.container import build_pricing_service

from .mappers import CartMapper
from .repositories import DEFAULT_MAX_CARTS, CartRepository
from .services import CartService


@lru_cache(maxsize=1)
def build_cart_repository() -> CartRepository:
    """Carts live for the lifetime of the process and are shared by every view."""
    return CartRepository(max_carts=getattr(settings, "CARTS_MAX", DEFAULT_MAX_CARTS))


@lru_cache(maxsize=1)
def build_cart_service() -> CartService:
    return CartService(
        carts=build_cart_repository(),
        products=build_product_repository(),
        pricing=build_pricing_service(),
        cart_mapper=CartMapper(),
    )
