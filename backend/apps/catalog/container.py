from __future__ import annotations

from functools import lru_cache

from django.core.cache import cache

from .repositories import ProductRepository
from .services import ProductService


@lru_cache(maxsize=1)
def build_product_repository() -> ProductRepository:
    """The catalog is shared by the product views and the cart service."""
    return ProductRepository()


def build_product_service(*, disable_cache: bool = False) -> ProductService:
    return ProductService(
        products=build_product_repository(),
        cache_backend=cache,
        disable_cache=disable_cache,
    )
