from typing import Iterable, Optional

from apps.common.repository import InMemoryRepository
from .dtos import CatalogProduct
from .seed import seed_products


class ProductRepository(InMemoryRepository[CatalogProduct]):
    """Read-only catalog source; iteration order is the featured order."""

    def __init__(self, products: Optional[Iterable[CatalogProduct]] = None):
        super().__init__(
            key=lambda p: p.id,
            items=seed_products() if products is None else products,
        )
