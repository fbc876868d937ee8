from apps.common.repository import InMemoryRepository
from .dtos import Cart

DEFAULT_MAX_CARTS = 10000


class CartRepository(InMemoryRepository[Cart]):
    """Process-local cart store capped at ``max_carts`` entries.

    Carts live until the process restarts. Saving a new cart beyond the cap
    evicts the oldest carts first, so anonymous cart creation cannot grow
    memory without bound.
    """

    def __init__(self, max_carts: int = DEFAULT_MAX_CARTS):
        if max_carts < 1:
            raise ValueError("max_carts must be at least 1")
        self.max_carts = max_carts
        super().__init__(key=lambda c: c.id)

    def save(self, item: Cart) -> Cart:
        with self._lock:
            super().save(item)
            while len(self._items) > self.max_carts:
                oldest = next(iter(self._items))
                del self._items[oldest]
        return item
