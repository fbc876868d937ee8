import threading
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

T = TypeVar('T')


class InMemoryRepository(Generic[T]):
    """Process-local store keyed by string id, preserving insertion order.

    Nothing is persisted; a restart starts from the seed data again.
    """

    def __init__(self, key: Callable[[T], str], items: Optional[Iterable[T]] = None):
        self._key = key
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()
        for item in items or ():
            self.save(item)

    def get(self, item_id) -> Optional[T]:
        if item_id is None:
            return None
        with self._lock:
            return self._items.get(str(item_id))

    def list(self, **filters) -> List[T]:
        with self._lock:
            items = list(self._items.values())
        if not filters:
            return items
        return [
            item for item in items
            if all(getattr(item, k, None) == v for k, v in filters.items())
        ]

    def save(self, item: T) -> T:
        with self._lock:
            self._items[str(self._key(item))] = item
        return item

    def delete(self, item_id) -> bool:
        with self._lock:
            return self._items.pop(str(item_id), None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
