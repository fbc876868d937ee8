from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .dtos import CatalogProduct


class ProductRepositoryProtocol(Protocol):
    def get(self, item_id) -> Optional[CatalogProduct]:
        ...

    def list(self, **filters) -> List[CatalogProduct]:
        ...


class CacheBackendProtocol(Protocol):
    def get(self, key: str) -> Any:
        ...

    def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        ...
