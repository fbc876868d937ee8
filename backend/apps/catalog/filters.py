"""Catalog filter/sort pipeline.

Every function here is pure: the input sequence is never mutated and the same
inputs always produce the same output, so repeated application with the same
criteria is a no-op.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .dtos import CatalogProduct, FilterCriteria, InvalidFilterCriteria

FEATURED = "featured"
PRICE_LOW = "price-low"
PRICE_HIGH = "price-high"
DISCOUNT = "discount"

# Sorting uses the raw list price, not the discounted price.
_SORTS: Dict[str, Optional[Callable[[List[CatalogProduct]], List[CatalogProduct]]]] = {
    FEATURED: None,
    PRICE_LOW: lambda items: sorted(items, key=lambda p: p.price),
    PRICE_HIGH: lambda items: sorted(items, key=lambda p: p.price, reverse=True),
    DISCOUNT: lambda items: sorted(items, key=lambda p: p.discount_percent, reverse=True),
}
SORT_KEYS = tuple(_SORTS)


def matches(product: CatalogProduct, criteria: FilterCriteria) -> bool:
    if criteria.type_filter != "all" and product.type != criteria.type_filter:
        return False
    if criteria.search_text and criteria.search_text.casefold() not in product.name.casefold():
        return False
    if criteria.price_range is not None:
        low, high = criteria.price_range
        if product.price < low or (high is not None and product.price > high):
            return False
    if criteria.categories and product.category not in criteria.categories:
        return False
    if criteria.in_stock_only and not product.in_stock:
        return False
    return True


def sort_products(
    products: Sequence[CatalogProduct], sort_key: str = FEATURED
) -> List[CatalogProduct]:
    """Order products by ``sort_key``.

    ``sorted`` is stable (and ``reverse=True`` keeps it stable), so ties keep
    catalog order and ``featured`` is the identity.
    """
    key = sort_key or FEATURED
    if key not in _SORTS:
        raise InvalidFilterCriteria(
            "sort", sort_key, "sort must be one of: " + ", ".join(SORT_KEYS)
        )
    sorter = _SORTS[key]
    items = list(products)
    return sorter(items) if sorter else items


def filter_and_sort(
    products: Iterable[CatalogProduct],
    criteria: Optional[FilterCriteria] = None,
    sort_key: str = FEATURED,
) -> List[CatalogProduct]:
    criteria = criteria or FilterCriteria()
    return sort_products([p for p in products if matches(p, criteria)], sort_key)


def distinct_categories(products: Iterable[CatalogProduct]) -> List[str]:
    seen: Dict[str, None] = {}
    for product in products:
        seen.setdefault(product.category, None)
    return list(seen)
