from __future__ import annotations

import hashlib
from typing import Any, List, Mapping, Optional, Type, Union

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .commands import FilterCommand
from .dtos import CatalogProduct, FilterCriteria, InvalidFilterCriteria
from .filters import FEATURED, distinct_categories, filter_and_sort, sort_products
from .protocols import CacheBackendProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        cache_backend: CacheBackendProtocol,
        disable_cache: bool = False,
    ):
        self.products = products
        self.cache = cache_backend
        self.disable_cache = disable_cache
        self.logger = logger.bind(service="ProductService")
        # Caching keys
        self._cache_prefix = "products:list"

    def _cache_key(self, criteria: FilterCriteria, sort_key: str) -> str:
        digest = hashlib.sha1(criteria.cache_token().encode("utf-8")).hexdigest()
        return f"{self._cache_prefix}:{digest}:sort-{sort_key}"

    def _resolve_command(
        self,
        query: Union[FilterCommand, FilterCriteria, Mapping[str, Any], None],
        sort_key: Optional[str],
    ) -> FilterCommand:
        try:
            if isinstance(query, FilterCommand):
                command = query
            elif isinstance(query, FilterCriteria):
                command = FilterCommand(criteria=query, sort_key=sort_key or FEATURED)
            else:
                command = FilterCommand.from_raw(query)
            if sort_key and sort_key != command.sort_key:
                command = FilterCommand(criteria=command.criteria, sort_key=sort_key)
            # Validate the sort key before touching the cache.
            sort_products([], command.sort_key)
        except InvalidFilterCriteria as exc:
            self.logger.warning(
                "Rejected catalog filter", field=exc.field, value=exc.value
            )
            raise ApplicationError.invalid_input(exc.field, exc.value, exc.message)
        return command

    def list_products(
        self,
        query: Union[FilterCommand, FilterCriteria, Mapping[str, Any], None] = None,
        sort_key: Optional[str] = None,
    ) -> List[CatalogProduct]:
        command = self._resolve_command(query, sort_key)
        self.logger.debug(
            "Listing products",
            criteria=command.criteria.cache_token(),
            sort=command.sort_key,
            cache_enabled=not self.disable_cache,
        )
        if self.disable_cache:
            return filter_and_sort(self.products.list(), command.criteria, command.sort_key)
        # Read-through cache of matching ids; products themselves come from the repository.
        key = self._cache_key(command.criteria, command.sort_key)
        cached_ids = self.cache.get(key)
        if cached_ids is not None:
            self.logger.debug("Product list cache hit", cache_key=key)
            return [p for p in (self.products.get(pid) for pid in cached_ids) if p]
        self.logger.debug("Product list cache miss", cache_key=key)
        results = filter_and_sort(self.products.list(), command.criteria, command.sort_key)
        self.cache.set(key, [p.id for p in results])
        return results

    def list_products_paginated(
        self,
        request,
        query: Union[FilterCommand, Mapping[str, Any], None] = None,
        *,
        paginator_class: Optional[Type[PageNumberPagination]] = None,
        serializer_class=None,
        view=None,
    ):
        paginator_cls = paginator_class or PageNumberPagination
        results = self.list_products(query)
        paginator = paginator_cls()
        page = paginator.paginate_queryset(results, request, view=view)
        data_source = page if page is not None else results
        if serializer_class is None:
            from .serializers import ProductReadSerializer  # Avoid circular import

            serializer_class = ProductReadSerializer
        serializer = serializer_class(data_source, many=True)
        if page is None:
            return Response({"count": len(results), "results": serializer.data})
        return paginator.get_paginated_response(serializer.data)

    def get_product(self, product_id: str) -> Optional[CatalogProduct]:
        self.logger.debug("Fetching product", product_id=product_id)
        p = self.products.get(product_id)
        if not p:
            self.logger.info("Product not found", product_id=product_id)
        return p

    def list_categories(self) -> List[str]:
        categories = distinct_categories(self.products.list())
        self.logger.debug("Listing categories", count=len(categories))
        return categories
