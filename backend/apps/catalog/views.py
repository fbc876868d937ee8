from rest_framework.views import APIView
from rest_framework.response import Response
from .container import build_product_service
from .serializers import ProductReadSerializer, CategoryListSerializer
from apps.api.utils import error_response
from .pagination import ProductListPagination
from apps.common import get_logger
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from apps.api.schemas import paginated_response, ErrorResponseSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description=(
            "Filters are combined with AND. Sorting by price uses the list price "
            "before discount; the featured order is the catalog order. Supports "
            "pagination via ?page and ?limit."
        ),
        parameters=[
            OpenApiParameter(
                name="type",
                description="all, affiliate or dropshipping",
                required=False,
                type=str,
            ),
            OpenApiParameter(
                name="q",
                description="Case-insensitive substring of the product name",
                required=False,
                type=str,
            ),
            OpenApiParameter(name="minPrice", required=False, type=str),
            OpenApiParameter(name="maxPrice", required=False, type=str),
            OpenApiParameter(
                name="category",
                description="Category name; repeat or comma-separate for several",
                required=False,
                type=str,
                many=True,
            ),
            OpenApiParameter(name="inStock", required=False, type=bool),
            OpenApiParameter(
                name="sort",
                description="featured, price-low, price-high or discount",
                required=False,
                type=str,
            ),
        ],
        responses={
            200: paginated_response(ProductReadSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        self.log.debug(
            "Handling product list request", params=dict(request.query_params)
        )
        return self.service.list_products_paginated(
            request,
            request.query_params,
            paginator_class=ProductListPagination,
            serializer_class=ProductReadSerializer,
            view=self,
        )


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: str):
        self.log.debug("Fetching product detail", product_id=product_id)
        product = self.service.get_product(product_id)
        if not product:
            self.log.info("Product not found", product_id=product_id)
            return error_response(
                "NOT_FOUND", "Product not found", {"id": str(product_id)}
            )
        return Response(ProductReadSerializer(product).data)


@extend_schema(tags=["Catalog"])
class CategoryListView(APIView):
    service = build_product_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        summary="List categories",
        description="Distinct product categories in catalog order.",
        responses={200: CategoryListSerializer},
    )
    def get(self, request):
        categories = self.service.list_categories()
        return Response({"count": len(categories), "results": categories})
