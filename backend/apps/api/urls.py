from django.urls import path, include
from apps.catalog.views import (
    ProductListView,
    ProductDetailView,
    CategoryListView,
)

urlpatterns = [
    path("products/", ProductListView.as_view(), name="api-products-list"),
    path(
        "products/<str:product_id>/",
        ProductDetailView.as_view(),
        name="api-products-detail",
    ),
    path("categories/", CategoryListView.as_view(), name="api-categories-list"),
    # Other domain groupings remain namespaced
    path("pricing/", include("apps.pricing.urls")),
    path("carts/", include("apps.carts.urls")),
]
