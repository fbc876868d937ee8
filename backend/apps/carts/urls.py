from django.urls import path
from .views import (
    CartDetailView,
    CartItemDetailView,
    CartItemListView,
    CartListView,
    CheckoutView,
)

urlpatterns = [
    path("", CartListView.as_view(), name="api-carts-list"),
    path("<str:cart_id>/", CartDetailView.as_view(), name="api-carts-detail"),
    path("<str:cart_id>/items/", CartItemListView.as_view(), name="api-carts-items"),
    path(
        "<str:cart_id>/items/<str:product_id>/",
        CartItemDetailView.as_view(),
        name="api-carts-item-detail",
    ),
    path("<str:cart_id>/checkout/", CheckoutView.as_view(), name="api-carts-checkout"),
]
