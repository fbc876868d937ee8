from django.urls import path
from .views import QuoteView, ShippingOptionsView

urlpatterns = [
    path("quote/", QuoteView.as_view(), name="api-pricing-quote"),
    path(
        "shipping-options/",
        ShippingOptionsView.as_view(),
        name="api-pricing-shipping-options",
    ),
]
