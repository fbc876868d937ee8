from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_pricing_service
from .serializers import (
    QuoteRequestSerializer,
    QuoteSerializer,
    ShippingQuoteQuerySerializer,
    ShippingQuoteSerializer,
)

logger = get_logger(__name__).bind(component="pricing", layer="view")


@extend_schema(tags=["Pricing"])
class QuoteView(APIView):
    service = build_pricing_service()
    log = logger.bind(view="QuoteView")

    @extend_schema(
        summary="Price a cart",
        description=(
            "Computes subtotal, shipping, tax and total for the given line items. "
            "Tax applies to the subtotal only; standard shipping is free above the "
            "configured threshold and nothing is charged on an empty cart."
        ),
        request=QuoteRequestSerializer,
        responses={
            200: QuoteSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = QuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = dict(serializer.validated_data)
        payload["items"] = [dict(item) for item in payload.get("items", [])]
        self.log.debug(
            "Handling quote request",
            items=len(payload["items"]),
            shipping_option=payload.get("shippingOption"),
        )
        quote = self.service.quote(payload)
        return Response(QuoteSerializer(quote).data)


@extend_schema(tags=["Pricing"])
class ShippingOptionsView(APIView):
    service = build_pricing_service()
    log = logger.bind(view="ShippingOptionsView")

    @extend_schema(
        summary="Quote shipping options",
        description="Prices every shipping option for a destination country.",
        parameters=[
            OpenApiParameter("subtotal", str, OpenApiParameter.QUERY, required=True),
            OpenApiParameter(
                "country",
                str,
                OpenApiParameter.QUERY,
                required=False,
                description="ISO country code, defaults to BR",
            ),
        ],
        responses={
            200: ShippingQuoteSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = ShippingQuoteQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        subtotal = query.validated_data["subtotal"]
        country = query.validated_data.get("country")
        self.log.debug("Handling shipping quote", subtotal=subtotal, country=country)
        quotes = self.service.shipping_quote(subtotal, country)
        return Response(ShippingQuoteSerializer(quotes, many=True).data)
