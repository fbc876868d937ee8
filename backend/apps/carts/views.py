from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_cart_service
from .serializers import (
    CartItemWriteSerializer,
    CartReadSerializer,
    CheckoutSerializer,
    OrderConfirmationSerializer,
    QuantityWriteSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")

SHIPPING_OPTION_PARAM = OpenApiParameter(
    name="shippingOption",
    description="Shipping option used to price the cart (defaults to standard)",
    required=False,
    type=str,
    location=OpenApiParameter.QUERY,
)

ERROR_RESPONSES = {
    400: OpenApiResponse(response=ErrorResponseSerializer),
    404: OpenApiResponse(response=ErrorResponseSerializer),
}


def _shipping_option(request):
    return request.query_params.get("shippingOption") or None


@extend_schema(tags=["Carts"])
class CartListView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartListView")

    @extend_schema(
        summary="Create cart",
        description="Creates an empty cart held in memory for the storefront session.",
        parameters=[SHIPPING_OPTION_PARAM],
        request=None,
        responses={201: CartReadSerializer, **ERROR_RESPONSES},
    )
    def post(self, request):
        dto = self.service.create_cart(_shipping_option(request))
        self.log.info("Cart created via API", cart_id=dto.id)
        return Response(CartReadSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Carts"])
class CartDetailView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartDetailView")

    @extend_schema(
        summary="Get cart",
        description="Returns the cart with a freshly computed price breakdown.",
        parameters=[OpenApiParameter("cart_id", str, OpenApiParameter.PATH), SHIPPING_OPTION_PARAM],
        responses={200: CartReadSerializer, **ERROR_RESPONSES},
    )
    def get(self, request, cart_id: str):
        self.log.debug("Fetching cart detail", cart_id=cart_id)
        dto = self.service.get_cart(cart_id, _shipping_option(request))
        return Response(CartReadSerializer(dto).data)

    @extend_schema(
        summary="Delete cart",
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, cart_id: str):
        self.log.info("Deleting cart via API", cart_id=cart_id)
        self.service.delete_cart(cart_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Carts"])
class CartItemListView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemListView")

    @extend_schema(
        summary="Add item to cart",
        description=(
            "Adds a dropshipping product to the cart. Adding a product already in "
            "the cart increases its quantity. Affiliate and out-of-stock products "
            "are refused."
        ),
        parameters=[SHIPPING_OPTION_PARAM],
        request=CartItemWriteSerializer,
        responses={
            200: CartReadSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer),
            422: OpenApiResponse(response=ErrorResponseSerializer),
            **ERROR_RESPONSES,
        },
    )
    def post(self, request, cart_id: str):
        serializer = CartItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Adding item via API",
            cart_id=cart_id,
            product_id=serializer.validated_data["productId"],
        )
        dto = self.service.add_item(
            cart_id, dict(serializer.validated_data), _shipping_option(request)
        )
        return Response(CartReadSerializer(dto).data)


@extend_schema(tags=["Carts"])
class CartItemDetailView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemDetailView")

    @extend_schema(
        summary="Change item quantity",
        parameters=[SHIPPING_OPTION_PARAM],
        request=QuantityWriteSerializer,
        responses={200: CartReadSerializer, **ERROR_RESPONSES},
    )
    def patch(self, request, cart_id: str, product_id: str):
        serializer = QuantityWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Updating item quantity via API",
            cart_id=cart_id,
            product_id=product_id,
            quantity=serializer.validated_data["quantity"],
        )
        dto = self.service.update_quantity(
            cart_id, product_id, dict(serializer.validated_data), _shipping_option(request)
        )
        return Response(CartReadSerializer(dto).data)

    @extend_schema(
        summary="Remove item from cart",
        parameters=[SHIPPING_OPTION_PARAM],
        responses={200: CartReadSerializer, **ERROR_RESPONSES},
    )
    def delete(self, request, cart_id: str, product_id: str):
        self.log.info("Removing item via API", cart_id=cart_id, product_id=product_id)
        dto = self.service.remove_item(cart_id, product_id, _shipping_option(request))
        return Response(CartReadSerializer(dto).data)


@extend_schema(tags=["Carts"])
class CheckoutView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CheckoutView")

    @extend_schema(
        summary="Check out cart",
        description=(
            "Computes the final breakdown, submits the order and empties the cart. "
            "Payment is handled by the external checkout provider."
        ),
        request=CheckoutSerializer,
        responses={
            201: OrderConfirmationSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer),
            **ERROR_RESPONSES,
        },
    )
    def post(self, request, cart_id: str):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        option_id = serializer.validated_data.get("shippingOption")
        confirmation = self.service.checkout(cart_id, option_id)
        self.log.info(
            "Checkout completed via API",
            cart_id=cart_id,
            order_id=confirmation.order_id,
        )
        return Response(
            OrderConfirmationSerializer(confirmation).data,
            status=status.HTTP_201_CREATED,
        )
