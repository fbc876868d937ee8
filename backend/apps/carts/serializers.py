from rest_framework import serializers

from apps.pricing.money import format_money
from apps.pricing.serializers import PriceBreakdownSerializer, ShippingOptionSerializer
from apps.pricing.totals import line_total

from .dtos import CartDTO, OrderConfirmationDTO


def _items_payload(items):
    return [CartItemReadSerializer(item).data for item in items]


class CartItemReadSerializer(serializers.Serializer):
    productId = serializers.CharField()
    name = serializers.CharField()
    image = serializers.CharField()
    unitPrice = serializers.CharField()
    discount = serializers.CharField()
    quantity = serializers.IntegerField()
    lineTotal = serializers.CharField()

    def to_representation(self, instance):
        return {
            "productId": instance.id,
            "name": instance.name,
            "image": instance.image,
            "unitPrice": format_money(instance.unit_price),
            "discount": format(instance.discount_percent.normalize(), "f"),
            "quantity": instance.quantity,
            "lineTotal": format_money(line_total(instance)),
        }


class CartReadSerializer(serializers.Serializer):
    id = serializers.CharField()
    createdAt = serializers.CharField()
    items = CartItemReadSerializer(many=True)
    itemCount = serializers.IntegerField()
    shippingOption = ShippingOptionSerializer()
    breakdown = PriceBreakdownSerializer()

    def to_representation(self, instance: CartDTO):
        return {
            "id": instance.id,
            "createdAt": instance.created_at,
            "items": _items_payload(instance.items),
            "itemCount": instance.item_count,
            "shippingOption": ShippingOptionSerializer(instance.shipping_option).data,
            "breakdown": PriceBreakdownSerializer(instance.breakdown).data,
        }


class OrderConfirmationSerializer(serializers.Serializer):
    orderId = serializers.CharField()
    cartId = serializers.CharField()
    placedAt = serializers.CharField()
    items = CartItemReadSerializer(many=True)
    itemCount = serializers.IntegerField()
    shippingOption = ShippingOptionSerializer()
    breakdown = PriceBreakdownSerializer()

    def to_representation(self, instance: OrderConfirmationDTO):
        return {
            "orderId": instance.order_id,
            "cartId": instance.cart_id,
            "placedAt": instance.placed_at,
            "items": _items_payload(instance.items),
            "itemCount": instance.item_count,
            "shippingOption": ShippingOptionSerializer(instance.shipping_option).data,
            "breakdown": PriceBreakdownSerializer(instance.breakdown).data,
        }


class CartItemWriteSerializer(serializers.Serializer):
    productId = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1, required=False, default=1)


class QuantityWriteSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)


class CheckoutSerializer(serializers.Serializer):
    shippingOption = serializers.CharField(required=False)
