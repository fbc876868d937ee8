from rest_framework import serializers

from .dtos import PriceBreakdown, Quote, ShippingOption, ShippingQuote
from .money import format_money


def _plain(value) -> str:
    # Plain notation without trailing zeros from request quantization.
    return format(value.normalize(), "f")


class LineItemWriteSerializer(serializers.Serializer):
    id = serializers.CharField()
    unitPrice = serializers.DecimalField(max_digits=14, decimal_places=4, min_value=0)
    quantity = serializers.IntegerField(min_value=1)
    discountPercent = serializers.DecimalField(
        max_digits=7, decimal_places=4, min_value=0, max_value=100, required=False
    )
    name = serializers.CharField(required=False, allow_blank=True)
    image = serializers.CharField(required=False, allow_blank=True)


class QuoteRequestSerializer(serializers.Serializer):
    items = LineItemWriteSerializer(many=True)
    shippingOption = serializers.CharField(required=False)


class ShippingQuoteQuerySerializer(serializers.Serializer):
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=4, min_value=0)
    country = serializers.CharField(required=False, default="BR", max_length=2, min_length=2)


class ShippingOptionSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.CharField()
    estimatedDays = serializers.CharField()

    def to_representation(self, instance: ShippingOption):
        return {
            "id": instance.id,
            "name": instance.name,
            "price": format_money(instance.flat_price),
            "estimatedDays": instance.estimated_days,
        }


class ShippingQuoteSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.CharField()
    estimatedDays = serializers.CharField()
    free = serializers.BooleanField()
    country = serializers.CharField(allow_null=True)

    def to_representation(self, instance: ShippingQuote):
        return {
            "id": instance.option.id,
            "name": instance.option.name,
            "price": format_money(instance.price),
            "estimatedDays": instance.option.estimated_days,
            "free": instance.free,
            "country": instance.country,
        }


class PriceBreakdownSerializer(serializers.Serializer):
    # Rounded cents for display; "exact" keeps full precision for reconciliation.
    subtotal = serializers.CharField()
    shipping = serializers.CharField()
    tax = serializers.CharField()
    total = serializers.CharField()
    exact = serializers.DictField(child=serializers.CharField())

    def to_representation(self, instance: PriceBreakdown):
        rounded = instance.rounded()
        return {
            "subtotal": format(rounded["subtotal"], "f"),
            "shipping": format(rounded["shipping"], "f"),
            "tax": format(rounded["tax"], "f"),
            "total": format(rounded["total"], "f"),
            "exact": {
                "subtotal": _plain(instance.subtotal),
                "shipping": _plain(instance.shipping),
                "tax": _plain(instance.tax),
                "total": _plain(instance.total),
            },
        }


class QuoteSerializer(serializers.Serializer):
    shippingOption = ShippingOptionSerializer()
    itemCount = serializers.IntegerField()
    breakdown = PriceBreakdownSerializer()

    def to_representation(self, instance: Quote):
        return {
            "shippingOption": ShippingOptionSerializer(instance.option).data,
            "itemCount": instance.item_count,
            "breakdown": PriceBreakdownSerializer(instance.breakdown).data,
        }
