from rest_framework import serializers

from apps.pricing.money import effective_price, format_money

from .dtos import CatalogProduct


class ProductReadSerializer(serializers.Serializer):
    # Matches CatalogProduct; prices are 2-decimal strings
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.CharField()
    effectivePrice = serializers.CharField()
    discount = serializers.CharField()
    category = serializers.CharField()
    type = serializers.CharField()
    inStock = serializers.BooleanField()
    description = serializers.CharField()
    image = serializers.CharField()
    affiliateUrl = serializers.CharField(allow_null=True)

    def to_representation(self, instance: CatalogProduct):
        if instance is None:
            return None
        return {
            "id": instance.id,
            "name": instance.name,
            "price": format_money(instance.price),
            "effectivePrice": format_money(
                effective_price(instance.price, instance.discount_percent)
            ),
            "discount": format(instance.discount_percent.normalize(), "f"),
            "category": instance.category,
            "type": instance.type,
            "inStock": instance.in_stock,
            "description": instance.description,
            "image": instance.image,
            "affiliateUrl": instance.affiliate_url,
        }


class CategoryListSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    results = serializers.ListField(child=serializers.CharField())
