from rest_framework import serializers

from marketplace.catalog.api.serializers import ProductSummarySerializer
from marketplace.models import CartProduct


class CartItemSerializer(serializers.ModelSerializer):
    product = ProductSummarySerializer(read_only=True)

    class Meta:
        model = CartProduct
        fields = ("id", "product", "quantity", "total_price", "updated_at")
        read_only_fields = fields


class CartSerializer(serializers.Serializer):
    customer_id = serializers.UUIDField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    items_count = serializers.IntegerField(read_only=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)


class UpdateCartSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(help_text="New quantity; 0 removes the line")
