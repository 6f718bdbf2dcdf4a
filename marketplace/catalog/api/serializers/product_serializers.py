from rest_framework import serializers

from marketplace.models import Product, ProductCategory, ProductImage


class ProductImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductImage
        fields = ("id", "url", "is_display")
        read_only_fields = fields


class ProductMerchantSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    brand_name = serializers.CharField()
    display_image = serializers.CharField()
    market_id = serializers.UUIDField(allow_null=True)


class DisplayImageMixin(serializers.Serializer):
    display_image = serializers.SerializerMethodField()

    def get_display_image(self, obj):
        image = obj.display_image
        return image.url if image else None


class ProductSerializer(DisplayImageMixin, serializers.ModelSerializer):
    merchant = ProductMerchantSerializer(read_only=True)
    images = ProductImageSerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = (
            "id",
            "name",
            "details",
            "description",
            "price",
            "prev_price",
            "stock",
            "category",
            "display_image",
            "images",
            "merchant",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class ProductSummarySerializer(DisplayImageMixin, serializers.ModelSerializer):
    """Compact product used inside carts and ads."""

    merchant_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Product
        fields = ("id", "name", "price", "prev_price", "stock", "category", "display_image", "merchant_id")
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    details = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    prev_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    stock = serializers.IntegerField(min_value=0, required=False, default=0)
    category = serializers.ChoiceField(choices=ProductCategory.choices, required=False, default=ProductCategory.OTHER)


class ProductUpdateSerializer(ProductWriteSerializer):
    name = serializers.CharField(max_length=200, required=False)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    stock = serializers.IntegerField(min_value=0, required=False)
    category = serializers.ChoiceField(choices=ProductCategory.choices, required=False)


class ProductListQuerySerializer(serializers.Serializer):
    category = serializers.ChoiceField(choices=ProductCategory.choices, required=False)
    state = serializers.CharField(max_length=100, required=False)
