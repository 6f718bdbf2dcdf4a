from rest_framework import serializers

from marketplace.models import Rating


class RatingSerializer(serializers.ModelSerializer):
    customer_id = serializers.UUIDField(read_only=True)
    customer_name = serializers.CharField(source="customer.full_name", read_only=True)
    product_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Rating
        fields = ("id", "customer_id", "customer_name", "product_id", "rating", "review", "created_at", "updated_at")
        read_only_fields = fields


class RatingWriteSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    review = serializers.CharField(required=False, allow_blank=True)


class RatingUpdateSerializer(RatingWriteSerializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)


class RatingSummarySerializer(serializers.Serializer):
    ratings = RatingSerializer(many=True)
    average = serializers.FloatField(allow_null=True)
    count = serializers.IntegerField()
