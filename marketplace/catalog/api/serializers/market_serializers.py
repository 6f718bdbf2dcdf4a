from rest_framework import serializers

from marketplace.models import Market


class MarketSerializer(serializers.ModelSerializer):
    class Meta:
        model = Market
        fields = ("id", "name", "description", "address", "city", "state", "display_image", "is_mall", "created_at")
        read_only_fields = fields


class MarketNameSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    is_mall = serializers.BooleanField()


class MarketWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    description = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    is_mall = serializers.BooleanField(required=False, default=False)
    display_image = serializers.FileField(required=False, write_only=True)


class MarketUpdateSerializer(MarketWriteSerializer):
    name = serializers.CharField(max_length=150, required=False)
    is_mall = serializers.BooleanField(required=False)
