import json

from rest_framework import serializers

from authentication.models import Address, Customer, Merchant


class MultipartListsMixin:
    """Multipart forms carry list fields as JSON encoded strings."""

    json_list_fields = ("addresses", "phone_numbers")

    def to_internal_value(self, data):
        if hasattr(data, "getlist"):
            decoded = {key: data.get(key) for key in data.keys()}
            for field in self.json_list_fields:
                if isinstance(decoded.get(field), str):
                    try:
                        decoded[field] = json.loads(decoded[field])
                    except ValueError:
                        raise serializers.ValidationError({field: ["Must be a JSON encoded list."]})
            data = decoded
        return super().to_internal_value(data)


class AddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = ("street", "city", "state", "country", "postal_code")
        extra_kwargs = {"country": {"required": False}, "postal_code": {"required": False}}


class ContactsMixin(serializers.Serializer):
    addresses = AddressSerializer(many=True, read_only=True)
    phone_numbers = serializers.SerializerMethodField()

    def get_phone_numbers(self, obj):
        return [phone.number for phone in obj.phone_numbers.all()]


class CustomerSerializer(ContactsMixin, serializers.ModelSerializer):
    verified = serializers.BooleanField(source="is_verified", read_only=True)

    class Meta:
        model = Customer
        fields = (
            "id",
            "email",
            "first_name",
            "last_name",
            "display_image",
            "role",
            "verified",
            "addresses",
            "phone_numbers",
            "created_at",
        )
        read_only_fields = fields


class MerchantSerializer(ContactsMixin, serializers.ModelSerializer):
    verified = serializers.BooleanField(source="is_verified", read_only=True)
    market = serializers.SerializerMethodField()
    referred = serializers.SerializerMethodField()

    class Meta:
        model = Merchant
        fields = (
            "id",
            "email",
            "brand_name",
            "display_image",
            "market",
            "referred",
            "verified",
            "addresses",
            "phone_numbers",
            "created_at",
        )
        read_only_fields = fields

    def get_market(self, obj):
        if obj.market_id is None:
            return None
        return {"id": str(obj.market_id), "name": obj.market.name}

    def get_referred(self, obj):
        return obj.referred_by_id is not None


class ProfileUpdateBaseSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False)
    addresses = AddressSerializer(many=True, required=False)
    phone_numbers = serializers.ListField(
        child=serializers.CharField(max_length=20), max_length=2, required=False
    )


class CustomerUpdateSerializer(ProfileUpdateBaseSerializer):
    first_name = serializers.CharField(max_length=50, required=False)
    last_name = serializers.CharField(max_length=50, required=False)


class MerchantUpdateSerializer(MultipartListsMixin, ProfileUpdateBaseSerializer):
    brand_name = serializers.CharField(max_length=120, required=False)
    market_name = serializers.CharField(max_length=150, required=False)
    display_image = serializers.FileField(required=False, write_only=True)


class ConnectReferrerSerializer(serializers.Serializer):
    referrer_code = serializers.CharField(max_length=16)
    referrer_username = serializers.CharField(max_length=50, required=False, allow_blank=True)
