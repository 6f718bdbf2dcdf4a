from rest_framework import serializers

from marketers.models import Marketer, MarketerEarnings


class MarketerSerializer(serializers.ModelSerializer):
    customer_id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(source="customer.email", read_only=True)

    class Meta:
        model = Marketer
        fields = (
            "id",
            "customer_id",
            "email",
            "username",
            "referrer_code",
            "verified",
            "bank_name",
            "account_number",
            "account_name",
            "identity_credential_image",
            "created_at",
        )
        read_only_fields = fields


class ReferrerSerializer(serializers.ModelSerializer):
    """Public view of a marketer, enough to confirm a referrer code."""

    class Meta:
        model = Marketer
        fields = ("id", "username", "referrer_code", "verified")
        read_only_fields = fields


class MarketerCreateSerializer(serializers.Serializer):
    email = serializers.EmailField(help_text="Email of the existing customer account")
    username = serializers.RegexField(r"^[\w.-]{3,50}$", help_text="Letters, digits, dots, dashes, underscores")
    bank_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    account_number = serializers.RegexField(r"^\d{6,20}$", required=False, allow_blank=True)
    account_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    identity_image = serializers.FileField(required=False, write_only=True)


class MarketerUpdateSerializer(serializers.Serializer):
    username = serializers.RegexField(r"^[\w.-]{3,50}$", required=False)
    bank_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    account_number = serializers.RegexField(r"^\d{6,20}$", required=False, allow_blank=True)
    account_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    identity_image = serializers.FileField(required=False, write_only=True)


class MarketerEarningSerializer(serializers.ModelSerializer):
    merchant_id = serializers.UUIDField(read_only=True)
    brand_name = serializers.CharField(source="merchant.brand_name", read_only=True)
    ad_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = MarketerEarnings
        fields = ("id", "merchant_id", "brand_name", "ad_id", "amount", "paid", "paid_at", "created_at")
        read_only_fields = fields


class EarningsSummarySerializer(serializers.Serializer):
    marketer_id = serializers.UUIDField(source="marketer.id")
    earnings = MarketerEarningSerializer(many=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    paid = serializers.DecimalField(max_digits=14, decimal_places=2)
    unpaid = serializers.DecimalField(max_digits=14, decimal_places=2)
    count = serializers.IntegerField()


class PayoutSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
