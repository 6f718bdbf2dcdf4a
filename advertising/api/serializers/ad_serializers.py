from rest_framework import serializers

from advertising.models import Ad, Transaction
from marketplace.catalog.api.serializers import ProductSummarySerializer


class AdSerializer(serializers.ModelSerializer):
    product = ProductSummarySerializer(read_only=True)
    status = serializers.CharField(read_only=True)

    class Meta:
        model = Ad
        fields = ("id", "product", "level", "paid_for", "status", "expires_at", "views", "clicks", "created_at")
        read_only_fields = fields


class AdCountersSerializer(serializers.ModelSerializer):
    class Meta:
        model = Ad
        fields = ("id", "views", "clicks")
        read_only_fields = fields


class TransactionSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True)
    ad_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Transaction
        fields = ("id", "reference", "product_id", "ad_id", "level", "amount", "currency", "status", "paid_at")
        read_only_fields = fields


class PaymentInitializationSerializer(serializers.Serializer):
    authorization_url = serializers.URLField()
    access_code = serializers.CharField()
    reference = serializers.CharField()


class VerificationOutcomeSerializer(serializers.Serializer):
    status = serializers.CharField()
    already_verified = serializers.BooleanField()
    transaction = TransactionSerializer()
    ad = AdSerializer(allow_null=True)


class AdPaymentRequestSerializer(serializers.Serializer):
    callback_url = serializers.URLField(required=False, help_text="Where the gateway redirects after checkout")


class AdListQuerySerializer(serializers.Serializer):
    marketId = serializers.UUIDField(required=False, source="market_id")
    merchantId = serializers.UUIDField(required=False, source="merchant_id")
