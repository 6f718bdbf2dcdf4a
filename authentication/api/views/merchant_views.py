from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from authentication.api.serializers import ConnectReferrerSerializer, MerchantSerializer, MerchantUpdateSerializer
from authentication.api.serializers.response_serializers import ErrorResponseSerializer
from authentication.permissions import MerchantAuthGuard
from infrastructure.container import container
from utils.responses import service_response


class MerchantDetailView(APIView):
    """Public merchant profile; owners may update or delete it."""

    def get_permissions(self):
        if self.request.method == "GET":
            return [permissions.AllowAny()]
        return [MerchantAuthGuard.authorise(owner_kwarg="merchant_id")()]

    @extend_schema(
        operation_id="merchant_get",
        responses={200: MerchantSerializer, 404: ErrorResponseSerializer},
        tags=["Merchants"],
    )
    def get(self, request, merchant_id):
        result = container.merchant_service().get_merchant(merchant_id)
        return service_response(result, lambda merchant: MerchantSerializer(merchant).data)

    @extend_schema(
        operation_id="merchant_update",
        description="Multipart or JSON. `market_name` moves the merchant to an existing market.",
        request=MerchantUpdateSerializer,
        responses={
            200: MerchantSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Market not found"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email or brand name taken"),
        },
        tags=["Merchants"],
    )
    def put(self, request, merchant_id):
        serializer = MerchantUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        display_image = data.pop("display_image", None)
        result = container.merchant_service().update_merchant(request.user, data, display_image=display_image)
        return service_response(result, lambda merchant: MerchantSerializer(merchant).data)

    @extend_schema(operation_id="merchant_delete", responses={204: None}, tags=["Merchants"])
    def delete(self, request, merchant_id):
        result = container.merchant_service().delete_merchant(request.user)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)


class MarketMerchantsView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="merchants_by_market",
        responses={200: MerchantSerializer(many=True), 404: ErrorResponseSerializer},
        tags=["Merchants"],
    )
    def get(self, request, market_id):
        result = container.merchant_service().get_merchants_by_market(market_id)
        return service_response(result, lambda merchants: MerchantSerializer(merchants, many=True).data)


class ConnectReferrerView(APIView):
    permission_classes = [MerchantAuthGuard.authorise()]

    @extend_schema(
        operation_id="merchant_connect_referrer",
        summary="Link the merchant to a marketer",
        description="A merchant can be referred once; the link cannot be changed afterwards.",
        request=ConnectReferrerSerializer,
        responses={
            200: MerchantSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Marketer not verified"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not your account"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown referrer code"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Already referred"),
        },
        tags=["Merchants"],
    )
    def post(self, request, merchant_id):
        serializer = ConnectReferrerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.merchant_service().connect_to_marketer(
            request.user,
            merchant_id,
            serializer.validated_data["referrer_code"],
            serializer.validated_data.get("referrer_username") or None,
        )
        return service_response(result, lambda merchant: MerchantSerializer(merchant).data)
