"""
Advertisement endpoints.

Merchants activate free ads or buy paid ones through the payment gateway
(initialize, pay on the hosted checkout page, then verify). Listing and
view/click tracking are public.
"""

from dataclasses import asdict

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from advertising.api.serializers import (
    AdCountersSerializer,
    AdListQuerySerializer,
    AdPaymentRequestSerializer,
    AdSerializer,
    PaymentInitializationSerializer,
    VerificationOutcomeSerializer,
)
from authentication.permissions import MerchantAuthGuard
from infrastructure.container import container
from utils.responses import service_response

VerifiedMerchant = MerchantAuthGuard.authorise(strict=True)

LIST_PARAMETERS = [
    OpenApiParameter("marketId", str, description="Only ads of products sold in this market"),
    OpenApiParameter("merchantId", str, description="Only ads of this merchant's products"),
]


class FreeAdView(APIView):
    permission_classes = [VerifiedMerchant]

    @extend_schema(
        operation_id="ad_activate_free",
        summary="Activate a free ad",
        request=None,
        responses={
            201: AdSerializer,
            403: OpenApiResponse(description="Not the product owner or unverified merchant"),
            409: OpenApiResponse(description="Product already has an active ad"),
        },
        tags=["Ads"],
    )
    def post(self, request, product_id):
        result = container.ad_service().activate_free_ad(request.user, product_id)
        return service_response(result, lambda ad: AdSerializer(ad).data, success_status=status.HTTP_201_CREATED)


class InitializeAdPaymentView(APIView):
    permission_classes = [VerifiedMerchant]

    @extend_schema(
        operation_id="ad_initialize_payment",
        summary="Start paying for a level 1-3 ad",
        description="Returns the gateway checkout URL; call the verify endpoint with `reference` after payment.",
        request=AdPaymentRequestSerializer,
        responses={
            200: PaymentInitializationSerializer,
            400: OpenApiResponse(description="Invalid level"),
            409: OpenApiResponse(description="Product already has an active paid ad"),
            502: OpenApiResponse(description="Payment gateway error"),
        },
        tags=["Ads"],
    )
    def post(self, request, level, product_id):
        serializer = AdPaymentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.ad_service().initialize_ad_payment(
            request.user, level, product_id, callback_url=serializer.validated_data.get("callback_url")
        )
        return service_response(result, asdict)


class VerifyAdPaymentView(APIView):
    permission_classes = [VerifiedMerchant]

    @extend_schema(
        operation_id="ad_verify_payment",
        summary="Confirm an ad payment with the gateway",
        description="Safe to call repeatedly: a settled payment is returned as is.",
        responses={
            200: VerificationOutcomeSerializer,
            404: OpenApiResponse(description="Unknown reference"),
            502: OpenApiResponse(description="Payment gateway error"),
        },
        tags=["Ads"],
    )
    def get(self, request, reference):
        result = container.ad_service().verify_ad_payment(request.user, reference)
        return service_response(result, lambda outcome: VerificationOutcomeSerializer(outcome).data)


class AdListView(APIView):
    permission_classes = [permissions.AllowAny]
    active_only = True

    @extend_schema(
        summary="List ads, highest level first",
        parameters=LIST_PARAMETERS,
        responses={200: AdSerializer(many=True)},
        tags=["Ads"],
    )
    def get(self, request):
        filters = AdListQuerySerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        result = container.ad_service().list_ads(active_only=self.active_only, **filters.validated_data)
        return service_response(result, lambda ads: AdSerializer(ads, many=True).data)


class AdDetailView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="ad_get", responses={200: AdSerializer}, tags=["Ads"])
    def get(self, request, ad_id):
        result = container.ad_service().get_ad(ad_id)
        return service_response(result, lambda ad: AdSerializer(ad).data)


class ProductAdView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="ad_by_product", responses={200: AdSerializer}, tags=["Ads"])
    def get(self, request, product_id):
        result = container.ad_service().get_ad_by_product(product_id)
        return service_response(result, lambda ad: AdSerializer(ad).data)


class AdClickView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="ad_track_click", request=None, responses={200: AdCountersSerializer}, tags=["Ads"])
    def put(self, request, ad_id):
        result = container.ad_service().track_click(ad_id)
        return service_response(result, lambda ad: AdCountersSerializer(ad).data)


class AdViewView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="ad_track_view", request=None, responses={200: AdCountersSerializer}, tags=["Ads"])
    def put(self, request, ad_id):
        result = container.ad_service().track_view(ad_id)
        return service_response(result, lambda ad: AdCountersSerializer(ad).data)
