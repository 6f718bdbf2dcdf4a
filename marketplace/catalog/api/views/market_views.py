"""
Market and mall endpoints.

Reads are public and served through Django's per-view cache for
``MARKET_CACHE_SECONDS``; writes require a verified admin customer.
"""

from django.conf import settings
from django.utils.decorators import method_decorator
from django.views.decorators.cache import cache_page
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from authentication.models import CustomerRole
from authentication.permissions import CustomerAuthGuard
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    MarketNameSerializer,
    MarketSerializer,
    MarketUpdateSerializer,
    MarketWriteSerializer,
)
from utils.responses import service_response

AdminGuard = CustomerAuthGuard.authorise(strict=True, role=CustomerRole.ADMIN)

cache_markets = method_decorator(cache_page(settings.MARKET_CACHE_SECONDS, key_prefix="markets"))


class AdminWritesMixin:
    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [AdminGuard()]


class MarketNamesView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="market_names", responses={200: MarketNameSerializer(many=True)}, tags=["Markets"])
    @cache_markets
    def get(self, request):
        result = container.market_service().get_market_names()
        return service_response(result, lambda names: MarketNameSerializer(names, many=True).data)


class MarketListView(AdminWritesMixin, APIView):
    @extend_schema(
        operation_id="market_list",
        summary="All markets (malls excluded)",
        responses={200: MarketSerializer(many=True)},
        tags=["Markets"],
    )
    @cache_markets
    def get(self, request):
        result = container.market_service().get_all_markets()
        return service_response(result, lambda markets: MarketSerializer(markets, many=True).data)

    @extend_schema(
        operation_id="market_create",
        request=MarketWriteSerializer,
        responses={
            201: MarketSerializer,
            409: OpenApiResponse(description="Market name taken"),
        },
        tags=["Markets"],
    )
    def post(self, request):
        serializer = MarketWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        display_image = data.pop("display_image", None)
        result = container.market_service().create_market(data, display_image=display_image)
        return service_response(
            result, lambda market: MarketSerializer(market).data, success_status=status.HTTP_201_CREATED
        )

    @extend_schema(operation_id="market_delete_all", responses={200: None}, tags=["Markets"])
    def delete(self, request):
        result = container.market_service().delete_all_markets()
        return service_response(result, lambda deleted: {"deleted": deleted})


class MallListView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="mall_list", responses={200: MarketSerializer(many=True)}, tags=["Markets"])
    @cache_markets
    def get(self, request):
        result = container.market_service().get_all_malls()
        return service_response(result, lambda malls: MarketSerializer(malls, many=True).data)


class MarketDetailView(AdminWritesMixin, APIView):
    @extend_schema(operation_id="market_get", responses={200: MarketSerializer}, tags=["Markets"])
    @cache_markets
    def get(self, request, market_id):
        result = container.market_service().get_market(market_id)
        return service_response(result, lambda market: MarketSerializer(market).data)

    @extend_schema(
        operation_id="market_update", request=MarketUpdateSerializer, responses={200: MarketSerializer}, tags=["Markets"]
    )
    def put(self, request, market_id):
        serializer = MarketUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        display_image = data.pop("display_image", None)
        result = container.market_service().update_market(market_id, data, display_image=display_image)
        return service_response(result, lambda market: MarketSerializer(market).data)

    @extend_schema(operation_id="market_delete", responses={204: None}, tags=["Markets"])
    def delete(self, request, market_id):
        result = container.market_service().delete_market(market_id)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)
