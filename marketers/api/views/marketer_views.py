"""
Marketer (referral program) endpoints.

Any existing customer can apply to become a marketer. Admins verify
marketers, which makes their referrer code usable, and mark earnings as
paid out.
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from authentication.models import CustomerRole
from authentication.permissions import CustomerAuthGuard
from infrastructure.container import container
from marketers.api.serializers import (
    EarningsSummarySerializer,
    MarketerCreateSerializer,
    MarketerSerializer,
    MarketerUpdateSerializer,
    PayoutSerializer,
    ReferrerSerializer,
)
from utils.pagination import parse_page_params, serialize_page
from utils.responses import service_response

AdminGuard = CustomerAuthGuard.authorise(strict=True, role=CustomerRole.ADMIN)
VerifiedCustomer = CustomerAuthGuard.authorise(strict=True)


class MarketerListView(APIView):
    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [AdminGuard()]

    @extend_schema(
        operation_id="marketer_list",
        parameters=[OpenApiParameter("page", int), OpenApiParameter("pageSize", int)],
        tags=["Marketers"],
    )
    def get(self, request):
        page, page_size = parse_page_params(request.query_params)
        result = container.marketer_service().get_all_marketers(page, page_size)
        return service_response(result, lambda page_data: serialize_page(page_data, MarketerSerializer))

    @extend_schema(
        operation_id="marketer_create",
        summary="Register a customer as a marketer",
        description="Multipart body; `identity_image` is an optional identity credential scan.",
        request=MarketerCreateSerializer,
        responses={
            201: MarketerSerializer,
            404: OpenApiResponse(description="No customer with this email"),
            409: OpenApiResponse(description="Already a marketer or username taken"),
        },
        tags=["Marketers"],
    )
    def post(self, request):
        serializer = MarketerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        identity_image = data.pop("identity_image", None)
        result = container.marketer_service().create_marketer(data, identity_image=identity_image)
        return service_response(
            result, lambda marketer: MarketerSerializer(marketer).data, success_status=status.HTTP_201_CREATED
        )


class MarketerDetailView(APIView):
    def get_permissions(self):
        if self.request.method == "DELETE":
            return [AdminGuard()]
        return [VerifiedCustomer()]

    @extend_schema(operation_id="marketer_get", responses={200: MarketerSerializer}, tags=["Marketers"])
    def get(self, request, marketer_id):
        result = container.marketer_service().get_marketer(marketer_id)
        return service_response(result, lambda marketer: MarketerSerializer(marketer).data)

    @extend_schema(
        operation_id="marketer_update",
        description="Owner or admin. Multipart when replacing `identity_image`.",
        request=MarketerUpdateSerializer,
        responses={200: MarketerSerializer, 403: OpenApiResponse(description="Not your profile")},
        tags=["Marketers"],
    )
    def put(self, request, marketer_id):
        serializer = MarketerUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        identity_image = data.pop("identity_image", None)
        result = container.marketer_service().update_marketer(
            request.user, marketer_id, data, identity_image=identity_image
        )
        return service_response(result, lambda marketer: MarketerSerializer(marketer).data)

    @extend_schema(operation_id="marketer_delete", responses={204: None}, tags=["Marketers"])
    def delete(self, request, marketer_id):
        result = container.marketer_service().delete_marketer(marketer_id)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)


class MarketerVerifyView(APIView):
    permission_classes = [AdminGuard]

    @extend_schema(operation_id="marketer_verify", request=None, responses={200: MarketerSerializer}, tags=["Marketers"])
    def put(self, request, marketer_id):
        result = container.marketer_service().verify_marketer(marketer_id)
        return service_response(result, lambda marketer: MarketerSerializer(marketer).data)


class MarketerEarningsView(APIView):
    permission_classes = [VerifiedCustomer]

    @extend_schema(
        operation_id="marketer_earnings",
        summary="Earnings with totals (owner or admin)",
        responses={200: EarningsSummarySerializer},
        tags=["Marketers"],
    )
    def get(self, request, marketer_id):
        result = container.marketer_service().get_earnings(request.user, marketer_id)
        return service_response(result, lambda summary: EarningsSummarySerializer(summary).data)


class MarketerPayoutView(APIView):
    permission_classes = [AdminGuard]

    @extend_schema(
        operation_id="marketer_earnings_pay",
        summary="Mark every unpaid earning as paid",
        request=None,
        responses={200: PayoutSerializer},
        tags=["Marketers"],
    )
    def put(self, request, marketer_id):
        result = container.marketer_service().mark_earnings_paid(marketer_id)
        return service_response(result, lambda payout: PayoutSerializer(payout).data)


class ReferrerLookupView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="marketer_by_referrer_code",
        summary="Look up a referrer code",
        responses={200: ReferrerSerializer, 404: OpenApiResponse(description="Unknown code")},
        tags=["Marketers"],
    )
    def get(self, request, code):
        result = container.marketer_service().get_by_referrer_code(code)
        return service_response(result, lambda marketer: ReferrerSerializer(marketer).data)
