from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.views import APIView

from authentication.api.serializers import CustomerSerializer, CustomerUpdateSerializer, MerchantSerializer
from authentication.api.serializers.response_serializers import ErrorResponseSerializer
from authentication.permissions import CustomerAuthGuard
from infrastructure.container import container
from marketers.api.serializers import MarketerEarningSerializer, MarketerSerializer
from utils.responses import service_response


class CustomerProfileView(APIView):
    """The signed-in customer's own profile."""

    permission_classes = [CustomerAuthGuard.authorise(owner_kwarg="customer_id")]

    @extend_schema(
        operation_id="customer_profile_get",
        responses={200: CustomerSerializer, 403: ErrorResponseSerializer},
        tags=["Customers"],
    )
    def get(self, request, customer_id):
        result = container.customer_service().get_customer(customer_id)
        return service_response(result, lambda customer: CustomerSerializer(customer).data)

    @extend_schema(
        operation_id="customer_profile_update",
        summary="Update profile",
        description="`addresses` and `phone_numbers` (at most two) replace the stored ones when present.",
        request=CustomerUpdateSerializer,
        responses={
            200: CustomerSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email already in use"),
        },
        tags=["Customers"],
    )
    def put(self, request, customer_id):
        serializer = CustomerUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.customer_service().update_customer(request.user, serializer.validated_data)
        return service_response(result, lambda customer: CustomerSerializer(customer).data)

    @extend_schema(operation_id="customer_profile_delete", responses={204: None}, tags=["Customers"])
    def delete(self, request, customer_id):
        result = container.customer_service().delete_customer(request.user)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)


class CustomerMarketerView(APIView):
    permission_classes = [CustomerAuthGuard.authorise()]

    @extend_schema(
        operation_id="customer_marketer_profile",
        summary="Marketer profile of the signed-in customer",
        responses={200: MarketerSerializer, 404: ErrorResponseSerializer},
        tags=["Customers"],
    )
    def get(self, request):
        result = container.customer_service().get_marketer_profile(request.user)
        return service_response(
            result,
            lambda profile: {
                "marketer": MarketerSerializer(profile["marketer"]).data,
                "email": profile["email"],
                "total_earnings": profile["total_earnings"],
            },
        )


class CustomerReferralsView(APIView):
    permission_classes = [CustomerAuthGuard.authorise()]

    @extend_schema(
        operation_id="customer_referrals",
        summary="Merchants referred by the signed-in marketer",
        responses={404: ErrorResponseSerializer},
        tags=["Customers"],
    )
    def get(self, request):
        result = container.customer_service().get_referrals(request.user)
        return service_response(
            result,
            lambda referrals: [
                {
                    "merchant": MerchantSerializer(entry["merchant"]).data,
                    "earnings": MarketerEarningSerializer(entry["earnings"], many=True).data,
                }
                for entry in referrals
            ],
        )
