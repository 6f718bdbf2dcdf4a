from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.views import APIView

from authentication.permissions import CustomerAuthGuard
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    RatingSerializer,
    RatingSummarySerializer,
    RatingUpdateSerializer,
    RatingWriteSerializer,
)
from utils.responses import service_response


class ProductRatingsView(APIView):
    permission_classes = [CustomerAuthGuard.authorise()]

    @extend_schema(operation_id="ratings_list", responses={200: RatingSummarySerializer}, tags=["Ratings"])
    def get(self, request, product_id):
        result = container.rating_service().get_ratings(product_id)
        return service_response(result, lambda summary: RatingSummarySerializer(summary).data)

    @extend_schema(
        operation_id="rating_create",
        request=RatingWriteSerializer,
        responses={201: RatingSerializer, 409: OpenApiResponse(description="Already rated")},
        tags=["Ratings"],
    )
    def post(self, request, product_id):
        serializer = RatingWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.rating_service().create_rating(request.user, product_id, serializer.validated_data)
        return service_response(
            result, lambda rating: RatingSerializer(rating).data, success_status=status.HTTP_201_CREATED
        )


class RatingDetailView(APIView):
    permission_classes = [CustomerAuthGuard.authorise()]

    @extend_schema(
        operation_id="rating_update", request=RatingUpdateSerializer, responses={200: RatingSerializer}, tags=["Ratings"]
    )
    def put(self, request, rating_id):
        serializer = RatingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.rating_service().update_rating(request.user, rating_id, serializer.validated_data)
        return service_response(result, lambda rating: RatingSerializer(rating).data)

    @extend_schema(operation_id="rating_delete", responses={204: None}, tags=["Ratings"])
    def delete(self, request, rating_id):
        result = container.rating_service().delete_rating(request.user, rating_id)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)
