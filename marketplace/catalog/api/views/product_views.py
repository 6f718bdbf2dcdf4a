from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView

from authentication.permissions import MerchantAuthGuard
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    ProductListQuerySerializer,
    ProductSerializer,
    ProductUpdateSerializer,
    ProductWriteSerializer,
)
from utils.pagination import parse_page_params, serialize_page
from utils.responses import service_response

PAGE_PARAMETERS = [
    OpenApiParameter("page", int, description="Page number, starting at 1"),
    OpenApiParameter("pageSize", int, description="Items per page (capped)"),
]


def uploaded_images(request):
    images = request.FILES.getlist("images")
    if not images and request.FILES.get("image"):
        images = [request.FILES["image"]]
    return images


def product_page(page):
    return serialize_page(page, ProductSerializer)


class MerchantWritesMixin:
    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [MerchantAuthGuard.authorise()()]


class ProductListView(MerchantWritesMixin, APIView):
    @extend_schema(
        operation_id="product_list",
        summary="Browse products",
        parameters=PAGE_PARAMETERS
        + [
            OpenApiParameter("category", str, description="Product category"),
            OpenApiParameter("state", str, description="Merchant address state"),
        ],
        tags=["Products"],
    )
    def get(self, request):
        filters = ProductListQuerySerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        page, page_size = parse_page_params(request.query_params)
        result = container.product_service().list_products(page, page_size, **filters.validated_data)
        return service_response(result, product_page)

    @extend_schema(
        operation_id="product_create",
        description="Multipart body with product fields and up to `PRODUCT_MAX_IMAGES` files under `images`.",
        request=ProductWriteSerializer,
        responses={201: ProductSerializer, 400: OpenApiResponse(description="Invalid data or images")},
        tags=["Products"],
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.product_service().create_product(
            request.user, serializer.validated_data, uploaded_images(request)
        )
        return service_response(
            result, lambda product: ProductSerializer(product).data, success_status=status.HTTP_201_CREATED
        )


class ProductDetailView(MerchantWritesMixin, APIView):
    @extend_schema(operation_id="product_get", responses={200: ProductSerializer}, tags=["Products"])
    def get(self, request, product_id):
        result = container.product_service().get_product(product_id)
        return service_response(result, lambda product: ProductSerializer(product).data)

    @extend_schema(
        operation_id="product_update",
        description="A new `price` moves the old one into `prev_price` unless `prev_price` is sent too.",
        request=ProductUpdateSerializer,
        responses={200: ProductSerializer, 403: OpenApiResponse(description="Not the owner")},
        tags=["Products"],
    )
    def put(self, request, product_id):
        serializer = ProductUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        result = container.product_service().update_product(request.user, product_id, serializer.validated_data)
        return service_response(result, lambda product: ProductSerializer(product).data)

    @extend_schema(operation_id="product_delete", responses={204: None}, tags=["Products"])
    def delete(self, request, product_id):
        result = container.product_service().delete_product(request.user, product_id)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)


class MerchantProductsView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="products_by_merchant", parameters=PAGE_PARAMETERS, tags=["Products"])
    def get(self, request, merchant_id):
        page, page_size = parse_page_params(request.query_params)
        result = container.product_service().get_by_merchant(merchant_id, page, page_size)
        return service_response(result, product_page)


class MarketProductsView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="products_by_market", parameters=PAGE_PARAMETERS, tags=["Products"])
    def get(self, request, market_id):
        page, page_size = parse_page_params(request.query_params)
        result = container.product_service().get_by_market(market_id, page, page_size)
        return service_response(result, product_page)


class ProductImagesView(APIView):
    permission_classes = [MerchantAuthGuard.authorise()]

    @extend_schema(
        operation_id="product_add_images",
        description="Multipart body with files under `images`.",
        request=None,
        responses={200: ProductSerializer},
        tags=["Products"],
    )
    def post(self, request, product_id):
        images = uploaded_images(request)
        if not images:
            raise ValidationError({"images": ["Upload at least one image."]})
        result = container.product_service().add_images(request.user, product_id, images)
        return service_response(result, lambda product: ProductSerializer(product).data)


class ProductImageDetailView(APIView):
    permission_classes = [MerchantAuthGuard.authorise()]

    @extend_schema(operation_id="product_remove_image", responses={200: ProductSerializer}, tags=["Products"])
    def delete(self, request, product_id, image_id):
        result = container.product_service().remove_image(request.user, product_id, image_id)
        return service_response(result, lambda product: ProductSerializer(product).data)


class ProductDisplayImageView(APIView):
    permission_classes = [MerchantAuthGuard.authorise()]

    @extend_schema(
        operation_id="product_set_display_image", request=None, responses={200: ProductSerializer}, tags=["Products"]
    )
    def put(self, request, product_id, image_id):
        result = container.product_service().make_display_image(request.user, product_id, image_id)
        return service_response(result, lambda product: ProductSerializer(product).data)
