from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.views import APIView

from authentication.permissions import CustomerAuthGuard
from infrastructure.container import container
from marketplace.cart.api.serializers import CartItemSerializer, CartSerializer, UpdateCartSerializer
from utils.responses import service_response


class CartView(APIView):
    """
    ``GET <customer_id>/`` reads the owner's cart; ``PUT`` and ``DELETE
    <product_id>/`` change one line of the caller's cart.
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [CustomerAuthGuard.authorise(owner_kwarg="resource_id")()]
        return [CustomerAuthGuard.authorise()()]

    @extend_schema(operation_id="cart_get", responses={200: CartSerializer}, tags=["Cart"])
    def get(self, request, resource_id):
        result = container.cart_service().get_cart(request.user)
        return service_response(result, lambda cart: CartSerializer(cart).data)

    @extend_schema(
        operation_id="cart_update",
        summary="Set the quantity of a product in the cart",
        request=UpdateCartSerializer,
        responses={
            200: CartItemSerializer,
            204: OpenApiResponse(description="Quantity 0 removed the line"),
            400: OpenApiResponse(description="Negative quantity or insufficient stock"),
            404: OpenApiResponse(description="Product not found"),
        },
        tags=["Cart"],
    )
    def put(self, request, resource_id):
        serializer = UpdateCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = container.cart_service().update_cart(request.user, resource_id, serializer.validated_data["quantity"])
        if result.ok and result.value is None:
            return service_response(result, success_status=status.HTTP_204_NO_CONTENT)
        return service_response(result, lambda item: CartItemSerializer(item).data)

    @extend_schema(operation_id="cart_remove_item", responses={204: None}, tags=["Cart"])
    def delete(self, request, resource_id):
        result = container.cart_service().remove_one(request.user, resource_id)
        return service_response(result, success_status=status.HTTP_204_NO_CONTENT)


class ClearCartView(APIView):
    permission_classes = [CustomerAuthGuard.authorise()]

    @extend_schema(operation_id="cart_clear", responses={200: None}, tags=["Cart"])
    def delete(self, request):
        result = container.cart_service().remove_all(request.user)
        return service_response(result, lambda removed: {"removed": removed})
