from .cart_serializers import CartItemSerializer, CartSerializer, UpdateCartSerializer

__all__ = ["CartItemSerializer", "CartSerializer", "UpdateCartSerializer"]
