from .cart import CartProduct

__all__ = ["CartProduct"]
