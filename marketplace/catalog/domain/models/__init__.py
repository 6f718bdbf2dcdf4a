from .catalog import Product, ProductCategory, ProductImage
from .interaction import Rating
from .market import Market

__all__ = [
    "Market",
    "Product",
    "ProductCategory",
    "ProductImage",
    "Rating",
]
