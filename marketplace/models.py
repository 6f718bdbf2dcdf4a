from marketplace.cart.domain.models import CartProduct
from marketplace.catalog.domain.models import Market, Product, ProductCategory, ProductImage, Rating

__all__ = [
    "Market",
    "Product",
    "ProductCategory",
    "ProductImage",
    "Rating",
    "CartProduct",
]
