"""
Marketplace Service Layer

Services:
- MarketService: Markets and malls
- ProductService: Product catalog CRUD and images
- RatingService: Product ratings and reviews
- CartService: Customer cart operations

Usage:
    from infrastructure.container import container

    result = container.product_service().list_products(page=1)
    if result.ok:
        page = result.value
"""

from marketplace.cart.domain.services import CartService
from marketplace.catalog.domain.services import MarketService, ProductService, RatingService

__all__ = [
    "MarketService",
    "ProductService",
    "RatingService",
    "CartService",
]
