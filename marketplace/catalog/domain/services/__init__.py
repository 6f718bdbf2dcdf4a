from .market_service import MarketService
from .product_service import ProductService
from .rating_service import RatingService

__all__ = ["MarketService", "ProductService", "RatingService"]
