from .market_serializers import MarketNameSerializer, MarketSerializer, MarketUpdateSerializer, MarketWriteSerializer
from .product_serializers import (
    ProductImageSerializer,
    ProductListQuerySerializer,
    ProductSerializer,
    ProductSummarySerializer,
    ProductUpdateSerializer,
    ProductWriteSerializer,
)
from .rating_serializers import RatingSerializer, RatingSummarySerializer, RatingUpdateSerializer, RatingWriteSerializer

__all__ = [
    "MarketSerializer",
    "MarketNameSerializer",
    "MarketWriteSerializer",
    "MarketUpdateSerializer",
    "ProductSerializer",
    "ProductSummarySerializer",
    "ProductImageSerializer",
    "ProductWriteSerializer",
    "ProductUpdateSerializer",
    "ProductListQuerySerializer",
    "RatingSerializer",
    "RatingSummarySerializer",
    "RatingWriteSerializer",
    "RatingUpdateSerializer",
]
