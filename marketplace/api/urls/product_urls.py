from django.urls import path

from marketplace.catalog.api.views.product_views import (
    MarketProductsView,
    MerchantProductsView,
    ProductDetailView,
    ProductDisplayImageView,
    ProductImageDetailView,
    ProductImagesView,
    ProductListView,
)

urlpatterns = [
    path("", ProductListView.as_view(), name="product-list"),
    path("merchant/<uuid:merchant_id>/", MerchantProductsView.as_view(), name="products-by-merchant"),
    path("market/<uuid:market_id>/", MarketProductsView.as_view(), name="products-by-market"),
    path("<uuid:product_id>/", ProductDetailView.as_view(), name="product-detail"),
    path("<uuid:product_id>/images/", ProductImagesView.as_view(), name="product-images"),
    path("<uuid:product_id>/images/<int:image_id>/", ProductImageDetailView.as_view(), name="product-image-detail"),
    path(
        "<uuid:product_id>/images/<int:image_id>/display/",
        ProductDisplayImageView.as_view(),
        name="product-display-image",
    ),
]
