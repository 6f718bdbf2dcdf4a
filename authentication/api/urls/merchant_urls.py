from django.urls import path

from authentication.api.views.merchant_views import ConnectReferrerView, MarketMerchantsView, MerchantDetailView

urlpatterns = [
    path("market/<uuid:market_id>/", MarketMerchantsView.as_view(), name="merchants-by-market"),
    path("<uuid:merchant_id>/", MerchantDetailView.as_view(), name="merchant-detail"),
    path("<uuid:merchant_id>/referrer/", ConnectReferrerView.as_view(), name="merchant-referrer"),
]
