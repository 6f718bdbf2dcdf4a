from django.urls import path

from marketplace.catalog.api.views.market_views import MallListView, MarketDetailView, MarketListView, MarketNamesView

urlpatterns = [
    path("", MarketListView.as_view(), name="market-list"),
    path("names/", MarketNamesView.as_view(), name="market-names"),
    path("malls/", MallListView.as_view(), name="mall-list"),
    path("<uuid:market_id>/", MarketDetailView.as_view(), name="market-detail"),
]
