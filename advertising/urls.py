from django.urls import path

from advertising.api.views.ad_views import (
    AdClickView,
    AdDetailView,
    AdListView,
    AdViewView,
    FreeAdView,
    InitializeAdPaymentView,
    ProductAdView,
    VerifyAdPaymentView,
)

urlpatterns = [
    path("", AdListView.as_view(), name="ad-list"),
    path("all/", AdListView.as_view(active_only=False), name="ad-list-all"),
    path("free/<uuid:product_id>/", FreeAdView.as_view(), name="ad-free"),
    path("initialize/<int:level>/<uuid:product_id>/", InitializeAdPaymentView.as_view(), name="ad-initialize"),
    path("verify/<str:reference>/", VerifyAdPaymentView.as_view(), name="ad-verify"),
    path("product/<uuid:product_id>/", ProductAdView.as_view(), name="ad-by-product"),
    path("<uuid:ad_id>/", AdDetailView.as_view(), name="ad-detail"),
    path("<uuid:ad_id>/click/", AdClickView.as_view(), name="ad-click"),
    path("<uuid:ad_id>/view/", AdViewView.as_view(), name="ad-view"),
]
