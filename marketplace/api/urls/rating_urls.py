from django.urls import path

from marketplace.catalog.api.views.rating_views import ProductRatingsView, RatingDetailView

urlpatterns = [
    path("<uuid:product_id>/", ProductRatingsView.as_view(), name="product-ratings"),
    path("<int:rating_id>/", RatingDetailView.as_view(), name="rating-detail"),
]
