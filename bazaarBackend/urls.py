"""
URL configuration for bazaarBackend project.

Every API route is versioned under ``/api/v1/``.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

api_v1_patterns = [
    # API Documentation
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # Operational endpoints
    path("", include("stats.ops_urls")),
    # API endpoints
    path("auth/", include("authentication.api.urls.auth_urls")),
    path("customers/", include("authentication.api.urls.customer_urls")),
    path("customers/cart/", include("marketplace.api.urls.cart_urls")),
    path("customers/rating/", include("marketplace.api.urls.rating_urls")),
    path("merchants/", include("authentication.api.urls.merchant_urls")),
    path("markets/", include("marketplace.api.urls.market_urls")),
    path("products/", include("marketplace.api.urls.product_urls")),
    path("ads/", include("advertising.urls")),
    path("marketers/", include("marketers.urls")),
    path("stats/", include("stats.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include(api_v1_patterns)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
