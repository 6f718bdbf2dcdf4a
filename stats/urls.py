from django.urls import path

from stats.api.views.stats_views import StatsView

urlpatterns = [
    path("platform/", StatsView.as_view(stat="platform_stats"), name="stats-platform"),
    path("revenue/", StatsView.as_view(stat="revenue_stats"), name="stats-revenue"),
    path("all/", StatsView.as_view(stat="all_stats"), name="stats-all"),
    path("products/count/", StatsView.as_view(stat="total_products", result_key="total"), name="stats-products"),
    path("ads/count/", StatsView.as_view(stat="total_ads", result_key="total"), name="stats-ads"),
]
