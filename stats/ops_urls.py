from django.urls import path

from stats.api.views.health_views import health_live, health_ready
from stats.api.views.metrics_views import metrics

urlpatterns = [
    path("health/live/", health_live, name="health-live"),
    path("health/ready/", health_ready, name="health-ready"),
    path("metrics/", metrics, name="prometheus-metrics"),
]
