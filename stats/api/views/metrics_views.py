"""
Prometheus Metrics Endpoint

Exposes every registered counter in the Prometheus text format. No
authentication: restrict access at the network level in production.
"""

from django.http import HttpResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest


def metrics(request):
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
