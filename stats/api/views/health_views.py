"""
Health Check Endpoints

Liveness and readiness probes for the load balancer or orchestrator.
"""

import logging

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_live(request):
    """
    Liveness probe: is the process alive?

    Always 200 while Django can answer at all.
    """
    return JsonResponse({"status": "ok"}, status=200)


def health_ready(request):
    """
    Readiness probe: can the service handle requests?

    Checks the database and the cache. Returns 200 when both respond,
    otherwise 503 with the failing check set to false.
    """
    checks = {"database": check_database(), "cache": check_cache()}

    all_ok = all(checks.values())
    status_code = 200 if all_ok else 503

    return JsonResponse({"status": "ready" if all_ok else "not_ready", "checks": checks}, status=status_code)


def check_database():
    try:
        connection.ensure_connection()
        return True
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        return False


def check_cache():
    # Redis errors surface as backend specific exceptions.
    try:
        cache.set("health_check", "ok", timeout=1)
        return cache.get("health_check") == "ok"
    except Exception as e:
        logger.error(f"Cache health check failed: {e}")
        return False
