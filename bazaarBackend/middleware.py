"""Custom middleware helpers for the Bazaar backend."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class JWTCSRFBypassMiddleware:
    """Skip CSRF enforcement for stateless JWT authenticated requests.

    The API authenticates with ``Authorization: Bearer`` headers only, so a
    request carrying one is exempt from ``CsrfViewMiddleware``. Session-based
    requests (the Django admin) are still checked.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        authorization = request.META.get("HTTP_AUTHORIZATION", "")
        if authorization.lower().startswith("bearer "):
            request._dont_enforce_csrf_checks = True  # type: ignore[attr-defined]
            request.META.setdefault("CSRF_SKIP_REASON", "jwt-bearer")
        return self.get_response(request)


class RequestLoggingMiddleware:
    """Log method, path, status and latency of every API request."""

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        start = time.perf_counter()
        response = self.get_response(request)
        if request.path.startswith("/api/"):
            elapsed_ms = (time.perf_counter() - start) * 1000
            log = logger.warning if response.status_code >= 500 else logger.info
            log(f"{request.method} {request.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response
