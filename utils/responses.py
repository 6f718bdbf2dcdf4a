"""
Centralized translation of service outcomes into HTTP responses.

Views never pick status codes for failures themselves: a failed
``ServiceResult`` goes through ``service_response`` and an exception that
escapes a view goes through ``api_exception_handler``.
"""

import logging
from typing import Any, Callable, Optional

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .service_base import ErrorCategory, ServiceResult

logger = logging.getLogger(__name__)

CATEGORY_STATUS = {
    ErrorCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCategory.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.UPSTREAM: status.HTTP_502_BAD_GATEWAY,
    ErrorCategory.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


def error_response(result: ServiceResult) -> Response:
    """Build the error response for a failed ServiceResult."""
    category = result.category
    http_status = CATEGORY_STATUS[category]
    if category == ErrorCategory.INTERNAL:
        logger.error(f"Internal service error '{result.error}': {result.error_detail}")
        return Response({"error": result.error, "detail": GENERIC_ERROR_MESSAGE}, status=http_status)
    return Response({"error": result.error, "detail": result.error_detail}, status=http_status)


def service_response(
    result: ServiceResult,
    serialize: Optional[Callable[[Any], Any]] = None,
    success_status: int = status.HTTP_200_OK,
) -> Response:
    """
    Translate a ServiceResult into a DRF Response.

    Args:
        result: Outcome returned by a service method
        serialize: Optional callable turning the success value into JSON data
        success_status: Status to use on success

    Example:
        >>> result = container.cart_service().get_cart(request.user)
        >>> return service_response(result, lambda cart: CartSerializer(cart).data)
    """
    if not result.ok:
        return error_response(result)
    if success_status == status.HTTP_204_NO_CONTENT:
        return Response(status=success_status)
    data = serialize(result.value) if serialize is not None else result.value
    return Response(data, status=success_status)


def api_exception_handler(exc, context):
    """
    DRF exception handler.

    Known API exceptions (validation, authentication, permission, 404, ...)
    keep DRF's rendering. Anything else is logged with its traceback and
    answered with a generic 500 so internals never leak to clients.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"
    logger.error(f"Unhandled exception in {view_name}: {exc}", exc_info=exc)
    return Response({"detail": GENERIC_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
