from unittest.mock import Mock

from rest_framework import status
from rest_framework.exceptions import NotFound

from utils.responses import GENERIC_ERROR_MESSAGE, api_exception_handler, service_response
from utils.service_base import ErrorCategory, ErrorCodes, service_err, service_ok


class TestErrorCategories:
    def test_every_code_has_one_category(self):
        assert ErrorCodes.category_of(ErrorCodes.PRODUCT_NOT_FOUND) == ErrorCategory.NOT_FOUND
        assert ErrorCodes.category_of(ErrorCodes.ALREADY_RATED) == ErrorCategory.CONFLICT
        assert ErrorCodes.category_of(ErrorCodes.INVALID_TOKEN) == ErrorCategory.UNAUTHORIZED
        assert ErrorCodes.category_of(ErrorCodes.NOT_PRODUCT_OWNER) == ErrorCategory.FORBIDDEN
        assert ErrorCodes.category_of(ErrorCodes.INSUFFICIENT_STOCK) == ErrorCategory.VALIDATION
        assert ErrorCodes.category_of(ErrorCodes.PAYMENT_PROVIDER_ERROR) == ErrorCategory.UPSTREAM

    def test_unknown_code_is_internal(self):
        assert ErrorCodes.category_of("made_up") == ErrorCategory.INTERNAL


class TestServiceResponse:
    def test_success_with_serializer(self):
        response = service_response(service_ok({"a": 1}), lambda value: {"wrapped": value})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"wrapped": {"a": 1}}

    def test_no_content_has_no_body(self):
        response = service_response(service_ok(None), success_status=status.HTTP_204_NO_CONTENT)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.data is None

    def test_error_statuses(self):
        cases = {
            ErrorCodes.MARKET_NOT_FOUND: 404,
            ErrorCodes.EMAIL_TAKEN: 409,
            ErrorCodes.INVALID_CREDENTIALS: 401,
            ErrorCodes.NOT_RESOURCE_OWNER: 403,
            ErrorCodes.INVALID_AD_LEVEL: 400,
            ErrorCodes.STORAGE_ERROR: 502,
        }
        for code, expected in cases.items():
            response = service_response(service_err(code, "detail"))

            assert response.status_code == expected
            assert response.data == {"error": code, "detail": "detail"}

    def test_internal_error_hides_detail(self):
        response = service_response(service_err(ErrorCodes.INTERNAL_ERROR, "db password is hunter2"))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data["detail"] == GENERIC_ERROR_MESSAGE


class TestExceptionHandler:
    def test_known_api_exceptions_keep_drf_rendering(self):
        response = api_exception_handler(NotFound("gone"), {"view": Mock()})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unexpected_exception_is_generic_500(self):
        response = api_exception_handler(RuntimeError("boom"), {"view": Mock()})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"detail": GENERIC_ERROR_MESSAGE}
