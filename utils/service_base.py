"""
Base classes and utilities for the service layer.

Services return a ``ServiceResult`` for expected outcomes instead of raising,
and every error code belongs to exactly one ``ErrorCategory``. Views hand the
result to ``utils.responses.service_response`` which owns the mapping from
category to HTTP status.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCategory(str, Enum):
    """Client-visible failure categories."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation_failed"
    UPSTREAM = "upstream_failure"
    INTERNAL = "internal"


@dataclass
class ServiceResult(Generic[T]):
    """
    Encapsulates success or failure of a service operation.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(product)
        >>> result.ok
        True
        >>> result = service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product 123 does not exist")
        >>> result.category
        <ErrorCategory.NOT_FOUND: 'not_found'>
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None

    @property
    def category(self) -> Optional[ErrorCategory]:
        if self.ok:
            return None
        return ErrorCodes.category_of(self.error)


def service_ok(value: T = None) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Example:
        >>> return service_ok(product)
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code from ``ErrorCodes``
        error_detail: Human-readable error message

    Example:
        >>> return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {id} does not exist")
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class CartService(BaseService):
            def __init__(self, storage):
                super().__init__()
                self.storage = storage

            @BaseService.log_performance
            def get_cart(self, customer):
                self.logger.info(f"Loading cart for {customer.id}")
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and outcome, and re-raises unexpected exceptions
        after logging them.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Standard error codes used across services."""

    # Not found
    CUSTOMER_NOT_FOUND = "customer_not_found"
    MERCHANT_NOT_FOUND = "merchant_not_found"
    MARKET_NOT_FOUND = "market_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    IMAGE_NOT_FOUND = "image_not_found"
    ITEM_NOT_IN_CART = "item_not_in_cart"
    RATING_NOT_FOUND = "rating_not_found"
    AD_NOT_FOUND = "ad_not_found"
    TRANSACTION_NOT_FOUND = "transaction_not_found"
    MARKETER_NOT_FOUND = "marketer_not_found"
    REFERRER_NOT_FOUND = "referrer_not_found"

    # Conflict
    EMAIL_TAKEN = "email_taken"
    BRAND_NAME_TAKEN = "brand_name_taken"
    MARKET_NAME_TAKEN = "market_name_taken"
    USERNAME_TAKEN = "username_taken"
    ALREADY_RATED = "already_rated"
    AD_ALREADY_ACTIVE = "ad_already_active"
    ALREADY_REFERRED = "already_referred"
    ALREADY_MARKETER = "already_marketer"

    # Unauthorized
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"

    # Forbidden
    PERMISSION_DENIED = "permission_denied"
    NOT_PRODUCT_OWNER = "not_product_owner"
    NOT_RESOURCE_OWNER = "not_resource_owner"

    # Validation
    VALIDATION_ERROR = "validation_error"
    INVALID_QUANTITY = "invalid_quantity"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INVALID_AD_LEVEL = "invalid_ad_level"
    INVALID_VERIFICATION_CODE = "invalid_verification_code"
    TOO_MANY_IMAGES = "too_many_images"
    INVALID_UPLOAD = "invalid_upload"
    MARKETER_NOT_VERIFIED = "marketer_not_verified"

    # Upstream
    PAYMENT_PROVIDER_ERROR = "payment_provider_error"
    STORAGE_ERROR = "storage_error"
    IDENTITY_PROVIDER_ERROR = "identity_provider_error"

    # Internal
    INTERNAL_ERROR = "internal_error"

    _CATEGORIES = {
        ErrorCategory.NOT_FOUND: (
            CUSTOMER_NOT_FOUND,
            MERCHANT_NOT_FOUND,
            MARKET_NOT_FOUND,
            PRODUCT_NOT_FOUND,
            IMAGE_NOT_FOUND,
            ITEM_NOT_IN_CART,
            RATING_NOT_FOUND,
            AD_NOT_FOUND,
            TRANSACTION_NOT_FOUND,
            MARKETER_NOT_FOUND,
            REFERRER_NOT_FOUND,
        ),
        ErrorCategory.CONFLICT: (
            EMAIL_TAKEN,
            BRAND_NAME_TAKEN,
            MARKET_NAME_TAKEN,
            USERNAME_TAKEN,
            ALREADY_RATED,
            AD_ALREADY_ACTIVE,
            ALREADY_REFERRED,
            ALREADY_MARKETER,
        ),
        ErrorCategory.UNAUTHORIZED: (INVALID_CREDENTIALS, INVALID_TOKEN),
        ErrorCategory.FORBIDDEN: (PERMISSION_DENIED, NOT_PRODUCT_OWNER, NOT_RESOURCE_OWNER),
        ErrorCategory.VALIDATION: (
            VALIDATION_ERROR,
            INVALID_QUANTITY,
            INSUFFICIENT_STOCK,
            INVALID_AD_LEVEL,
            INVALID_VERIFICATION_CODE,
            TOO_MANY_IMAGES,
            INVALID_UPLOAD,
            MARKETER_NOT_VERIFIED,
        ),
        ErrorCategory.UPSTREAM: (PAYMENT_PROVIDER_ERROR, STORAGE_ERROR, IDENTITY_PROVIDER_ERROR),
    }

    @classmethod
    def category_of(cls, code: Optional[str]) -> ErrorCategory:
        for category, codes in cls._CATEGORIES.items():
            if code in codes:
                return category
        return ErrorCategory.INTERNAL
