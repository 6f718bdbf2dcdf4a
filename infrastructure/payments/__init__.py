"""Hosted-checkout payment gateways used to charge for paid ads."""

from .factory import PaymentFactory
from .interface import (
    PaymentException,
    PaymentInitialization,
    PaymentProviderInterface,
    PaymentStatus,
    PaymentVerification,
)
from .mock_provider import MockPaymentProvider
from .paystack_provider import PaystackProvider

__all__ = [
    "MockPaymentProvider",
    "PaymentException",
    "PaymentFactory",
    "PaymentInitialization",
    "PaymentProviderInterface",
    "PaymentStatus",
    "PaymentVerification",
    "PaystackProvider",
]
