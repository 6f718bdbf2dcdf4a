"""Builds the payment gateway client named in ``settings.INFRASTRUCTURE``."""

import logging
from typing import Literal

from django.conf import settings

from .interface import PaymentProviderInterface
from .mock_provider import MockPaymentProvider
from .paystack_provider import PaystackProvider

logger = logging.getLogger(__name__)

PaymentBackend = Literal["paystack", "mock"]

_PROVIDERS = {
    "paystack": PaystackProvider,
    "mock": MockPaymentProvider,
}


class PaymentFactory:
    """Picks the gateway that paid ads are checked out through.

    ``INFRASTRUCTURE["PAYMENT_PROVIDER"]`` decides unless a backend is passed
    explicitly. Paystack is the only live gateway.
    """

    @staticmethod
    def create(backend: PaymentBackend | None = None) -> PaymentProviderInterface:
        name = backend or getattr(settings, "INFRASTRUCTURE", {}).get("PAYMENT_PROVIDER", "paystack")
        provider_class = _PROVIDERS.get(name)
        if provider_class is None:
            raise ValueError(f"Unknown payment provider {name!r}; expected one of {sorted(_PROVIDERS)}")

        logger.info(f"Payment provider selected: {name}")
        return provider_class()
