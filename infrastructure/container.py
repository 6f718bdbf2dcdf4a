"""
Dependency Injection Container
================================

Service locator for infrastructure providers and domain services. Providers
are built through their factories from ``settings.INFRASTRUCTURE``; domain
services receive their collaborators as constructor arguments.

Usage:
    from infrastructure.container import container

    result = container.product_service().get_product(product_id)
"""

import logging
from typing import Callable, Dict, Optional

from .email import EmailFactory, EmailServiceInterface
from .payments import PaymentFactory, PaymentProviderInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Lazily creates and caches one instance of each provider and service.

    Singleton: every ``ServiceContainer()`` call returns the same object.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._storage: Optional[StorageInterface] = None
            self._email: Optional[EmailServiceInterface] = None
            self._payment: Optional[PaymentProviderInterface] = None
            self._services: Dict[str, object] = {}

            self._initialized = True
            logger.info("Service container initialized")

    # Infrastructure

    def storage(self) -> StorageInterface:
        if self._storage is None:
            self._storage = StorageFactory.create()
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def email(self, backend: Optional[str] = None) -> EmailServiceInterface:
        """
        Get email service instance.

        Args:
            backend: 'smtp' or 'mock'. Passing one replaces the cached
                     instance; None uses configuration from settings.
        """
        if self._email is None or backend is not None:
            self._email = EmailFactory.create(backend)
            logger.debug(f"Created email service: {type(self._email).__name__}")
        return self._email

    def payment(self, backend: Optional[str] = None) -> PaymentProviderInterface:
        """
        Get payment provider instance.

        Args:
            backend: 'paystack' or 'mock'. Passing one replaces the cached
                     instance; None uses configuration from settings.
        """
        if self._payment is None or backend is not None:
            if self._payment is not None:
                self._payment.close()
            self._payment = PaymentFactory.create(backend)
            # Services holding the old provider must be rebuilt.
            self._services.pop("ad", None)
            logger.debug(f"Created payment service: {type(self._payment).__name__}")
        return self._payment

    def google_provider(self):
        def build():
            from authentication.infra.auth_providers import GoogleAuthProvider

            return GoogleAuthProvider()

        return self._service("google", build)

    # Domain services

    def customer_auth_service(self):
        def build():
            from authentication.domain.services import CustomerAuthService

            return CustomerAuthService(email_service=self.email(), google_provider=self.google_provider())

        return self._service("customer_auth", build)

    def merchant_auth_service(self):
        def build():
            from authentication.domain.services import MerchantAuthService

            return MerchantAuthService(
                email_service=self.email(),
                storage=self.storage(),
                merchant_service=self.merchant_service(),
                google_provider=self.google_provider(),
            )

        return self._service("merchant_auth", build)

    def customer_service(self):
        def build():
            from authentication.domain.services import CustomerService

            return CustomerService()

        return self._service("customer", build)

    def merchant_service(self):
        def build():
            from authentication.domain.services import MerchantService

            return MerchantService(storage=self.storage())

        return self._service("merchant", build)

    def market_service(self):
        def build():
            from marketplace.services import MarketService

            return MarketService(storage=self.storage())

        return self._service("market", build)

    def product_service(self):
        def build():
            from marketplace.services import ProductService

            return ProductService(storage=self.storage())

        return self._service("product", build)

    def rating_service(self):
        def build():
            from marketplace.services import RatingService

            return RatingService()

        return self._service("rating", build)

    def cart_service(self):
        def build():
            from marketplace.services import CartService

            return CartService()

        return self._service("cart", build)

    def marketer_service(self):
        def build():
            from marketers.domain.services import MarketerService

            return MarketerService(storage=self.storage())

        return self._service("marketer", build)

    def ad_service(self):
        def build():
            from advertising.domain.services import AdService

            # MarketerService credits referral earnings for settled ads.
            return AdService(payment_provider=self.payment(), earnings_recorder=self.marketer_service())

        return self._service("ad", build)

    def stats_service(self):
        def build():
            from stats.domain.services import StatsService

            return StatsService()

        return self._service("stats", build)

    def reset(self):
        """
        Close the payment provider's HTTP session and drop every cached instance.

        Used by tests and when switching between environments.
        """
        if self._payment is not None:
            self._payment.close()
        self._storage = None
        self._email = None
        self._payment = None
        self._services = {}
        logger.info("Service container reset")

    def configure_for_testing(self):
        """Use local storage, the mock email service and the mock payment gateway."""
        self.reset()
        self._storage = StorageFactory.create("local")
        self._email = EmailFactory.create("mock")
        self._payment = PaymentFactory.create("mock")
        logger.info("Service container configured for testing")

    def _service(self, name: str, build: Callable[[], object]):
        if name not in self._services:
            self._services[name] = build()
            logger.debug(f"Created {type(self._services[name]).__name__}")
        return self._services[name]


# Global singleton instance
container = ServiceContainer()


def get_storage() -> StorageInterface:
    return container.storage()


def get_email() -> EmailServiceInterface:
    return container.email()


def get_payment() -> PaymentProviderInterface:
    return container.payment()
