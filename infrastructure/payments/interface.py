"""
Payment Provider Interface
===========================

Abstract base class defining the contract for hosted-checkout payment
gateways: a transaction is initialized (the customer is redirected to the
gateway's ``authorization_url``) and later verified by its reference.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional


class PaymentStatus(str, Enum):
    """Transaction status as reported by the gateway."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    ABANDONED = "abandoned"

    @classmethod
    def from_gateway(cls, value: Optional[str]) -> "PaymentStatus":
        """Normalize a gateway status string; unknown values count as pending."""
        normalized = (value or "").strip().lower()
        if normalized == "success":
            return cls.SUCCESS
        if normalized in ("failed", "reversed"):
            return cls.FAILED
        if normalized == "abandoned":
            return cls.ABANDONED
        return cls.PENDING


@dataclass(frozen=True)
class PaymentInitialization:
    """
    Response required to kick off a hosted checkout.

    Attributes:
        authorization_url: URL the customer is redirected to
        access_code: Gateway access code for inline checkout
        reference: Unique transaction reference
    """

    authorization_url: str
    access_code: str
    reference: str


@dataclass(frozen=True)
class PaymentVerification:
    """
    Structured result of a verification call.

    Attributes:
        reference: Transaction reference
        status: Normalized transaction status
        amount: Amount paid in major currency units
        currency: ISO currency code
        paid_at: Gateway settlement timestamp (ISO string), if any
        raw: Raw gateway payload for auditing
    """

    reference: str
    status: PaymentStatus
    amount: Decimal
    currency: str
    paid_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == PaymentStatus.SUCCESS


class PaymentProviderInterface(ABC):
    """
    Abstract interface for payment provider operations.

    Concrete implementations:
        - PaystackProvider: Paystack REST API
        - MockPaymentProvider: In-memory gateway for tests and local development
    """

    @abstractmethod
    def initialize_transaction(
        self,
        email: str,
        amount: Decimal,
        currency: str,
        reference: Optional[str] = None,
        callback_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PaymentInitialization:
        """
        Initialize a transaction with the gateway.

        Args:
            email: Payer email address
            amount: Amount in major currency units (converted by the provider)
            currency: ISO currency code
            reference: Optional caller-generated reference
            callback_url: Where the gateway redirects after checkout
            metadata: Custom data attached to the transaction

        Returns:
            PaymentInitialization with the checkout URL and reference

        Raises:
            PaymentException: If the gateway rejects or cannot be reached
        """
        pass

    @abstractmethod
    def verify_transaction(self, reference: str) -> PaymentVerification:
        """
        Fetch the current state of a transaction.

        Args:
            reference: Transaction reference returned at initialization

        Returns:
            PaymentVerification

        Raises:
            PaymentException: If the gateway rejects or cannot be reached
        """
        pass

    def close(self) -> None:
        """Release any held connections. Default is a no-op."""
        return None


class PaymentException(Exception):
    """Base exception for payment operations."""

    pass
