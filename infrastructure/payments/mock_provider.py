"""
Mock Payment Provider
======================

In-memory implementation of PaymentProviderInterface for tests and local
development. Transactions are stored on the instance; their verification
outcome can be forced with ``set_outcome``.
"""

import logging
import uuid
from decimal import Decimal
from typing import Any, Dict, Optional

from .interface import (
    PaymentException,
    PaymentInitialization,
    PaymentProviderInterface,
    PaymentStatus,
    PaymentVerification,
)

logger = logging.getLogger(__name__)


class MockPaymentProvider(PaymentProviderInterface):
    """
    Mock gateway.

    By default every initialized transaction verifies as successful for its
    full amount. Tests can override the status or amount per reference, or
    make the next call fail with ``fail_next``.
    """

    checkout_base_url = "https://checkout.mock-gateway.local"

    def __init__(self):
        self.transactions: Dict[str, Dict[str, Any]] = {}
        self.verify_calls: list = []
        self._fail_next: Optional[str] = None

    def initialize_transaction(
        self,
        email: str,
        amount: Decimal,
        currency: str,
        reference: Optional[str] = None,
        callback_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PaymentInitialization:
        self._raise_if_failing()
        reference = reference or f"mock_{uuid.uuid4().hex}"
        access_code = uuid.uuid4().hex[:12]
        self.transactions[reference] = {
            "email": email,
            "amount": Decimal(amount),
            "currency": currency,
            "status": PaymentStatus.SUCCESS,
            "metadata": metadata or {},
        }
        logger.info(f"[MOCK PAYMENT] Initialized {reference} for {amount} {currency}")
        return PaymentInitialization(
            authorization_url=f"{self.checkout_base_url}/{access_code}",
            access_code=access_code,
            reference=reference,
        )

    def verify_transaction(self, reference: str) -> PaymentVerification:
        self.verify_calls.append(reference)
        self._raise_if_failing()
        record = self.transactions.get(reference)
        if record is None:
            raise PaymentException(f"Transaction reference not found: {reference}")
        logger.info(f"[MOCK PAYMENT] Verified {reference}: {record['status'].value}")
        return PaymentVerification(
            reference=reference,
            status=record["status"],
            amount=record["amount"],
            currency=record["currency"],
            raw={"reference": reference, "status": record["status"].value},
        )

    def set_outcome(
        self,
        reference: str,
        status: PaymentStatus,
        amount: Optional[Decimal] = None,
    ) -> None:
        """Force the verification result of an initialized transaction."""
        record = self.transactions[reference]
        record["status"] = status
        if amount is not None:
            record["amount"] = Decimal(amount)

    def fail_next(self, message: str = "Mock gateway failure") -> None:
        """Make the next gateway call raise PaymentException."""
        self._fail_next = message

    def _raise_if_failing(self) -> None:
        if self._fail_next is not None:
            message, self._fail_next = self._fail_next, None
            raise PaymentException(message)
