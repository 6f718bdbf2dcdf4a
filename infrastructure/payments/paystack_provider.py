"""
Paystack Payment Provider
==========================

Concrete implementation of PaymentProviderInterface over Paystack's REST API.
Amounts are sent in kobo (minor units). Requests share one ``requests.Session``
for connection reuse and are never retried: a failure surfaces to the caller
as ``PaymentException``.
"""

import logging
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from django.conf import settings

from utils.logging_utils import mask_value

from .interface import (
    PaymentException,
    PaymentInitialization,
    PaymentProviderInterface,
    PaymentStatus,
    PaymentVerification,
)

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(amount: int) -> Decimal:
    return (Decimal(amount or 0) / Decimal(100)).quantize(Decimal("0.01"))


class PaystackProvider(PaymentProviderInterface):
    """
    Paystack payment provider implementation.

    Configuration (in settings.py):
        PAYSTACK_SECRET_KEY: Secret API key
        PAYSTACK_BASE_URL: API root (defaults to https://api.paystack.co)
        PAYSTACK_TIMEOUT_SECONDS: Per-request timeout
        PAYSTACK_CALLBACK_URL: Default redirect after checkout
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.secret_key = getattr(settings, "PAYSTACK_SECRET_KEY", "")
        self.base_url = getattr(settings, "PAYSTACK_BASE_URL", "https://api.paystack.co").rstrip("/")
        self.timeout = getattr(settings, "PAYSTACK_TIMEOUT_SECONDS", 15)
        self.callback_url = getattr(settings, "PAYSTACK_CALLBACK_URL", "")

        if not self.secret_key:
            logger.warning("PAYSTACK_SECRET_KEY not configured")

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.secret_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    def initialize_transaction(
        self,
        email: str,
        amount: Decimal,
        currency: str,
        reference: Optional[str] = None,
        callback_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PaymentInitialization:
        payload: Dict[str, Any] = {
            "email": email,
            "amount": to_minor_units(amount),
            "currency": currency.upper(),
            "reference": reference or uuid.uuid4().hex,
            "metadata": metadata or {},
        }
        callback = callback_url or self.callback_url
        if callback:
            payload["callback_url"] = callback

        logger.info(f"Paystack initialize for {mask_value(email)}: {payload['amount']} {payload['currency']}")
        data = self._request("POST", "/transaction/initialize", json=payload)

        authorization_url = data.get("authorization_url")
        access_code = data.get("access_code")
        reference_value = data.get("reference")
        if not authorization_url or not access_code or not reference_value:
            raise PaymentException("Paystack initialization response missing required fields")

        logger.info(f"Paystack transaction initialized: {mask_value(reference_value)}")
        return PaymentInitialization(
            authorization_url=authorization_url,
            access_code=access_code,
            reference=reference_value,
        )

    def verify_transaction(self, reference: str) -> PaymentVerification:
        data = self._request("GET", f"/transaction/verify/{quote(reference, safe='')}")
        status = PaymentStatus.from_gateway(data.get("status"))
        logger.info(f"Paystack verification for {mask_value(reference)}: {status.value}")
        return PaymentVerification(
            reference=data.get("reference") or reference,
            status=status,
            amount=from_minor_units(data.get("amount", 0)),
            currency=data.get("currency", ""),
            paid_at=data.get("paid_at") or data.get("paidAt"),
            raw=data,
        )

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Send one request and return the envelope's ``data`` object."""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Paystack request {method} {path} failed: {str(e)}")
            raise PaymentException(f"Payment gateway unreachable: {str(e)}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Paystack returned non-JSON response ({response.status_code}) for {method} {path}")
            raise PaymentException("Payment gateway returned an invalid response") from e

        if response.status_code >= 400 or not body.get("status"):
            message = body.get("message") or f"Payment gateway error ({response.status_code})"
            logger.warning(f"Paystack {method} {path} rejected ({response.status_code}): {message}")
            raise PaymentException(message)

        return body.get("data") or {}
