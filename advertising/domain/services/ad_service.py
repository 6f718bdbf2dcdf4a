"""
AdService - Product advertisement lifecycle.

Ads come in a free tier (level 0, limited duration) and paid levels whose
price and duration are configured in ``settings.AD_LEVELS``. Paid ads are
bought through the payment gateway in two steps:

1. ``initialize_ad_payment`` opens a gateway transaction and records it as
   pending.
2. ``verify_ad_payment`` asks the gateway for the outcome. On success it
   expires the product's current ad, creates the paid ad, settles the
   transaction and credits the referring marketer, all in one database
   transaction. Verifying a settled transaction again is a no-op that
   returns the recorded result without calling the gateway.
"""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from advertising.domain.interfaces import EarningsRecorder
from advertising.infra.observability.metrics import (
    ad_interactions,
    ad_payment_verifications,
    ad_payments_initialized,
    free_ads_activated,
)
from advertising.models import Ad, Transaction, TransactionStatus
from infrastructure.payments import (
    PaymentException,
    PaymentInitialization,
    PaymentProviderInterface,
    PaymentStatus,
)
from marketplace.models import Product
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


@dataclass
class VerificationOutcome:
    """Result of verifying an ad payment."""

    transaction: Transaction
    ad: Optional[Ad]
    status: str
    already_verified: bool = False


class AdService(BaseService):
    """
    Dependencies:
    - payment_provider: PaymentProviderInterface used for paid ads
    - earnings_recorder: EarningsRecorder crediting referral commission
    """

    def __init__(self, payment_provider: PaymentProviderInterface, earnings_recorder: EarningsRecorder):
        super().__init__()
        self.payment_provider = payment_provider
        self.earnings_recorder = earnings_recorder

    # Free tier

    @BaseService.log_performance
    @transaction.atomic
    def activate_free_ad(self, merchant, product_id) -> ServiceResult[Ad]:
        product = self._owned_product(merchant, product_id, lock=True)
        if not product.ok:
            return product
        product = product.value

        if Ad.objects.for_product(product.id).current().exists():
            return service_err(ErrorCodes.AD_ALREADY_ACTIVE, "This product already has an active ad")

        ad = Ad.objects.create(
            product=product,
            level=Ad.FREE_LEVEL,
            paid_for=False,
            expires_at=timezone.now() + timedelta(days=settings.AD_FREE_DURATION_DAYS),
        )
        free_ads_activated.inc()
        self.logger.info(f"Free ad {ad.id} activated for product {product.id}")
        return service_ok(ad)

    # Paid tiers

    @BaseService.log_performance
    def initialize_ad_payment(
        self, merchant, level: int, product_id, callback_url: Optional[str] = None
    ) -> ServiceResult[PaymentInitialization]:
        """
        Open a gateway transaction for a paid ad.

        Returns the gateway's ``authorization_url``, ``access_code`` and
        ``reference``. Upgrading a product that currently runs a free ad is
        allowed; a product with an active paid ad is rejected.
        """
        if level == Ad.FREE_LEVEL:
            return service_err(ErrorCodes.INVALID_AD_LEVEL, "Level 0 ads are free; activate them without payment")
        terms = settings.AD_LEVELS.get(level)
        if terms is None:
            return service_err(ErrorCodes.INVALID_AD_LEVEL, f"Unknown ad level {level}")
        price, days = terms

        product = self._owned_product(merchant, product_id)
        if not product.ok:
            return product
        product = product.value

        if Ad.objects.for_product(product.id).active().exists():
            return service_err(ErrorCodes.AD_ALREADY_ACTIVE, "This product already has an active paid ad")

        amount = Decimal(price)
        try:
            initialization = self.payment_provider.initialize_transaction(
                email=merchant.email,
                amount=amount,
                currency=settings.PAYMENT_CURRENCY,
                callback_url=callback_url,
                metadata={"merchant_id": str(merchant.id), "product_id": str(product.id), "level": level},
            )
        except PaymentException as e:
            ad_payments_initialized.labels(level=str(level), status="failed").inc()
            self.logger.error(f"Gateway refused ad payment for product {product.id}: {e}")
            return service_err(ErrorCodes.PAYMENT_PROVIDER_ERROR, f"Payment gateway error: {e}")

        Transaction.objects.create(
            reference=initialization.reference,
            merchant=merchant,
            product=product,
            level=level,
            duration_days=days,
            amount=amount,
            currency=settings.PAYMENT_CURRENCY,
        )
        ad_payments_initialized.labels(level=str(level), status="success").inc()
        self.logger.info(
            f"Initialized level {level} ad payment {mask_value(initialization.reference)} for product {product.id}"
        )
        return service_ok(initialization)

    @BaseService.log_performance
    def verify_ad_payment(self, merchant, reference: str) -> ServiceResult[VerificationOutcome]:
        txn = Transaction.objects.select_related("ad").filter(reference=reference).first()
        if txn is None:
            return service_err(ErrorCodes.TRANSACTION_NOT_FOUND, "No transaction with this reference")
        if txn.merchant_id != merchant.id:
            return service_err(ErrorCodes.PERMISSION_DENIED, "This transaction belongs to another merchant")
        if txn.is_settled:
            ad_payment_verifications.labels(outcome="already_settled").inc()
            return service_ok(self._settled_outcome(txn))

        try:
            verification = self.payment_provider.verify_transaction(reference)
        except PaymentException as e:
            ad_payment_verifications.labels(outcome="gateway_error").inc()
            self.logger.error(f"Gateway verification failed for {mask_value(reference)}: {e}")
            return service_err(ErrorCodes.PAYMENT_PROVIDER_ERROR, f"Payment gateway error: {e}")

        if not verification.succeeded:
            Transaction.objects.filter(pk=txn.pk).exclude(status=TransactionStatus.SUCCESS).update(
                status=verification.status.value, gateway_response=verification.raw, updated_at=timezone.now()
            )
            txn.refresh_from_db()
            ad_payment_verifications.labels(outcome=verification.status.value).inc()
            return service_ok(VerificationOutcome(transaction=txn, ad=None, status=txn.status))

        if verification.amount < txn.amount:
            Transaction.objects.filter(pk=txn.pk).update(
                status=TransactionStatus.FAILED, gateway_response=verification.raw, updated_at=timezone.now()
            )
            ad_payment_verifications.labels(outcome="amount_mismatch").inc()
            self.logger.warning(
                f"Amount mismatch on {mask_value(reference)}: paid {verification.amount}, expected {txn.amount}"
            )
            return service_err(ErrorCodes.VALIDATION_ERROR, "Amount paid does not match the ad price")

        return self._settle(txn.pk, verification.raw)

    # Tracking

    @BaseService.log_performance
    def track_view(self, ad_id) -> ServiceResult[Ad]:
        return self._increment(ad_id, "views")

    @BaseService.log_performance
    def track_click(self, ad_id) -> ServiceResult[Ad]:
        return self._increment(ad_id, "clicks")

    # Reads

    @BaseService.log_performance
    def list_ads(self, market_id=None, merchant_id=None, active_only: bool = True) -> ServiceResult[list]:
        """
        Ads ordered by level (highest first) then newest first.

        With ``active_only`` only paid, unexpired ads are returned.
        """
        queryset = Ad.objects.with_product()
        if active_only:
            queryset = queryset.active()
        if market_id:
            queryset = queryset.for_market(market_id)
        if merchant_id:
            queryset = queryset.for_merchant(merchant_id)
        return service_ok(list(queryset.ranked()))

    @BaseService.log_performance
    def get_ad(self, ad_id) -> ServiceResult[Ad]:
        ad = Ad.objects.with_product().filter(pk=ad_id).first()
        if ad is None:
            return service_err(ErrorCodes.AD_NOT_FOUND, f"Ad {ad_id} does not exist")
        return service_ok(ad)

    @BaseService.log_performance
    def get_ad_by_product(self, product_id) -> ServiceResult[Ad]:
        """The product's unexpired ad, or its most recent one."""
        ads = Ad.objects.with_product().for_product(product_id)
        ad = ads.current().first() or ads.order_by("-created_at").first()
        if ad is None:
            return service_err(ErrorCodes.AD_NOT_FOUND, f"Product {product_id} has no ads")
        return service_ok(ad)

    # Helpers

    @transaction.atomic
    def _settle(self, transaction_pk, gateway_response: dict) -> ServiceResult[VerificationOutcome]:
        txn = Transaction.objects.select_for_update().get(pk=transaction_pk)
        if txn.is_settled:
            # A concurrent verification settled it first.
            ad_payment_verifications.labels(outcome="already_settled").inc()
            return service_ok(self._settled_outcome(txn))

        now = timezone.now()
        txn.status = TransactionStatus.SUCCESS
        txn.paid_at = now
        txn.gateway_response = gateway_response

        product = Product.objects.select_for_update().filter(pk=txn.product_id).first()
        if product is None:
            txn.save()
            self.logger.error(f"Transaction {txn.id} paid for a product that no longer exists")
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "The advertised product no longer exists")

        Ad.objects.for_product(product.id).current().update(expires_at=now, updated_at=now)
        ad = Ad.objects.create(
            product=product,
            level=txn.level,
            paid_for=True,
            expires_at=now + timedelta(days=txn.duration_days),
        )
        txn.ad = ad
        txn.save()

        self.earnings_recorder.record_referral_earning(ad, txn.amount)

        ad_payment_verifications.labels(outcome="settled").inc()
        self.logger.info(f"Transaction {txn.id} settled; level {ad.level} ad {ad.id} runs until {ad.expires_at}")
        return service_ok(VerificationOutcome(transaction=txn, ad=ad, status=PaymentStatus.SUCCESS.value))

    def _settled_outcome(self, txn: Transaction) -> VerificationOutcome:
        return VerificationOutcome(transaction=txn, ad=txn.ad, status=txn.status, already_verified=True)

    def _owned_product(self, merchant, product_id, lock: bool = False) -> ServiceResult[Product]:
        queryset = Product.objects.select_for_update() if lock else Product.objects
        product = queryset.filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} does not exist")
        if product.merchant_id != merchant.id:
            return service_err(ErrorCodes.NOT_PRODUCT_OWNER, "You do not own this product")
        return service_ok(product)

    def _increment(self, ad_id, field: str) -> ServiceResult[Ad]:
        updated = Ad.objects.filter(pk=ad_id).update(**{field: F(field) + 1})
        if not updated:
            return service_err(ErrorCodes.AD_NOT_FOUND, f"Ad {ad_id} does not exist")
        ad_interactions.labels(kind=field).inc()
        return service_ok(Ad.objects.get(pk=ad_id))
