"""
MarketerService - Referral program management.

A marketer is a customer with a referral profile. Merchants who sign up (or
later connect) with a marketer's referrer code are credited to that
marketer, who then earns ``MARKETER_REFERRAL_PERCENTAGE`` percent of every
paid ad those merchants buy. Earnings accrue unpaid until an admin marks
them as paid out.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from advertising.domain.interfaces import EarningsRecorder
from authentication.models import Customer, CustomerRole
from marketers.domain.models import generate_referrer_code
from marketers.infra.observability.metrics import (
    earnings_payouts,
    marketer_registrations,
    referral_earnings_amount,
    referral_earnings_credited,
)
from marketers.models import Marketer, MarketerEarnings
from utils.pagination import paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.uploads import store_image

BANK_FIELDS = ("bank_name", "account_number", "account_name")
REFERRER_CODE_ATTEMPTS = 10
CENTS = Decimal("0.01")


class MarketerService(BaseService, EarningsRecorder):
    """
    Dependencies:
    - storage: StorageInterface for identity credential images
    """

    def __init__(self, storage):
        super().__init__()
        self.storage = storage

    # Registration

    @BaseService.log_performance
    def create_marketer(self, data: dict, identity_image=None) -> ServiceResult[Marketer]:
        """
        Give an existing customer a marketer profile.

        The customer is looked up by ``data["email"]``; their role becomes
        MARKETER. New marketers start unverified and cannot be used as a
        referrer until an admin verifies them.
        """
        customer = Customer.objects.filter(email__iexact=(data.get("email") or "").strip()).first()
        if customer is None:
            marketer_registrations.labels(status="failed").inc()
            return service_err(ErrorCodes.CUSTOMER_NOT_FOUND, "No customer account found with this email address")
        if Marketer.objects.filter(customer=customer).exists():
            marketer_registrations.labels(status="failed").inc()
            return service_err(ErrorCodes.ALREADY_MARKETER, "This customer is already a marketer")

        username = data["username"].strip()
        if Marketer.objects.filter(username__iexact=username).exists():
            marketer_registrations.labels(status="failed").inc()
            return service_err(ErrorCodes.USERNAME_TAKEN, "This username is already taken")

        stored = None
        if identity_image is not None:
            upload = store_image(self.storage, identity_image, "marketers/identity")
            if not upload.ok:
                marketer_registrations.labels(status="failed").inc()
                return upload
            stored = upload.value

        try:
            with transaction.atomic():
                marketer = Marketer.objects.create(
                    customer=customer,
                    username=username,
                    referrer_code=self._unique_referrer_code(),
                    identity_credential_image=stored.url if stored else "",
                    identity_credential_key=stored.key if stored else "",
                    **{field: data.get(field, "") for field in BANK_FIELDS},
                )
                if customer.role != CustomerRole.ADMIN:
                    customer.role = CustomerRole.MARKETER
                    customer.save(update_fields=["role", "updated_at"])
        except IntegrityError as e:
            if stored:
                self.storage.delete(stored.key)
            self.logger.warning(f"Marketer creation for customer {customer.id} lost a race: {e}")
            marketer_registrations.labels(status="failed").inc()
            return service_err(ErrorCodes.ALREADY_MARKETER, "This customer is already a marketer")

        marketer_registrations.labels(status="success").inc()
        self.logger.info(f"Customer {customer.id} registered as marketer {marketer.id}")
        return service_ok(marketer)

    # Reads

    @BaseService.log_performance
    def get_all_marketers(self, page: int = 1, page_size: Optional[int] = None) -> ServiceResult[Dict]:
        queryset = Marketer.objects.select_related("customer").order_by("-created_at")
        return service_ok(paginate(queryset, page, page_size))

    @BaseService.log_performance
    def get_marketer(self, marketer_id) -> ServiceResult[Marketer]:
        marketer = Marketer.objects.select_related("customer").filter(pk=marketer_id).first()
        if marketer is None:
            return service_err(ErrorCodes.MARKETER_NOT_FOUND, f"Marketer {marketer_id} does not exist")
        return service_ok(marketer)

    @BaseService.log_performance
    def get_by_referrer_code(self, code: str) -> ServiceResult[Marketer]:
        marketer = Marketer.objects.select_related("customer").filter(referrer_code__iexact=code.strip()).first()
        if marketer is None:
            return service_err(ErrorCodes.REFERRER_NOT_FOUND, "No marketer matches this referrer code")
        return service_ok(marketer)

    # Mutations

    @BaseService.log_performance
    def update_marketer(self, actor, marketer_id, data: dict, identity_image=None) -> ServiceResult[Marketer]:
        """Update username, bank details or identity credential. Owner or admin only."""
        result = self._accessible(actor, marketer_id)
        if not result.ok:
            return result
        marketer = result.value

        username = (data.get("username") or "").strip()
        if username and username.lower() != marketer.username.lower():
            if Marketer.objects.filter(username__iexact=username).exclude(pk=marketer.pk).exists():
                return service_err(ErrorCodes.USERNAME_TAKEN, "This username is already taken")
            marketer.username = username

        for field in BANK_FIELDS:
            if field in data:
                setattr(marketer, field, data[field])

        old_key = None
        if identity_image is not None:
            upload = store_image(self.storage, identity_image, "marketers/identity")
            if not upload.ok:
                return upload
            old_key = marketer.identity_credential_key
            marketer.identity_credential_image = upload.value.url
            marketer.identity_credential_key = upload.value.key

        marketer.save()
        if old_key:
            self.storage.delete(old_key)
        return service_ok(marketer)

    @BaseService.log_performance
    def verify_marketer(self, marketer_id) -> ServiceResult[Marketer]:
        result = self.get_marketer(marketer_id)
        if not result.ok:
            return result
        marketer = result.value
        if not marketer.verified:
            marketer.verified = True
            marketer.save(update_fields=["verified", "updated_at"])
            self.logger.info(f"Marketer {marketer.id} verified")
        return service_ok(marketer)

    @BaseService.log_performance
    def delete_marketer(self, marketer_id) -> ServiceResult[None]:
        """Remove the profile and its earnings. The customer account stays, demoted to CUSTOMER."""
        result = self.get_marketer(marketer_id)
        if not result.ok:
            return result
        marketer = result.value
        customer = marketer.customer
        image_key = marketer.identity_credential_key

        with transaction.atomic():
            marketer.delete()
            if customer.role == CustomerRole.MARKETER:
                customer.role = CustomerRole.CUSTOMER
                customer.save(update_fields=["role", "updated_at"])

        if image_key:
            self.storage.delete(image_key)
        self.logger.info(f"Marketer {marketer_id} deleted")
        return service_ok(None)

    # Earnings

    @BaseService.log_performance
    def get_earnings(self, actor, marketer_id) -> ServiceResult[Dict]:
        """
        Earnings of a marketer with totals.

        Returns:
            {"marketer": Marketer, "earnings": [...], "total": Decimal,
             "paid": Decimal, "unpaid": Decimal, "count": int}
        """
        result = self._accessible(actor, marketer_id)
        if not result.ok:
            return result
        marketer = result.value

        earnings = MarketerEarnings.objects.for_marketer(marketer.id)
        totals = earnings.totals()
        return service_ok(
            {
                "marketer": marketer,
                "earnings": list(earnings.select_related("merchant", "ad")),
                **totals,
            }
        )

    @BaseService.log_performance
    def mark_earnings_paid(self, marketer_id) -> ServiceResult[Dict]:
        """Mark every unpaid earning of the marketer as paid out. Returns ``{count, amount}``."""
        result = self.get_marketer(marketer_id)
        if not result.ok:
            return result

        with transaction.atomic():
            ids = list(
                MarketerEarnings.objects.select_for_update()
                .for_marketer(marketer_id)
                .unpaid()
                .values_list("id", flat=True)
            )
            batch = MarketerEarnings.objects.filter(pk__in=ids)
            totals = batch.totals()
            count = batch.update(paid=True, paid_at=timezone.now())

        earnings_payouts.inc(count)
        self.logger.info(f"Paid out {count} earnings ({totals['unpaid']}) to marketer {marketer_id}")
        return service_ok({"count": count, "amount": totals["unpaid"]})

    def record_referral_earning(self, ad, ad_price: Decimal) -> Optional[MarketerEarnings]:
        merchant = ad.product.merchant
        if merchant.referred_by_id is None:
            return None

        amount = (Decimal(ad_price) * Decimal(settings.MARKETER_REFERRAL_PERCENTAGE) / 100).quantize(
            CENTS, rounding=ROUND_HALF_UP
        )
        earning, created = MarketerEarnings.objects.get_or_create(
            ad=ad,
            defaults={"marketer_id": merchant.referred_by_id, "merchant": merchant, "amount": amount},
        )
        if created:
            referral_earnings_credited.inc()
            referral_earnings_amount.inc(float(amount))
            self.logger.info(f"Credited {amount} to marketer {merchant.referred_by_id} for ad {ad.id}")
        return earning

    # Helpers

    def _accessible(self, actor, marketer_id) -> ServiceResult[Marketer]:
        result = self.get_marketer(marketer_id)
        if not result.ok:
            return result
        marketer = result.value
        if marketer.customer_id != actor.id and not getattr(actor, "is_admin", False):
            return service_err(ErrorCodes.NOT_RESOURCE_OWNER, "You can only access your own marketer profile")
        return service_ok(marketer)

    def _unique_referrer_code(self) -> str:
        for _ in range(REFERRER_CODE_ATTEMPTS):
            code = generate_referrer_code()
            if not Marketer.objects.filter(referrer_code=code).exists():
                return code
        raise RuntimeError("Could not generate a unique referrer code")
