"""Signup and sign-in flows for merchant accounts."""

import uuid

from django.db import transaction

from authentication.infra.observability.metrics import registration_total
from authentication.models import Merchant, VerificationPurpose
from marketplace.models import Market
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.uploads import store_image

from .base_auth_service import BaseAuthService
from .contacts import replace_contacts
from .results import RegisterResult


class MerchantAuthService(BaseAuthService):
    subject_model = Merchant
    subject_type = Merchant.subject_type
    not_found_code = ErrorCodes.MERCHANT_NOT_FOUND

    def __init__(self, email_service, storage, merchant_service, google_provider=None):
        super().__init__(email_service=email_service, google_provider=google_provider)
        self.storage = storage
        self.merchant_service = merchant_service

    @BaseService.log_performance
    def register(self, data: dict, display_image=None) -> ServiceResult[RegisterResult]:
        """
        Create a merchant and send the email verification code.

        Optional ``market_name`` places the merchant in an existing market;
        optional ``referrer_code`` (with ``referrer_username``) links the
        merchant to a verified marketer. Either failing aborts the signup.
        """
        email = data["email"].lower()
        if Merchant.objects.filter(email__iexact=email).exists():
            registration_total.labels(subject_type=self.subject_type, status="failed").inc()
            return service_err(ErrorCodes.EMAIL_TAKEN, "An account with this email already exists")
        if Merchant.objects.filter(brand_name__iexact=data["brand_name"]).exists():
            return service_err(ErrorCodes.BRAND_NAME_TAKEN, "This brand name is already taken")

        market = None
        if data.get("market_name"):
            market = Market.objects.filter(name__iexact=data["market_name"]).first()
            if market is None:
                return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market '{data['market_name']}' does not exist")

        image = None
        if display_image is not None:
            upload = store_image(self.storage, display_image, "merchants")
            if not upload.ok:
                return upload
            image = upload.value

        with transaction.atomic():
            merchant = Merchant.objects.create_user(
                email=email,
                password=data["password"],
                brand_name=data["brand_name"],
                market=market,
                display_image=image.url if image else "",
                display_image_key=image.key if image else "",
            )
            replace_contacts(merchant, data.get("addresses"), data.get("phone_numbers"))

            if data.get("referrer_code"):
                referral = self.merchant_service.connect_to_marketer(
                    merchant, merchant.id, data["referrer_code"], data.get("referrer_username")
                )
                if not referral.ok:
                    transaction.set_rollback(True)
                    if image:
                        self.storage.delete(image.key)
                    return referral

        registration_total.labels(subject_type=self.subject_type, status="success").inc()
        email_sent = self.send_code(merchant, VerificationPurpose.EMAIL_VERIFICATION)
        self.logger.info(f"Merchant {merchant.id} registered")
        return service_ok(RegisterResult(subject=merchant, email_sent=email_sent))

    def create_from_google(self, email: str, id_info: dict) -> Merchant:
        base_name = (id_info.get("name") or email.split("@")[0])[:100]
        brand_name = base_name
        while Merchant.objects.filter(brand_name__iexact=brand_name).exists():
            brand_name = f"{base_name}-{uuid.uuid4().hex[:6]}"
        return Merchant.objects.create_user(
            email=email,
            brand_name=brand_name,
            display_image=id_info.get("picture", ""),
        )
