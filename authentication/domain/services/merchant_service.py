"""Merchant profile management and marketer referral linking."""

from django.db import transaction

from authentication.models import Merchant
from marketers.models import Marketer
from marketplace.models import Market
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.uploads import store_image

from .contacts import replace_contacts


class MerchantService(BaseService):
    def __init__(self, storage):
        super().__init__()
        self.storage = storage

    @BaseService.log_performance
    def get_merchant(self, merchant_id) -> ServiceResult[Merchant]:
        merchant = (
            Merchant.objects.select_related("market")
            .prefetch_related("addresses", "phone_numbers")
            .filter(pk=merchant_id)
            .first()
        )
        if merchant is None:
            return service_err(ErrorCodes.MERCHANT_NOT_FOUND, f"Merchant {merchant_id} does not exist")
        return service_ok(merchant)

    @BaseService.log_performance
    def get_merchants_by_market(self, market_id) -> ServiceResult[list]:
        if not Market.objects.filter(pk=market_id).exists():
            return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market {market_id} does not exist")
        merchants = Merchant.objects.in_market(market_id).prefetch_related("addresses", "phone_numbers")
        return service_ok(list(merchants))

    @BaseService.log_performance
    def update_merchant(self, merchant: Merchant, data: dict, display_image=None) -> ServiceResult[Merchant]:
        """
        Update profile fields. ``market_name`` moves the merchant to another
        existing market. ``referred_by`` cannot be changed here.
        """
        email = data.get("email")
        if email and email.lower() != merchant.email:
            if Merchant.objects.filter(email__iexact=email).exclude(pk=merchant.pk).exists():
                return service_err(ErrorCodes.EMAIL_TAKEN, "An account with this email already exists")
            merchant.email = email.lower()

        brand_name = data.get("brand_name")
        if brand_name and brand_name != merchant.brand_name:
            if Merchant.objects.filter(brand_name__iexact=brand_name).exclude(pk=merchant.pk).exists():
                return service_err(ErrorCodes.BRAND_NAME_TAKEN, "This brand name is already taken")
            merchant.brand_name = brand_name

        if data.get("market_name"):
            market = Market.objects.filter(name__iexact=data["market_name"]).first()
            if market is None:
                return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market '{data['market_name']}' does not exist")
            merchant.market = market

        old_image_key = None
        if display_image is not None:
            upload = store_image(self.storage, display_image, "merchants")
            if not upload.ok:
                return upload
            old_image_key = merchant.display_image_key
            merchant.display_image = upload.value.url
            merchant.display_image_key = upload.value.key

        with transaction.atomic():
            merchant.save()
            replace_contacts(merchant, data.get("addresses"), data.get("phone_numbers"))

        if old_image_key:
            self.storage.delete(old_image_key)
        return self.get_merchant(merchant.id)

    @BaseService.log_performance
    def delete_merchant(self, merchant: Merchant) -> ServiceResult[None]:
        merchant_id = merchant.id
        image_key = merchant.display_image_key
        merchant.delete()
        if image_key:
            self.storage.delete(image_key)
        self.logger.info(f"Merchant {merchant_id} deleted")
        return service_ok(None)

    @BaseService.log_performance
    def connect_to_marketer(
        self,
        merchant: Merchant,
        merchant_id,
        referrer_code: str,
        referrer_username: str = None,
    ) -> ServiceResult[Merchant]:
        """
        Link ``merchant`` to the marketer owning ``referrer_code``.

        The link is permanent: a merchant that already has a referrer gets a
        Conflict no matter which code is supplied.
        """
        if str(merchant_id) != str(merchant.id):
            return service_err(ErrorCodes.NOT_RESOURCE_OWNER, "You can only set the referrer of your own account")

        with transaction.atomic():
            locked = Merchant.objects.select_for_update().get(pk=merchant.pk)
            if locked.referred_by_id is not None:
                return service_err(ErrorCodes.ALREADY_REFERRED, "This merchant already has a referrer")

            marketer = Marketer.objects.filter(referrer_code__iexact=referrer_code.strip()).first()
            if marketer is None or (
                referrer_username and marketer.username.lower() != referrer_username.strip().lower()
            ):
                return service_err(ErrorCodes.REFERRER_NOT_FOUND, "No marketer matches this referrer code")
            if not marketer.verified:
                return service_err(ErrorCodes.MARKETER_NOT_VERIFIED, "This marketer has not been verified yet")

            locked.referred_by = marketer
            locked.save(update_fields=["referred_by", "updated_at"])

        merchant.referred_by = marketer
        self.logger.info(f"Merchant {merchant.id} referred by marketer {marketer.id}")
        return service_ok(merchant)
