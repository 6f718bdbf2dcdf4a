import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models


class MerchantManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Merchants must have an email address")
        merchant = self.model(email=self.normalize_email(email).lower(), **extra_fields)
        if password:
            merchant.set_password(password)
        else:
            merchant.set_unusable_password()
        merchant.save(using=self._db)
        return merchant

    def in_market(self, market_id):
        return self.filter(market_id=market_id).order_by("brand_name")


class Merchant(AbstractBaseUser):
    """
    Seller account, authenticated separately from customers.

    ``referred_by`` is the marketer who brought the merchant in. It is set at
    most once, through signup or ``MerchantService.connect_to_marketer``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    brand_name = models.CharField(max_length=120, unique=True)
    display_image = models.URLField(max_length=500, blank=True)
    display_image_key = models.CharField(max_length=255, blank=True)
    market = models.ForeignKey(
        "marketplace.Market",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="merchants",
    )
    referred_by = models.ForeignKey(
        "marketers.Marketer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="referred_merchants",
    )
    email_verified_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MerchantManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["brand_name"]

    subject_type = "merchant"
    role = None

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["market"]),
            models.Index(fields=["referred_by"]),
        ]

    @property
    def is_verified(self) -> bool:
        return self.email_verified_at is not None

    def __str__(self):
        return self.brand_name
