import uuid

from django.db import models
from django.utils import timezone


class AdStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    EXPIRED = "expired", "Expired"


class AdQuerySet(models.QuerySet):
    def current(self):
        """Ads that have not expired yet, paid or free."""
        return self.filter(expires_at__gt=timezone.now())

    def active(self):
        """Paid ads that have not expired: what the public listing shows."""
        return self.current().filter(paid_for=True)

    def for_product(self, product_id):
        return self.filter(product_id=product_id)

    def for_market(self, market_id):
        return self.filter(product__merchant__market_id=market_id)

    def for_merchant(self, merchant_id):
        return self.filter(product__merchant_id=merchant_id)

    def ranked(self):
        return self.order_by("-level", "-created_at")

    def with_product(self):
        return self.select_related("product", "product__merchant", "product__merchant__market").prefetch_related(
            "product__images"
        )


class Ad(models.Model):
    """
    Time-boxed promotion of a product.

    Level 0 is the free tier; levels 1-3 are paid. A product has at most one
    unexpired ad at a time. Older ads are kept as history.
    """

    FREE_LEVEL = 0

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey("marketplace.Product", on_delete=models.CASCADE, related_name="ads")
    level = models.PositiveSmallIntegerField(default=FREE_LEVEL)
    paid_for = models.BooleanField(default=False)
    expires_at = models.DateTimeField()
    views = models.PositiveIntegerField(default=0)
    clicks = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AdQuerySet.as_manager()

    class Meta:
        app_label = "advertising"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["product", "expires_at"]),
            models.Index(fields=["paid_for", "expires_at", "level"]),
        ]

    @property
    def status(self) -> str:
        return AdStatus.ACTIVE if timezone.now() < self.expires_at else AdStatus.EXPIRED

    @property
    def is_active(self) -> bool:
        return self.status == AdStatus.ACTIVE

    def __str__(self):
        return f"Level {self.level} ad for {self.product_id}"
