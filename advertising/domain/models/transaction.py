import uuid

from django.db import models
from django.db.models import Sum
from django.db.models.functions import Coalesce


class TransactionStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    SUCCESS = "success", "Success"
    FAILED = "failed", "Failed"
    ABANDONED = "abandoned", "Abandoned"


class TransactionQuerySet(models.QuerySet):
    def successful(self):
        return self.filter(status=TransactionStatus.SUCCESS)

    def revenue(self, since=None):
        """Sum of settled amounts, optionally only those paid at or after ``since``."""
        queryset = self.successful()
        if since is not None:
            queryset = queryset.filter(paid_at__gte=since)
        return queryset.aggregate(
            total=Coalesce(Sum("amount"), 0, output_field=models.DecimalField(max_digits=14, decimal_places=2))
        )["total"]


class Transaction(models.Model):
    """Record of one ad payment, keyed by the gateway reference."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reference = models.CharField(max_length=100, unique=True)
    merchant = models.ForeignKey("authentication.Merchant", on_delete=models.CASCADE, related_name="transactions")
    product = models.ForeignKey(
        "marketplace.Product", on_delete=models.SET_NULL, null=True, blank=True, related_name="ad_transactions"
    )
    level = models.PositiveSmallIntegerField()
    duration_days = models.PositiveSmallIntegerField()
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3, default="NGN")
    status = models.CharField(max_length=20, choices=TransactionStatus.choices, default=TransactionStatus.PENDING)
    ad = models.ForeignKey(
        "advertising.Ad", on_delete=models.SET_NULL, null=True, blank=True, related_name="transactions"
    )
    gateway_response = models.JSONField(default=dict, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        app_label = "advertising"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["merchant", "-created_at"]),
            models.Index(fields=["status", "paid_at"]),
        ]

    @property
    def is_settled(self) -> bool:
        return self.status == TransactionStatus.SUCCESS

    def __str__(self):
        return f"{self.reference} ({self.status})"
