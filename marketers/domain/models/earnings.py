from django.db import models
from django.db.models import Count, Q, Sum
from django.db.models.functions import Coalesce

MONEY = models.DecimalField(max_digits=14, decimal_places=2)


class MarketerEarningsQuerySet(models.QuerySet):
    def for_marketer(self, marketer_id):
        return self.filter(marketer_id=marketer_id)

    def for_merchant(self, merchant_id):
        return self.filter(merchant_id=merchant_id)

    def paid(self):
        return self.filter(paid=True)

    def unpaid(self):
        return self.filter(paid=False)

    def totals(self) -> dict:
        """Aggregate ``{total, paid, unpaid, count}`` over the queryset."""
        # Aliases must not shadow the ``paid`` field used in the filters.
        sums = self.aggregate(
            total=Coalesce(Sum("amount"), 0, output_field=MONEY),
            paid_sum=Coalesce(Sum("amount", filter=Q(paid=True)), 0, output_field=MONEY),
            unpaid_sum=Coalesce(Sum("amount", filter=Q(paid=False)), 0, output_field=MONEY),
            count=Count("id"),
        )
        return {
            "total": sums["total"],
            "paid": sums["paid_sum"],
            "unpaid": sums["unpaid_sum"],
            "count": sums["count"],
        }


class MarketerEarnings(models.Model):
    """Commission owed to a marketer for one paid ad of a referred merchant."""

    marketer = models.ForeignKey("marketers.Marketer", on_delete=models.CASCADE, related_name="earnings")
    merchant = models.ForeignKey(
        "authentication.Merchant", on_delete=models.CASCADE, related_name="referral_earnings"
    )
    ad = models.OneToOneField("advertising.Ad", on_delete=models.CASCADE, related_name="marketer_earning")
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    paid = models.BooleanField(default=False)
    paid_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = MarketerEarningsQuerySet.as_manager()

    class Meta:
        app_label = "marketers"
        ordering = ["-created_at"]
        verbose_name_plural = "marketer earnings"
        indexes = [models.Index(fields=["marketer", "paid"])]

    def __str__(self):
        return f"{self.amount} for {self.marketer_id}"
