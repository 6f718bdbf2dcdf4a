"""
StatsService - Admin analytics over the whole platform.

Read-only aggregates; nothing here is cached because the numbers are
expected to move while admins watch them.
"""

from typing import Dict

from django.utils import timezone

from advertising.models import Ad, Transaction
from authentication.models import Customer, Merchant
from marketers.models import Marketer
from marketplace.models import Product
from utils.service_base import BaseService, ServiceResult, service_ok


class StatsService(BaseService):
    @BaseService.log_performance
    def platform_stats(self) -> ServiceResult[Dict]:
        return service_ok(
            {
                "customers": Customer.objects.count(),
                "merchants": Merchant.objects.count(),
                "products": Product.objects.count(),
                "ads": Ad.objects.count(),
                "active_ads": Ad.objects.active().count(),
                "marketers": Marketer.objects.count(),
            }
        )

    @BaseService.log_performance
    def revenue_stats(self) -> ServiceResult[Dict]:
        """Successful ad payment totals for the current month, the current year and all time."""
        now = timezone.now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        year_start = month_start.replace(month=1)
        return service_ok(
            {
                "month": Transaction.objects.revenue(since=month_start),
                "year": Transaction.objects.revenue(since=year_start),
                "all_time": Transaction.objects.revenue(),
            }
        )

    @BaseService.log_performance
    def all_stats(self) -> ServiceResult[Dict]:
        stats = self.platform_stats().value
        stats["revenue"] = self.revenue_stats().value
        return service_ok(stats)

    @BaseService.log_performance
    def total_products(self) -> ServiceResult[int]:
        return service_ok(Product.objects.count())

    @BaseService.log_performance
    def total_ads(self) -> ServiceResult[int]:
        return service_ok(Ad.objects.count())
