from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from advertising.models import TransactionStatus
from marketplace.tests.factories import (
    AdFactory,
    CustomerFactory,
    ExpiredAdFactory,
    MarketerFactory,
    ProductFactory,
    TransactionFactory,
)
from stats.domain.services import StatsService


@pytest.mark.unit
@pytest.mark.django_db
class TestStatsService:
    @pytest.fixture(autouse=True)
    def setup(self, db):
        self.service = StatsService()

    def test_platform_counts(self):
        CustomerFactory()
        MarketerFactory()
        AdFactory()
        ExpiredAdFactory()

        stats = self.service.platform_stats().value

        # Marketers are customers too.
        assert stats["customers"] == 2
        assert stats["marketers"] == 1
        assert stats["merchants"] == 2
        assert stats["products"] == 2
        assert stats["ads"] == 2
        assert stats["active_ads"] == 1

    def test_revenue_windows(self):
        now = timezone.now()
        last_year = now.replace(month=1, day=1) - timedelta(days=1)
        TransactionFactory(status=TransactionStatus.SUCCESS, amount=Decimal("2000.00"), paid_at=now)
        TransactionFactory(status=TransactionStatus.SUCCESS, amount=Decimal("3000.00"), paid_at=last_year)
        TransactionFactory(status=TransactionStatus.FAILED, amount=Decimal("6000.00"))
        TransactionFactory()

        revenue = self.service.revenue_stats().value

        assert revenue["month"] == Decimal("2000.00")
        assert revenue["year"] == Decimal("2000.00")
        assert revenue["all_time"] == Decimal("5000.00")

    def test_revenue_without_payments_is_zero(self):
        revenue = self.service.revenue_stats().value

        assert revenue == {"month": 0, "year": 0, "all_time": 0}

    def test_all_stats_nests_revenue(self):
        ProductFactory.create_batch(3)

        stats = self.service.all_stats().value

        assert stats["products"] == 3
        assert set(stats["revenue"]) == {"month", "year", "all_time"}

    def test_totals(self):
        ProductFactory()
        AdFactory.create_batch(2)

        assert self.service.total_products().value == 3
        assert self.service.total_ads().value == 2
