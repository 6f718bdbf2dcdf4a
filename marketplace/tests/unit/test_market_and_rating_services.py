from unittest.mock import Mock

import pytest

from authentication.models import Merchant
from infrastructure.storage import StorageInterface
from marketplace.catalog.domain.services import MarketService, RatingService
from marketplace.models import Market, Rating
from marketplace.tests.factories import (
    CustomerFactory,
    MallFactory,
    MarketFactory,
    MerchantFactory,
    ProductFactory,
    RatingFactory,
)
from utils.service_base import ErrorCodes


@pytest.mark.unit
@pytest.mark.django_db
class TestMarketService:
    @pytest.fixture(autouse=True)
    def setup(self, db):
        self.storage = Mock(spec=StorageInterface)
        self.service = MarketService(storage=self.storage)

    def test_markets_and_malls_are_separate(self):
        market = MarketFactory()
        mall = MallFactory()

        assert self.service.get_all_markets().value == [market]
        assert self.service.get_all_malls().value == [mall]

    def test_names_include_both(self):
        MarketFactory(name="Alaba")
        MallFactory(name="Ikeja City Mall")

        names = self.service.get_market_names().value

        assert [entry["name"] for entry in names] == ["Alaba", "Ikeja City Mall"]
        assert names[1]["is_mall"] is True

    def test_create_rejects_duplicate_name(self):
        MarketFactory(name="Balogun")

        result = self.service.create_market({"name": "BALOGUN"})

        assert result.error == ErrorCodes.MARKET_NAME_TAKEN

    def test_update_market(self):
        market = MarketFactory()

        result = self.service.update_market(market.id, {"city": "Yaba", "is_mall": True})

        assert result.value.city == "Yaba"
        assert result.value.is_mall is True

    def test_update_unknown_market(self):
        result = self.service.update_market("00000000-0000-0000-0000-000000000000", {"city": "Yaba"})

        assert result.error == ErrorCodes.MARKET_NOT_FOUND

    def test_delete_market_detaches_merchants(self):
        merchant = MerchantFactory()

        result = self.service.delete_market(merchant.market_id)

        assert result.ok
        assert Merchant.objects.get(pk=merchant.pk).market is None

    def test_delete_all_markets(self):
        MarketFactory.create_batch(2)
        MallFactory()

        result = self.service.delete_all_markets()

        assert result.value == 3
        assert not Market.objects.exists()


@pytest.mark.unit
@pytest.mark.django_db
class TestRatingService:
    @pytest.fixture(autouse=True)
    def setup(self, db):
        self.service = RatingService()
        self.customer = CustomerFactory()
        self.product = ProductFactory()

    def test_create_and_summarize(self):
        self.service.create_rating(self.customer, self.product.id, {"rating": 5, "review": "Great"})
        RatingFactory(product=self.product, rating=2)

        summary = self.service.get_ratings(self.product.id).value

        assert summary["count"] == 2
        assert summary["average"] == 3.5
        assert len(summary["ratings"]) == 2

    def test_summary_without_ratings(self):
        summary = self.service.get_ratings(self.product.id).value

        assert summary == {"ratings": [], "average": None, "count": 0}

    def test_one_rating_per_customer_and_product(self):
        RatingFactory(customer=self.customer, product=self.product)

        result = self.service.create_rating(self.customer, self.product.id, {"rating": 1})

        assert result.error == ErrorCodes.ALREADY_RATED

    def test_rating_unknown_product(self):
        result = self.service.create_rating(self.customer, "00000000-0000-0000-0000-000000000000", {"rating": 3})

        assert result.error == ErrorCodes.PRODUCT_NOT_FOUND

    def test_only_author_can_update_or_delete(self):
        rating = RatingFactory(product=self.product)

        assert self.service.update_rating(self.customer, rating.id, {"rating": 1}).error == (
            ErrorCodes.NOT_RESOURCE_OWNER
        )
        assert self.service.delete_rating(self.customer, rating.id).error == ErrorCodes.NOT_RESOURCE_OWNER

    def test_author_updates_and_deletes(self):
        rating = RatingFactory(customer=self.customer, product=self.product, rating=2)

        assert self.service.update_rating(self.customer, rating.id, {"rating": 4}).value.rating == 4
        assert self.service.delete_rating(self.customer, rating.id).ok
        assert not Rating.objects.exists()
