from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from advertising.models import Ad, Transaction, TransactionStatus
from infrastructure.container import container
from infrastructure.payments import PaymentStatus
from marketers.models import MarketerEarnings
from marketplace.tests.auth import authenticate
from marketplace.tests.factories import (
    AdFactory,
    CustomerFactory,
    FreeAdFactory,
    MarketerFactory,
    MerchantFactory,
    ProductFactory,
    UnverifiedMerchantFactory,
)


class AdPurchaseFlowTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.marketer = MarketerFactory()
        self.merchant = MerchantFactory(referred_by=self.marketer)
        self.product = ProductFactory(merchant=self.merchant)
        authenticate(self.client, self.merchant)

    def tearDown(self):
        container.reset()

    def test_full_paid_ad_flow(self):
        init_url = reverse("ad-initialize", kwargs={"level": 1, "product_id": self.product.id})
        response = self.client.post(init_url, {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        reference = response.data["reference"]
        self.assertTrue(response.data["authorization_url"])

        verify_url = reverse("ad-verify", kwargs={"reference": reference})
        response = self.client.get(verify_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "success")
        self.assertFalse(response.data["already_verified"])
        self.assertEqual(response.data["ad"]["level"], 1)
        self.assertTrue(response.data["ad"]["paid_for"])
        self.assertEqual(response.data["transaction"]["status"], TransactionStatus.SUCCESS)

        earning = MarketerEarnings.objects.get(marketer=self.marketer)
        self.assertEqual(earning.amount, Decimal("200.00"))
        self.assertEqual(earning.merchant, self.merchant)

        response = self.client.get(verify_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["already_verified"])
        self.assertEqual(MarketerEarnings.objects.count(), 1)
        self.assertEqual(Ad.objects.filter(paid_for=True).count(), 1)

    def test_pending_payment_creates_no_ad(self):
        init_url = reverse("ad-initialize", kwargs={"level": 2, "product_id": self.product.id})
        reference = self.client.post(init_url, {}, format="json").data["reference"]
        container.payment().set_outcome(reference, PaymentStatus.PENDING)

        response = self.client.get(reverse("ad-verify", kwargs={"reference": reference}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "pending")
        self.assertIsNone(response.data["ad"])
        self.assertFalse(Ad.objects.exists())

    def test_gateway_failure_is_bad_gateway(self):
        container.payment().fail_next()

        response = self.client.post(
            reverse("ad-initialize", kwargs={"level": 1, "product_id": self.product.id}), {}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data["error"], "payment_provider_error")

    def test_invalid_level(self):
        response = self.client.post(
            reverse("ad-initialize", kwargs={"level": 9, "product_id": self.product.id}), {}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Transaction.objects.exists())

    def test_unknown_reference(self):
        response = self.client.get(reverse("ad-verify", kwargs={"reference": "nope"}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_free_ad_then_conflict(self):
        url = reverse("ad-free", kwargs={"product_id": self.product.id})

        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["level"], 0)
        self.assertEqual(response.data["status"], "active")

        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_free_ad_for_other_merchants_product(self):
        other = ProductFactory()

        response = self.client.post(reverse("ad-free", kwargs={"product_id": other.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class AdGuardTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.product = ProductFactory()

    def tearDown(self):
        container.reset()

    def test_anonymous_cannot_buy_ads(self):
        response = self.client.post(reverse("ad-free", kwargs={"product_id": self.product.id}))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_customer_token_is_rejected(self):
        authenticate(self.client, CustomerFactory())

        response = self.client.post(reverse("ad-free", kwargs={"product_id": self.product.id}))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_unverified_merchant_is_forbidden(self):
        merchant = UnverifiedMerchantFactory()
        product = ProductFactory(merchant=merchant)
        authenticate(self.client, merchant)

        response = self.client.post(reverse("ad-free", kwargs={"product_id": product.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class AdBrowsingTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()

    def tearDown(self):
        container.reset()

    def test_public_listing_shows_only_paid_active_ads(self):
        paid = AdFactory(level=2)
        FreeAdFactory()

        response = self.client.get(reverse("ad-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([ad["id"] for ad in response.data], [str(paid.id)])
        self.assertEqual(response.data[0]["product"]["id"], str(paid.product_id))

    def test_all_listing_includes_free_ads(self):
        AdFactory()
        FreeAdFactory()

        response = self.client.get(reverse("ad-list-all"))

        self.assertEqual(len(response.data), 2)

    def test_filter_by_market(self):
        ad = AdFactory()
        AdFactory()

        response = self.client.get(reverse("ad-list"), {"marketId": str(ad.product.merchant.market_id)})

        self.assertEqual([item["id"] for item in response.data], [str(ad.id)])

    def test_invalid_market_filter(self):
        response = self.client.get(reverse("ad-list"), {"marketId": "not-a-uuid"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_ad_detail_and_product_lookup(self):
        ad = AdFactory()

        detail = self.client.get(reverse("ad-detail", kwargs={"ad_id": ad.id}))
        by_product = self.client.get(reverse("ad-by-product", kwargs={"product_id": ad.product_id}))

        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(by_product.data["id"], str(ad.id))

    def test_click_and_view_tracking(self):
        ad = AdFactory()

        self.client.put(reverse("ad-view", kwargs={"ad_id": ad.id}))
        response = self.client.put(reverse("ad-click", kwargs={"ad_id": ad.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["views"], 1)
        self.assertEqual(response.data["clicks"], 1)

    def test_tracking_unknown_ad(self):
        response = self.client.put(reverse("ad-click", kwargs={"ad_id": "00000000-0000-0000-0000-000000000000"}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
