from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import Customer, Merchant
from infrastructure.container import container
from marketplace.tests.auth import authenticate
from marketplace.tests.factories import (
    AddressFactory,
    CustomerFactory,
    MarketerEarningsFactory,
    MarketerFactory,
    MarketFactory,
    MerchantFactory,
)


class CustomerProfileTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.customer = CustomerFactory()
        AddressFactory(customer=self.customer)
        authenticate(self.client, self.customer)
        self.url = reverse("customer-profile", kwargs={"customer_id": self.customer.id})

    def tearDown(self):
        container.reset()

    def test_get_own_profile(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], self.customer.email)
        self.assertEqual(len(response.data["addresses"]), 1)

    def test_cannot_read_another_profile(self):
        other = CustomerFactory()

        response = self.client.get(reverse("customer-profile", kwargs={"customer_id": other.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_anonymous_is_unauthorized(self):
        self.client.credentials()

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_update_replaces_contacts(self):
        response = self.client.put(
            self.url,
            {
                "first_name": "Renamed",
                "addresses": [],
                "phone_numbers": ["+2348033333333", "+2348044444444"],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["first_name"], "Renamed")
        self.assertEqual(response.data["addresses"], [])
        self.assertEqual(len(response.data["phone_numbers"]), 2)

    def test_update_to_taken_email(self):
        CustomerFactory(email="taken@example.com")

        response = self.client.put(self.url, {"email": "taken@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_delete_account(self):
        response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Customer.objects.filter(pk=self.customer.id).exists())


class CustomerMarketerViewsTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()

    def tearDown(self):
        container.reset()

    def test_marketer_profile_with_total_earnings(self):
        marketer = MarketerFactory()
        MarketerEarningsFactory(marketer=marketer, amount=Decimal("200.00"))
        authenticate(self.client, marketer.customer)

        response = self.client.get(reverse("customer-marketer"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["marketer"]["id"], str(marketer.id))
        self.assertEqual(Decimal(response.data["total_earnings"]), Decimal("200.00"))

    def test_plain_customer_has_no_marketer_profile(self):
        authenticate(self.client, CustomerFactory())

        response = self.client.get(reverse("customer-marketer"))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_referrals_list_merchants_with_their_earnings(self):
        marketer = MarketerFactory()
        earning = MarketerEarningsFactory(marketer=marketer)
        MerchantFactory(referred_by=marketer)
        authenticate(self.client, marketer.customer)

        response = self.client.get(reverse("customer-referrals"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        by_merchant = {entry["merchant"]["id"]: entry["earnings"] for entry in response.data}
        self.assertEqual(len(by_merchant[str(earning.merchant_id)]), 1)


class MerchantProfileTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.merchant = MerchantFactory()
        self.url = reverse("merchant-detail", kwargs={"merchant_id": self.merchant.id})

    def tearDown(self):
        container.reset()

    def test_profile_is_public(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["brand_name"], self.merchant.brand_name)
        self.assertFalse(response.data["referred"])

    def test_unknown_merchant(self):
        response = self.client.get(
            reverse("merchant-detail", kwargs={"merchant_id": "00000000-0000-0000-0000-000000000000"})
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_owner_moves_to_another_market(self):
        market = MarketFactory(name="Trade Fair")
        authenticate(self.client, self.merchant)

        response = self.client.put(self.url, {"market_name": "trade fair"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["market"]["id"], str(market.id))

    def test_other_merchant_cannot_update(self):
        authenticate(self.client, MerchantFactory())

        response = self.client.put(self.url, {"brand_name": "Hijacked"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_customer_token_cannot_update_merchant(self):
        authenticate(self.client, CustomerFactory())

        response = self.client.put(self.url, {"brand_name": "Hijacked"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_delete_own_account(self):
        authenticate(self.client, self.merchant)

        response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Merchant.objects.filter(pk=self.merchant.id).exists())

    def test_merchants_by_market(self):
        MerchantFactory(market=self.merchant.market)

        response = self.client.get(reverse("merchants-by-market", kwargs={"market_id": self.merchant.market_id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)


class ConnectReferrerTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.merchant = MerchantFactory()
        authenticate(self.client, self.merchant)
        self.url = reverse("merchant-referrer", kwargs={"merchant_id": self.merchant.id})

    def tearDown(self):
        container.reset()

    def test_connect_once(self):
        MarketerFactory(referrer_code="LINKME01")
        second = MarketerFactory(referrer_code="LINKME02")

        response = self.client.post(self.url, {"referrer_code": "LINKME01"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["referred"])

        response = self.client.post(self.url, {"referrer_code": second.referrer_code}, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_unverified_marketer(self):
        MarketerFactory(referrer_code="NOTYET01", verified=False)

        response = self.client.post(self.url, {"referrer_code": "NOTYET01"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "marketer_not_verified")

    def test_cannot_connect_for_another_merchant(self):
        MarketerFactory(referrer_code="LINKME03")
        other = MerchantFactory()

        response = self.client.post(
            reverse("merchant-referrer", kwargs={"merchant_id": other.id}), {"referrer_code": "LINKME03"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
