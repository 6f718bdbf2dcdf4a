from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketers.models import Marketer
from marketplace.tests.auth import authenticate
from marketplace.tests.factories import (
    AdminFactory,
    CustomerFactory,
    MarketerEarningsFactory,
    MarketerFactory,
    MerchantFactory,
)


class MarketerRegistrationTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()

    def tearDown(self):
        container.reset()

    def test_customer_becomes_marketer(self):
        customer = CustomerFactory()

        response = self.client.post(
            reverse("marketer-list"),
            {"email": customer.email, "username": "hustler", "account_number": "0123456789"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["username"], "hustler")
        self.assertFalse(response.data["verified"])
        self.assertEqual(response.data["customer_id"], str(customer.id))
        self.assertTrue(Marketer.objects.filter(customer=customer).exists())

    def test_duplicate_registration_conflicts(self):
        marketer = MarketerFactory()

        response = self.client.post(
            reverse("marketer-list"), {"email": marketer.customer.email, "username": "again"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "already_marketer")

    def test_invalid_username(self):
        customer = CustomerFactory()

        response = self.client.post(
            reverse("marketer-list"), {"email": customer.email, "username": "a b"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_referrer_lookup_is_public(self):
        marketer = MarketerFactory(referrer_code="PROMO123")

        response = self.client.get(reverse("marketer-referrer", kwargs={"code": "PROMO123"}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], str(marketer.id))
        self.assertNotIn("account_number", response.data)


class MarketerAdminTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.admin = AdminFactory()

    def tearDown(self):
        container.reset()

    def test_list_is_paginated_for_admins(self):
        MarketerFactory.create_batch(3)
        authenticate(self.client, self.admin)

        response = self.client.get(reverse("marketer-list"), {"page": 1, "pageSize": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["totalItems"], 3)
        self.assertEqual(response.data["totalPages"], 2)
        self.assertEqual(len(response.data["items"]), 2)
        self.assertTrue(response.data["hasNextPage"])

    def test_list_forbidden_for_regular_customers(self):
        authenticate(self.client, CustomerFactory())

        response = self.client.get(reverse("marketer-list"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_merchant_token_is_unauthenticated(self):
        authenticate(self.client, MerchantFactory())

        response = self.client.get(reverse("marketer-list"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_verify_and_delete(self):
        marketer = MarketerFactory(verified=False)
        authenticate(self.client, self.admin)

        response = self.client.put(reverse("marketer-verify", kwargs={"marketer_id": marketer.id}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["verified"])

        response = self.client.delete(reverse("marketer-detail", kwargs={"marketer_id": marketer.id}))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Marketer.objects.filter(pk=marketer.id).exists())

    def test_payout(self):
        marketer = MarketerFactory()
        MarketerEarningsFactory(marketer=marketer, amount=Decimal("200.00"))
        MarketerEarningsFactory(marketer=marketer, amount=Decimal("150.00"))
        authenticate(self.client, self.admin)

        response = self.client.put(reverse("marketer-earnings-pay", kwargs={"marketer_id": marketer.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 2)
        self.assertEqual(Decimal(response.data["amount"]), Decimal("350.00"))


class MarketerSelfServiceTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.marketer = MarketerFactory()
        authenticate(self.client, self.marketer.customer)

    def tearDown(self):
        container.reset()

    def test_view_own_earnings(self):
        MarketerEarningsFactory(marketer=self.marketer, amount=Decimal("200.00"))
        MarketerEarningsFactory(marketer=self.marketer, amount=Decimal("100.00"), paid=True)

        response = self.client.get(reverse("marketer-earnings", kwargs={"marketer_id": self.marketer.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 2)
        self.assertEqual(Decimal(response.data["total"]), Decimal("300.00"))
        self.assertEqual(Decimal(response.data["unpaid"]), Decimal("200.00"))
        self.assertEqual(len(response.data["earnings"]), 2)

    def test_cannot_view_someone_elses_earnings(self):
        other = MarketerFactory()

        response = self.client.get(reverse("marketer-earnings", kwargs={"marketer_id": other.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_update_own_profile(self):
        response = self.client.put(
            reverse("marketer-detail", kwargs={"marketer_id": self.marketer.id}),
            {"bank_name": "Zenith", "account_name": "Jane Doe"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["bank_name"], "Zenith")

    def test_cannot_delete_self(self):
        response = self.client.delete(reverse("marketer-detail", kwargs={"marketer_id": self.marketer.id}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
