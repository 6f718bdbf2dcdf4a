from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import Customer, Merchant, VerificationCode, VerificationPurpose
from infrastructure.container import container
from marketplace.tests.factories import (
    CustomerFactory,
    MarketerFactory,
    MarketFactory,
    MerchantFactory,
    UnverifiedCustomerFactory,
)


class CustomerAuthFlowTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()

    def tearDown(self):
        container.reset()

    def test_signup_verify_and_login(self):
        response = self.client.post(
            reverse("customer-signup"),
            {
                "email": "New.User@example.com",
                "password": "Str0ng-password!",
                "first_name": "New",
                "last_name": "User",
                "phone_numbers": ["+2348011111111"],
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data["email_sent"])
        self.assertEqual(response.data["account"]["email"], "new.user@example.com")
        self.assertFalse(response.data["account"]["verified"])

        customer = Customer.objects.get(email="new.user@example.com")
        code = VerificationCode.objects.get(subject_id=customer.id).code
        self.assertIn(code, container.email().get_last_message().body)

        response = self.client.post(
            reverse("customer-verify-email"), {"email": customer.email, "code": code}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(
            reverse("customer-login"), {"email": customer.email, "password": "Str0ng-password!"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["subject_type"], "customer")
        self.assertTrue(response.data["account"]["verified"])
        self.assertIn("access_token", response.data)

    def test_signup_rejects_weak_password(self):
        response = self.client.post(
            reverse("customer-signup"),
            {"email": "weak@example.com", "password": "123", "first_name": "W", "last_name": "P"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data)

    def test_signup_rejects_more_than_two_phone_numbers(self):
        response = self.client.post(
            reverse("customer-signup"),
            {
                "email": "phones@example.com",
                "password": "Str0ng-password!",
                "first_name": "P",
                "last_name": "N",
                "phone_numbers": ["1", "2", "3"],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_duplicate_signup_conflicts(self):
        CustomerFactory(email="taken@example.com")

        response = self.client.post(
            reverse("customer-signup"),
            {"email": "taken@example.com", "password": "Str0ng-password!", "first_name": "A", "last_name": "B"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "email_taken")

    def test_wrong_password_is_unauthorized(self):
        customer = CustomerFactory()

        response = self.client.post(
            reverse("customer-login"), {"email": customer.email, "password": "nope"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "invalid_credentials")

    def test_verify_with_link_token(self):
        customer = UnverifiedCustomerFactory()
        self.client.post(reverse("customer-email-verification"), {"email": customer.email}, format="json")
        token = VerificationCode.objects.get(subject_id=customer.id).token

        response = self.client.post(reverse("customer-verify-email-token"), {"token": str(token)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        customer.refresh_from_db()
        self.assertTrue(customer.is_verified)

    def test_verification_request_for_unknown_email(self):
        response = self.client.post(
            reverse("customer-email-verification"), {"email": "ghost@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_password_reset_flow(self):
        customer = CustomerFactory()

        response = self.client.post(reverse("customer-forgot-password"), {"email": customer.email}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        code = VerificationCode.objects.get(
            subject_id=customer.id, purpose=VerificationPurpose.PASSWORD_RESET
        ).code

        response = self.client.put(
            reverse("customer-reset-password"),
            {"email": customer.email, "code": code, "password": "An0ther-password!"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(
            reverse("customer-login"), {"email": customer.email, "password": "An0ther-password!"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_forgot_password_does_not_reveal_accounts(self):
        response = self.client.post(
            reverse("customer-forgot-password"), {"email": "ghost@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_refresh_and_logout(self):
        customer = CustomerFactory()
        login = self.client.post(
            reverse("customer-login"), {"email": customer.email, "password": "defaultpassword"}, format="json"
        )
        refresh_token = login.data["refresh_token"]

        response = self.client.post(
            reverse("customer-refresh-token"), {"refresh_token": refresh_token}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        new_refresh = response.data["refresh_token"]

        response = self.client.post(
            reverse("customer-refresh-token"), {"refresh_token": refresh_token}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        response = self.client.delete(reverse("customer-logout"), {"refresh_token": new_refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.post(reverse("customer-refresh-token"), {"refresh_token": new_refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    @patch("authentication.infra.auth_providers.google.GoogleAuthProvider.verify_token")
    def test_google_login(self, mock_verify):
        mock_verify.return_value = {"email": "google@example.com", "email_verified": True, "given_name": "Goo"}

        response = self.client.post(reverse("customer-google-login"), {"id_token": "token"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["created"])
        self.assertTrue(Customer.objects.filter(email="google@example.com").exists())


class MerchantAuthFlowTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()

    def tearDown(self):
        container.reset()

    def test_multipart_signup_with_market_referrer_and_image(self):
        market = MarketFactory(name="Computer Village")
        MarketerFactory(referrer_code="VILLAGE1")
        image = SimpleUploadedFile("logo.png", b"\x89PNG logo", content_type="image/png")

        response = self.client.post(
            reverse("merchant-signup"),
            {
                "email": "gadgets@example.com",
                "password": "Str0ng-password!",
                "brand_name": "Gadget Hub",
                "market_name": "Computer Village",
                "referrer_code": "VILLAGE1",
                "addresses": '[{"street": "3 Otigba St", "city": "Ikeja", "state": "Lagos"}]',
                "phone_numbers": '["+2348022222222"]',
                "display_image": image,
            },
            format="multipart",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        account = response.data["account"]
        self.assertEqual(account["market"], {"id": str(market.id), "name": "Computer Village"})
        self.assertTrue(account["referred"])
        self.assertEqual(account["phone_numbers"], ["+2348022222222"])
        self.assertEqual(account["addresses"][0]["state"], "Lagos")
        self.assertTrue(account["display_image"])

    def test_signup_with_unknown_referrer_creates_nothing(self):
        response = self.client.post(
            reverse("merchant-signup"),
            {
                "email": "nobody@example.com",
                "password": "Str0ng-password!",
                "brand_name": "Nobody",
                "referrer_code": "MISSING1",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Merchant.objects.exists())

    def test_merchant_login_is_separate_from_customer_login(self):
        merchant = MerchantFactory()

        merchant_login = self.client.post(
            reverse("merchant-login"), {"email": merchant.email, "password": "defaultpassword"}, format="json"
        )
        customer_login = self.client.post(
            reverse("customer-login"), {"email": merchant.email, "password": "defaultpassword"}, format="json"
        )

        self.assertEqual(merchant_login.status_code, status.HTTP_200_OK)
        self.assertEqual(merchant_login.data["subject_type"], "merchant")
        self.assertEqual(customer_login.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_merchant_refresh_token_rotation(self):
        merchant = MerchantFactory()
        login = self.client.post(
            reverse("merchant-login"), {"email": merchant.email, "password": "defaultpassword"}, format="json"
        )

        first = self.client.post(
            reverse("merchant-refresh-token"), {"refresh_token": login.data["refresh_token"]}, format="json"
        )
        replay = self.client.post(
            reverse("merchant-refresh-token"), {"refresh_token": login.data["refresh_token"]}, format="json"
        )

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(replay.status_code, status.HTTP_401_UNAUTHORIZED)
