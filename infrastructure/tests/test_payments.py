"""
Payment Infrastructure Tests
==============================

Unit tests for payment provider abstraction layer.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import requests
from django.test import TestCase, override_settings

from infrastructure.payments import (
    MockPaymentProvider,
    PaymentException,
    PaymentFactory,
    PaymentProviderInterface,
    PaymentStatus,
    PaystackProvider,
)
from infrastructure.payments.paystack_provider import from_minor_units, to_minor_units


def gateway_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class PaymentInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        """PaymentProviderInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            PaymentProviderInterface()

    def test_gateway_status_normalization(self):
        self.assertEqual(PaymentStatus.from_gateway("success"), PaymentStatus.SUCCESS)
        self.assertEqual(PaymentStatus.from_gateway(" Failed "), PaymentStatus.FAILED)
        self.assertEqual(PaymentStatus.from_gateway("reversed"), PaymentStatus.FAILED)
        self.assertEqual(PaymentStatus.from_gateway("abandoned"), PaymentStatus.ABANDONED)
        self.assertEqual(PaymentStatus.from_gateway("ongoing"), PaymentStatus.PENDING)
        self.assertEqual(PaymentStatus.from_gateway(None), PaymentStatus.PENDING)

    def test_minor_unit_conversion(self):
        self.assertEqual(to_minor_units(Decimal("3500.00")), 350000)
        self.assertEqual(to_minor_units(Decimal("0.005")), 1)
        self.assertEqual(from_minor_units(200050), Decimal("2000.50"))


@override_settings(
    PAYSTACK_SECRET_KEY="sk_test_fake",
    PAYSTACK_BASE_URL="https://api.paystack.test",
    PAYSTACK_CALLBACK_URL="https://bazaar.test/ads/callback",
)
class PaystackProviderTest(TestCase):
    """Test PaystackProvider with the HTTP session mocked."""

    def setUp(self):
        self.session = MagicMock(spec=requests.Session)
        self.session.headers = {}
        self.provider = PaystackProvider(session=self.session)

    def test_session_is_authorized(self):
        self.assertEqual(self.session.headers["Authorization"], "Bearer sk_test_fake")

    def test_initialize_transaction(self):
        """Amounts go out in kobo and the checkout URL comes back."""
        self.session.request.return_value = gateway_response(
            body={
                "status": True,
                "data": {
                    "authorization_url": "https://checkout.paystack.com/abc",
                    "access_code": "abc",
                    "reference": "ref_123",
                },
            }
        )

        result = self.provider.initialize_transaction(
            email="shop@example.com", amount=Decimal("2000.00"), currency="ngn", reference="ref_123"
        )

        self.assertEqual(result.authorization_url, "https://checkout.paystack.com/abc")
        self.assertEqual(result.reference, "ref_123")
        method, url = self.session.request.call_args.args
        payload = self.session.request.call_args.kwargs["json"]
        self.assertEqual((method, url), ("POST", "https://api.paystack.test/transaction/initialize"))
        self.assertEqual(payload["amount"], 200000)
        self.assertEqual(payload["currency"], "NGN")
        self.assertEqual(payload["callback_url"], "https://bazaar.test/ads/callback")

    def test_initialize_with_incomplete_response(self):
        self.session.request.return_value = gateway_response(body={"status": True, "data": {"reference": "r"}})

        with self.assertRaises(PaymentException):
            self.provider.initialize_transaction(email="shop@example.com", amount=Decimal("1"), currency="NGN")

    def test_verify_transaction(self):
        self.session.request.return_value = gateway_response(
            body={
                "status": True,
                "data": {
                    "reference": "ref_123",
                    "status": "success",
                    "amount": 350000,
                    "currency": "NGN",
                    "paid_at": "2026-01-05T10:00:00.000Z",
                },
            }
        )

        result = self.provider.verify_transaction("ref_123")

        self.assertTrue(result.succeeded)
        self.assertEqual(result.amount, Decimal("3500.00"))
        self.assertEqual(result.paid_at, "2026-01-05T10:00:00.000Z")

    def test_verify_escapes_reference_in_path(self):
        self.session.request.return_value = gateway_response(
            body={"status": True, "data": {"reference": "a/b?c", "status": "failed", "amount": 0}}
        )

        self.provider.verify_transaction("a/b?c")

        _, url = self.session.request.call_args.args
        self.assertEqual(url, "https://api.paystack.test/transaction/verify/a%2Fb%3Fc")

    def test_gateway_rejection(self):
        self.session.request.return_value = gateway_response(
            status_code=400, body={"status": False, "message": "Transaction reference not found"}
        )

        with self.assertRaisesMessage(PaymentException, "Transaction reference not found"):
            self.provider.verify_transaction("missing")

    def test_non_json_response(self):
        response = gateway_response(status_code=502)
        response.json.side_effect = ValueError("not json")
        self.session.request.return_value = response

        with self.assertRaises(PaymentException):
            self.provider.verify_transaction("ref_123")

    def test_network_error(self):
        self.session.request.side_effect = requests.ConnectionError("no route to host")

        with self.assertRaises(PaymentException):
            self.provider.verify_transaction("ref_123")

    def test_close_releases_session(self):
        self.provider.close()

        self.session.close.assert_called_once()


class MockPaymentProviderTest(TestCase):
    def setUp(self):
        self.provider = MockPaymentProvider()

    def test_initialized_transactions_verify_as_paid(self):
        init = self.provider.initialize_transaction(email="a@example.com", amount=Decimal("6000"), currency="NGN")

        result = self.provider.verify_transaction(init.reference)

        self.assertTrue(result.succeeded)
        self.assertEqual(result.amount, Decimal("6000"))
        self.assertEqual(self.provider.verify_calls, [init.reference])

    def test_forced_outcome(self):
        init = self.provider.initialize_transaction(email="a@example.com", amount=Decimal("6000"), currency="NGN")
        self.provider.set_outcome(init.reference, PaymentStatus.ABANDONED, amount=Decimal("0"))

        result = self.provider.verify_transaction(init.reference)

        self.assertEqual(result.status, PaymentStatus.ABANDONED)
        self.assertEqual(result.amount, Decimal("0"))

    def test_fail_next_affects_one_call(self):
        self.provider.fail_next("gateway down")

        with self.assertRaises(PaymentException):
            self.provider.initialize_transaction(email="a@example.com", amount=Decimal("1"), currency="NGN")
        self.provider.initialize_transaction(email="a@example.com", amount=Decimal("1"), currency="NGN")

    def test_unknown_reference(self):
        with self.assertRaises(PaymentException):
            self.provider.verify_transaction("nope")


class PaymentFactoryTest(TestCase):
    @override_settings(PAYSTACK_SECRET_KEY="sk_test_fake")
    def test_create_paystack(self):
        self.assertIsInstance(PaymentFactory.create("paystack"), PaystackProvider)

    def test_create_mock(self):
        self.assertIsInstance(PaymentFactory.create("mock"), MockPaymentProvider)

    def test_invalid_backend(self):
        with self.assertRaises(ValueError):
            PaymentFactory.create("stripe")
