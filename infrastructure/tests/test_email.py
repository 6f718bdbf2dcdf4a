"""
Email Infrastructure Tests
===========================

Unit tests for the SMTP and mock email services.
"""

from unittest.mock import patch

from django.core import mail
from django.test import TestCase, override_settings

from infrastructure.email import (
    EmailException,
    EmailFactory,
    EmailMessage,
    EmailServiceInterface,
    MockEmailService,
    SMTPEmailService,
)


def verification_message(**overrides):
    fields = {
        "subject": "Verify your email",
        "body": "Your code is 123456",
        "to": ["ada@example.com"],
        "tags": ["verification"],
    }
    fields.update(overrides)
    return EmailMessage(**fields)


class EmailInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            EmailServiceInterface()


@override_settings(
    EMAIL_BACKEND="django.core.mail.backends.locmem.EmailBackend",
    DEFAULT_FROM_EMAIL="Bazaar <noreply@bazaar.test>",
)
class SMTPEmailServiceTest(TestCase):
    """SMTPEmailService delivers through Django's configured backend."""

    def test_send_plain_text(self):
        sent = SMTPEmailService().send(verification_message())

        self.assertTrue(sent)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["ada@example.com"])
        self.assertEqual(mail.outbox[0].from_email, "Bazaar <noreply@bazaar.test>")

    def test_send_with_html_alternative(self):
        SMTPEmailService().send(verification_message(html_body="<p>Your code is <b>123456</b></p>"))

        self.assertEqual(mail.outbox[0].alternatives[0][1], "text/html")

    def test_explicit_sender_wins(self):
        SMTPEmailService().send(verification_message(from_email="support@bazaar.test"))

        self.assertEqual(mail.outbox[0].from_email, "support@bazaar.test")

    @patch("infrastructure.email.smtp_service.EmailMultiAlternatives.send")
    def test_backend_failure_raises(self, mock_send):
        mock_send.side_effect = OSError("SMTP server unavailable")

        with self.assertRaises(EmailException):
            SMTPEmailService().send(verification_message())


class MockEmailServiceTest(TestCase):
    def test_records_messages(self):
        service = MockEmailService()

        service.send(verification_message())
        service.send(verification_message(subject="Reset your password"))

        self.assertEqual(len(service.sent_messages), 2)
        self.assertEqual(service.get_last_message().subject, "Reset your password")

    def test_clear(self):
        service = MockEmailService()
        service.send(verification_message())

        service.clear_sent_messages()

        self.assertIsNone(service.get_last_message())


class EmailFactoryTest(TestCase):
    def test_create_explicit_backends(self):
        self.assertIsInstance(EmailFactory.create("smtp"), SMTPEmailService)
        self.assertIsInstance(EmailFactory.create("mock"), MockEmailService)

    @override_settings(INFRASTRUCTURE={})
    def test_testing_defaults_to_mock(self):
        self.assertIsInstance(EmailFactory.create(), MockEmailService)

    def test_invalid_backend(self):
        with self.assertRaises(ValueError):
            EmailFactory.create("pigeon")
