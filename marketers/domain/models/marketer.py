import secrets
import string
import uuid

from django.db import models

REFERRER_CODE_ALPHABET = string.ascii_uppercase + string.digits
REFERRER_CODE_LENGTH = 8


def generate_referrer_code() -> str:
    return "".join(secrets.choice(REFERRER_CODE_ALPHABET) for _ in range(REFERRER_CODE_LENGTH))


class Marketer(models.Model):
    """Referral profile attached to a customer account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.OneToOneField(
        "authentication.Customer", on_delete=models.CASCADE, related_name="marketer_profile"
    )
    username = models.CharField(max_length=50, unique=True)
    referrer_code = models.CharField(max_length=16, unique=True)
    verified = models.BooleanField(default=False)
    bank_name = models.CharField(max_length=100, blank=True)
    account_number = models.CharField(max_length=20, blank=True)
    account_name = models.CharField(max_length=150, blank=True)
    identity_credential_image = models.URLField(max_length=500, blank=True)
    identity_credential_key = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketers"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.username} ({self.referrer_code})"
