import secrets
import uuid
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone


class VerificationPurpose(models.TextChoices):
    EMAIL_VERIFICATION = "email_verification", "Email Verification"
    PASSWORD_RESET = "password_reset", "Password Reset"


class VerificationCodeQuerySet(models.QuerySet):
    def usable(self):
        return self.filter(is_used=False, expires_at__gt=timezone.now())

    def for_subject(self, subject_type, subject_id, purpose):
        return self.filter(subject_type=subject_type, subject_id=subject_id, purpose=purpose)


class VerificationCode(models.Model):
    """
    One-time six-digit code plus link token sent by email.

    Shared by customers and merchants, so the owner is stored as
    ``(subject_type, subject_id)`` rather than a foreign key.
    """

    subject_type = models.CharField(max_length=20)
    subject_id = models.UUIDField()
    email = models.EmailField()
    purpose = models.CharField(max_length=30, choices=VerificationPurpose.choices)
    code = models.CharField(max_length=6)
    token = models.UUIDField(default=uuid.uuid4, editable=False, unique=True)
    expires_at = models.DateTimeField()
    is_used = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = VerificationCodeQuerySet.as_manager()

    class Meta:
        app_label = "authentication"
        indexes = [
            models.Index(fields=["subject_type", "subject_id", "purpose"]),
            models.Index(fields=["email", "code"]),
        ]

    @staticmethod
    def generate_code() -> str:
        return f"{secrets.randbelow(1_000_000):06d}"

    def save(self, *args, **kwargs):
        if not self.code:
            self.code = self.generate_code()
        if not self.expires_at:
            self.expires_at = timezone.now() + timedelta(minutes=settings.VERIFICATION_CODE_TTL_MINUTES)
        super().save(*args, **kwargs)

    def is_expired(self):
        return timezone.now() > self.expires_at

    def __str__(self):
        return f"{self.purpose} code for {self.email}"
