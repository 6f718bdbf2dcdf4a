"""
Shared authentication flows for customers and merchants.

Both account types sign in with email and password (or a Google ID token),
verify their email with a six-digit code or a link token, and reset
passwords with a code. Subclasses choose the account model and implement
signup and Google account creation.
"""

from typing import Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.exceptions import TokenError

from authentication.api.serializers.jwt_serializers import SubjectRefreshToken, issue_token_pair
from authentication.infra.auth_providers.base import AuthProvider
from authentication.infra.observability.metrics import login_total, verification_emails_sent
from authentication.models import VerificationCode, VerificationPurpose
from infrastructure.email import EmailException, EmailMessage, EmailServiceInterface
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .results import AuthResult, TokenPair

EMAIL_SUBJECTS = {
    VerificationPurpose.EMAIL_VERIFICATION: "Verify your email address",
    VerificationPurpose.PASSWORD_RESET: "Reset your password",
}


class BaseAuthService(BaseService):
    subject_model = None
    subject_type = ""
    not_found_code = ErrorCodes.CUSTOMER_NOT_FOUND

    def __init__(self, email_service: EmailServiceInterface, google_provider: Optional[AuthProvider] = None):
        super().__init__()
        self.email_service = email_service
        self.google_provider = google_provider

    # Hooks

    def create_from_google(self, email: str, id_info: dict):
        raise NotImplementedError

    # Sign in

    @BaseService.log_performance
    def login(self, email: str, password: str) -> ServiceResult[AuthResult]:
        subject = self._find_by_email(email)
        if subject is None or not subject.is_active or not subject.check_password(password):
            self.logger.info(f"Failed {self.subject_type} login for {mask_value(email)}")
            login_total.labels(subject_type=self.subject_type, method="password", status="failed").inc()
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid email or password")
        login_total.labels(subject_type=self.subject_type, method="password", status="success").inc()
        return service_ok(self._authenticated(subject))

    @BaseService.log_performance
    def google_login(self, token: str) -> ServiceResult[AuthResult]:
        if self.google_provider is None:
            return service_err(ErrorCodes.IDENTITY_PROVIDER_ERROR, "Google sign-in is not configured")

        id_info = self.google_provider.verify_token(token)
        if not id_info or not id_info.get("email"):
            return service_err(ErrorCodes.INVALID_TOKEN, "Invalid Google token")
        if not id_info.get("email_verified", False):
            return service_err(ErrorCodes.INVALID_TOKEN, "Google account email is not verified")

        email = id_info["email"].lower()
        created = False
        with transaction.atomic():
            subject = self._find_by_email(email)
            if subject is None:
                subject = self.create_from_google(email, id_info)
                created = True
            if not subject.is_verified:
                subject.email_verified_at = timezone.now()
                subject.save(update_fields=["email_verified_at", "updated_at"])

        if not subject.is_active:
            login_total.labels(subject_type=self.subject_type, method="google", status="failed").inc()
            return service_err(ErrorCodes.INVALID_CREDENTIALS, "Account is inactive")
        login_total.labels(subject_type=self.subject_type, method="google", status="success").inc()
        result = self._authenticated(subject)
        result.created = created
        return service_ok(result)

    # Email verification

    @BaseService.log_performance
    def request_email_verification(self, email: str) -> ServiceResult[bool]:
        subject = self._find_by_email(email)
        if subject is None:
            return service_err(self.not_found_code, "No account found with this email address")
        if subject.is_verified:
            return service_ok(False)
        return service_ok(self.send_code(subject, VerificationPurpose.EMAIL_VERIFICATION))

    @BaseService.log_performance
    def verify_email(self, token=None, email: Optional[str] = None, code: Optional[str] = None) -> ServiceResult:
        codes = VerificationCode.objects.usable().filter(
            subject_type=self.subject_type, purpose=VerificationPurpose.EMAIL_VERIFICATION
        )
        if token is not None:
            record = codes.filter(token=token).first()
        elif email and code:
            record = codes.filter(email=email.lower(), code=code).order_by("-created_at").first()
        else:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Provide either a token or an email and code")

        if record is None:
            return service_err(ErrorCodes.INVALID_VERIFICATION_CODE, "Invalid or expired verification code")

        subject = self.subject_model.objects.filter(pk=record.subject_id).first()
        if subject is None:
            return service_err(ErrorCodes.INVALID_VERIFICATION_CODE, "Invalid or expired verification code")

        with transaction.atomic():
            record.is_used = True
            record.save(update_fields=["is_used"])
            if not subject.is_verified:
                subject.email_verified_at = timezone.now()
                subject.save(update_fields=["email_verified_at", "updated_at"])

        self.logger.info(f"{self.subject_type} {subject.id} verified their email")
        return service_ok(subject)

    # Passwords

    @BaseService.log_performance
    def forgot_password(self, email: str) -> ServiceResult[None]:
        subject = self._find_by_email(email)
        if subject is None:
            # Unknown emails get the same response as known ones.
            self.logger.info(f"Password reset requested for unknown {self.subject_type} {mask_value(email)}")
            return service_ok(None)
        self.send_code(subject, VerificationPurpose.PASSWORD_RESET)
        return service_ok(None)

    @BaseService.log_performance
    def reset_password(self, email: str, code: str, password: str) -> ServiceResult[None]:
        record = (
            VerificationCode.objects.usable()
            .filter(
                subject_type=self.subject_type,
                purpose=VerificationPurpose.PASSWORD_RESET,
                email=email.lower(),
                code=code,
            )
            .order_by("-created_at")
            .first()
        )
        subject = self.subject_model.objects.filter(pk=record.subject_id).first() if record else None
        if subject is None:
            return service_err(ErrorCodes.INVALID_VERIFICATION_CODE, "Invalid or expired reset code")

        with transaction.atomic():
            subject.set_password(password)
            subject.save(update_fields=["password", "updated_at"])
            VerificationCode.objects.for_subject(
                self.subject_type, subject.id, VerificationPurpose.PASSWORD_RESET
            ).update(is_used=True)

        self.logger.info(f"Password reset for {self.subject_type} {subject.id}")
        return service_ok(None)

    # Tokens

    @BaseService.log_performance
    def refresh(self, refresh_token: str) -> ServiceResult[TokenPair]:
        token = self._parse_refresh(refresh_token)
        if token is None:
            return service_err(ErrorCodes.INVALID_TOKEN, "Invalid or expired refresh token")

        subject = self.subject_model.objects.filter(pk=token.get("user_id"), is_active=True).first()
        if subject is None:
            return service_err(ErrorCodes.INVALID_TOKEN, "Invalid or expired refresh token")

        token.blacklist()
        pair = issue_token_pair(subject)
        return service_ok(TokenPair(access_token=pair["access"], refresh_token=pair["refresh"]))

    @BaseService.log_performance
    def logout(self, refresh_token: str) -> ServiceResult[None]:
        token = self._parse_refresh(refresh_token)
        if token is None:
            return service_err(ErrorCodes.INVALID_TOKEN, "Invalid or expired refresh token")
        token.blacklist()
        return service_ok(None)

    # Helpers

    def send_code(self, subject, purpose: str) -> bool:
        """Issue a fresh code (invalidating older ones) and email it. Returns whether the email went out."""
        VerificationCode.objects.for_subject(self.subject_type, subject.id, purpose).filter(is_used=False).update(
            is_used=True
        )
        record = VerificationCode.objects.create(
            subject_type=self.subject_type,
            subject_id=subject.id,
            email=subject.email,
            purpose=purpose,
        )

        link = f"{settings.FRONTEND_URL}/auth/{self.subject_type}/verify-email?token={record.token}"
        if purpose == VerificationPurpose.PASSWORD_RESET:
            link = f"{settings.FRONTEND_URL}/auth/{self.subject_type}/reset-password?email={subject.email}"

        body = (
            f"Your code is {record.code}. It expires in {settings.VERIFICATION_CODE_TTL_MINUTES} minutes.\n\n"
            f"You can also continue here: {link}"
        )
        message = EmailMessage(
            subject=EMAIL_SUBJECTS[purpose],
            body=body,
            to=[subject.email],
            tags=[purpose, self.subject_type],
        )
        try:
            sent = self.email_service.send(message)
        except EmailException as e:
            self.logger.error(f"Could not send {purpose} email to {mask_value(subject.email)}: {e}")
            sent = False
        verification_emails_sent.labels(purpose=purpose, status="sent" if sent else "failed").inc()
        return sent

    def _find_by_email(self, email: str):
        if not email:
            return None
        return self.subject_model.objects.filter(email__iexact=email.strip()).first()

    def _authenticated(self, subject) -> AuthResult:
        pair = issue_token_pair(subject)
        self.logger.info(f"{self.subject_type} {subject.id} signed in")
        return AuthResult(subject=subject, access_token=pair["access"], refresh_token=pair["refresh"])

    def _parse_refresh(self, refresh_token: str) -> Optional[SubjectRefreshToken]:
        try:
            token = SubjectRefreshToken(refresh_token)
        except TokenError as e:
            self.logger.info(f"Rejected refresh token: {e}")
            return None
        if token.get("subject_type") != self.subject_type:
            return None
        return token
