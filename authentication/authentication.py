"""
DRF authentication for customer and merchant bearer tokens.

The token only selects the account; role and verification status on the
``AuthContext`` are read from the database row, not trusted from claims.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken

from authentication.api.serializers.jwt_serializers import CUSTOMER_SUBJECT, MERCHANT_SUBJECT
from authentication.models import Customer, Merchant

logger = logging.getLogger(__name__)

SUBJECT_MODELS = {
    CUSTOMER_SUBJECT: Customer,
    MERCHANT_SUBJECT: Merchant,
}


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, exposed to views as ``request.auth``."""

    subject_id: str
    subject_type: str
    role: Optional[str]
    verified: bool

    @classmethod
    def for_subject(cls, subject) -> "AuthContext":
        return cls(
            subject_id=str(subject.id),
            subject_type=subject.subject_type,
            role=getattr(subject, "role", None),
            verified=subject.is_verified,
        )


class SubjectJWTAuthentication(JWTAuthentication):
    """Authenticate ``Authorization: Bearer <access>`` as a Customer or Merchant."""

    def authenticate(self, request):
        result = super().authenticate(request)
        if result is None:
            return None
        subject, _validated_token = result
        return subject, AuthContext.for_subject(subject)

    def get_user(self, validated_token):
        subject_type = validated_token.get("subject_type")
        model = SUBJECT_MODELS.get(subject_type)
        if model is None:
            raise InvalidToken("Token has no valid subject type")

        subject_id = validated_token.get("user_id")
        if not subject_id:
            raise InvalidToken("Token contained no recognizable subject identification")

        try:
            subject = model.objects.get(pk=subject_id)
        except (model.DoesNotExist, ValueError):
            logger.info(f"Token for missing {subject_type} {subject_id}")
            raise AuthenticationFailed("Account not found", code="user_not_found")

        if not subject.is_active:
            raise AuthenticationFailed("Account is inactive", code="user_inactive")
        return subject
