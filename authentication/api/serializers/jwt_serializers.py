from rest_framework_simplejwt.tokens import RefreshToken

CUSTOMER_SUBJECT = "customer"
MERCHANT_SUBJECT = "merchant"


class SubjectRefreshToken(RefreshToken):
    """
    Refresh token carrying the subject type next to the subject id.

    Customers and merchants live in different tables, so ``user_id`` alone
    does not identify an account; ``subject_type`` says which table to read.
    """

    @classmethod
    def for_subject(cls, subject):
        token = cls()
        token["user_id"] = str(subject.id)
        token["subject_type"] = subject.subject_type
        token["role"] = getattr(subject, "role", None)
        token["verified"] = subject.is_verified
        return token


def issue_token_pair(subject) -> dict:
    """Return ``{"access", "refresh"}`` for a customer or merchant."""
    refresh = SubjectRefreshToken.for_subject(subject)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}
