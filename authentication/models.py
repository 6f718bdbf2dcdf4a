from authentication.domain.models import (
    Address,
    Customer,
    CustomerRole,
    Merchant,
    PhoneNumber,
    VerificationCode,
    VerificationPurpose,
)

__all__ = [
    "Customer",
    "CustomerRole",
    "Merchant",
    "Address",
    "PhoneNumber",
    "VerificationCode",
    "VerificationPurpose",
]
