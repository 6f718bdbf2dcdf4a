from .ad_serializers import (
    AdCountersSerializer,
    AdListQuerySerializer,
    AdPaymentRequestSerializer,
    AdSerializer,
    PaymentInitializationSerializer,
    TransactionSerializer,
    VerificationOutcomeSerializer,
)

__all__ = [
    "AdSerializer",
    "AdCountersSerializer",
    "AdListQuerySerializer",
    "AdPaymentRequestSerializer",
    "PaymentInitializationSerializer",
    "TransactionSerializer",
    "VerificationOutcomeSerializer",
]
