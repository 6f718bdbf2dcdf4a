from .marketer_serializers import (
    EarningsSummarySerializer,
    MarketerCreateSerializer,
    MarketerEarningSerializer,
    MarketerSerializer,
    MarketerUpdateSerializer,
    PayoutSerializer,
    ReferrerSerializer,
)

__all__ = [
    "MarketerSerializer",
    "ReferrerSerializer",
    "MarketerCreateSerializer",
    "MarketerUpdateSerializer",
    "MarketerEarningSerializer",
    "EarningsSummarySerializer",
    "PayoutSerializer",
]
