"""Collaborators the advertising domain depends on but does not own."""

from abc import ABC, abstractmethod
from decimal import Decimal


class EarningsRecorder(ABC):
    """Credits referral commission when a merchant pays for an ad."""

    @abstractmethod
    def record_referral_earning(self, ad, ad_price: Decimal):
        """
        Record the commission for ``ad`` if its merchant was referred.

        Must be idempotent per ad. Returns the earning record, or None when
        the merchant has no referrer.
        """
        pass
