from advertising.domain.models import Ad, AdStatus, Transaction, TransactionStatus

__all__ = ["Ad", "AdStatus", "Transaction", "TransactionStatus"]
