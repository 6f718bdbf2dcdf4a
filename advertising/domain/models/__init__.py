from .ad import Ad, AdStatus
from .transaction import Transaction, TransactionStatus

__all__ = ["Ad", "AdStatus", "Transaction", "TransactionStatus"]
