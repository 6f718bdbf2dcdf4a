from .contact import Address, PhoneNumber
from .customer import Customer, CustomerManager, CustomerRole
from .merchant import Merchant, MerchantManager
from .verification import VerificationCode, VerificationPurpose

__all__ = [
    "Customer",
    "CustomerManager",
    "CustomerRole",
    "Merchant",
    "MerchantManager",
    "Address",
    "PhoneNumber",
    "VerificationCode",
    "VerificationPurpose",
]
