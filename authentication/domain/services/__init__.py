from .base_auth_service import BaseAuthService
from .customer_auth_service import CustomerAuthService
from .customer_service import CustomerService
from .merchant_auth_service import MerchantAuthService
from .merchant_service import MerchantService
from .results import AuthResult, RegisterResult, TokenPair

__all__ = [
    "BaseAuthService",
    "CustomerAuthService",
    "MerchantAuthService",
    "CustomerService",
    "MerchantService",
    "AuthResult",
    "RegisterResult",
    "TokenPair",
]
