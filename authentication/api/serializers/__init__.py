from .auth_serializers import (
    CustomerSignupSerializer,
    EmailSerializer,
    GoogleLoginSerializer,
    LoginSerializer,
    MerchantSignupSerializer,
    RefreshTokenSerializer,
    ResetPasswordSerializer,
    VerifyEmailCodeSerializer,
    VerifyEmailTokenSerializer,
)
from .profile_serializers import (
    AddressSerializer,
    ConnectReferrerSerializer,
    CustomerSerializer,
    CustomerUpdateSerializer,
    MerchantSerializer,
    MerchantUpdateSerializer,
)

__all__ = [
    "CustomerSignupSerializer",
    "MerchantSignupSerializer",
    "LoginSerializer",
    "EmailSerializer",
    "VerifyEmailCodeSerializer",
    "VerifyEmailTokenSerializer",
    "ResetPasswordSerializer",
    "RefreshTokenSerializer",
    "GoogleLoginSerializer",
    "AddressSerializer",
    "CustomerSerializer",
    "CustomerUpdateSerializer",
    "MerchantSerializer",
    "MerchantUpdateSerializer",
    "ConnectReferrerSerializer",
]
