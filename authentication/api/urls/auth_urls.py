from django.urls import path

from authentication.api.serializers.jwt_serializers import CUSTOMER_SUBJECT, MERCHANT_SUBJECT
from authentication.api.views.auth_views import (
    CustomerSignupView,
    EmailVerificationRequestView,
    ForgotPasswordView,
    GoogleLoginView,
    LoginView,
    LogoutView,
    MerchantSignupView,
    RefreshTokenView,
    ResetPasswordView,
    VerifyEmailTokenView,
    VerifyEmailView,
)


def subject_patterns(subject_type):
    """The shared auth routes for one account type."""
    return [
        path(f"{subject_type}/login/", LoginView.as_view(subject_type=subject_type), name=f"{subject_type}-login"),
        path(
            f"{subject_type}/google/",
            GoogleLoginView.as_view(subject_type=subject_type),
            name=f"{subject_type}-google-login",
        ),
        path(
            f"{subject_type}/email-verification/",
            EmailVerificationRequestView.as_view(subject_type=subject_type),
            name=f"{subject_type}-email-verification",
        ),
        path(
            f"{subject_type}/verify-email/",
            VerifyEmailView.as_view(subject_type=subject_type),
            name=f"{subject_type}-verify-email",
        ),
        path(
            f"{subject_type}/verify-email-token/",
            VerifyEmailTokenView.as_view(subject_type=subject_type),
            name=f"{subject_type}-verify-email-token",
        ),
        path(
            f"{subject_type}/forgot-password/",
            ForgotPasswordView.as_view(subject_type=subject_type),
            name=f"{subject_type}-forgot-password",
        ),
        path(
            f"{subject_type}/reset-password/",
            ResetPasswordView.as_view(subject_type=subject_type),
            name=f"{subject_type}-reset-password",
        ),
        path(
            f"{subject_type}/refresh-token/",
            RefreshTokenView.as_view(subject_type=subject_type),
            name=f"{subject_type}-refresh-token",
        ),
        path(f"{subject_type}/logout/", LogoutView.as_view(subject_type=subject_type), name=f"{subject_type}-logout"),
    ]


urlpatterns = [
    path("customer/signup/", CustomerSignupView.as_view(), name="customer-signup"),
    path("merchant/signup/", MerchantSignupView.as_view(), name="merchant-signup"),
    *subject_patterns(CUSTOMER_SUBJECT),
    *subject_patterns(MERCHANT_SUBJECT),
]
