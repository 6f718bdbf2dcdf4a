"""
Authentication endpoints shared by customers and merchants.

Each view is mounted twice, once per account type; ``subject_type`` is
passed to ``as_view`` and selects the auth service from the container.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    CustomerSerializer,
    CustomerSignupSerializer,
    EmailSerializer,
    GoogleLoginSerializer,
    LoginSerializer,
    MerchantSerializer,
    MerchantSignupSerializer,
    RefreshTokenSerializer,
    ResetPasswordSerializer,
    VerifyEmailCodeSerializer,
    VerifyEmailTokenSerializer,
)
from authentication.api.serializers.jwt_serializers import CUSTOMER_SUBJECT, MERCHANT_SUBJECT
from authentication.api.serializers.response_serializers import (
    AuthResponseSerializer,
    ErrorResponseSerializer,
    MessageResponseSerializer,
    RegisterResponseSerializer,
    TokenPairResponseSerializer,
)
from infrastructure.container import container
from utils.responses import service_response

ACCOUNT_SERIALIZERS = {
    CUSTOMER_SUBJECT: CustomerSerializer,
    MERCHANT_SUBJECT: MerchantSerializer,
}


def serialize_auth(result) -> dict:
    return {
        "access_token": result.access_token,
        "refresh_token": result.refresh_token,
        "subject_type": result.subject.subject_type,
        "account": ACCOUNT_SERIALIZERS[result.subject.subject_type](result.subject).data,
        "created": result.created,
    }


class SubjectAuthView(APIView):
    """Base for views mounted per account type."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    subject_type = CUSTOMER_SUBJECT

    def get_service(self):
        if self.subject_type == MERCHANT_SUBJECT:
            return container.merchant_auth_service()
        return container.customer_auth_service()


class CustomerSignupView(SubjectAuthView):
    subject_type = CUSTOMER_SUBJECT

    @extend_schema(
        operation_id="customer_signup",
        summary="Register a customer account",
        description="Creates the account and emails a six digit verification code plus a verification link.",
        request=CustomerSignupSerializer,
        responses={
            201: RegisterResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid input"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email already registered"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = CustomerSignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().register(serializer.validated_data)
        return service_response(
            result,
            lambda registered: {
                "message": "Account created. Check your email for the verification code.",
                "email_sent": registered.email_sent,
                "account": CustomerSerializer(registered.subject).data,
            },
            success_status=status.HTTP_201_CREATED,
        )


class MerchantSignupView(SubjectAuthView):
    subject_type = MERCHANT_SUBJECT

    @extend_schema(
        operation_id="merchant_signup",
        summary="Register a merchant account",
        description="""
        Multipart or JSON body. Optional `display_image` file, optional
        `market_name` (must exist) and optional `referrer_code` linking the
        merchant to a verified marketer.
        """,
        request=MerchantSignupSerializer,
        responses={
            201: RegisterResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid input or unverified marketer"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Market or referrer not found"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email or brand name taken"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = MerchantSignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        display_image = data.pop("display_image", None)
        result = self.get_service().register(data, display_image=display_image)
        return service_response(
            result,
            lambda registered: {
                "message": "Account created. Check your email for the verification code.",
                "email_sent": registered.email_sent,
                "account": MerchantSerializer(registered.subject).data,
            },
            success_status=status.HTTP_201_CREATED,
        )


class LoginView(SubjectAuthView):
    @extend_schema(
        summary="Login with email and password",
        request=LoginSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().login(serializer.validated_data["email"], serializer.validated_data["password"])
        return service_response(result, serialize_auth)


class GoogleLoginView(SubjectAuthView):
    @extend_schema(
        summary="Sign in with a Google ID token",
        description="Creates the account on first sign-in. Google verified emails count as verified.",
        request=GoogleLoginSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid Google token"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = GoogleLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().google_login(serializer.validated_data["id_token"])
        return service_response(result, serialize_auth)


class EmailVerificationRequestView(SubjectAuthView):
    @extend_schema(
        summary="Send a new email verification code",
        request=EmailSerializer,
        responses={200: MessageResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = EmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().request_email_verification(serializer.validated_data["email"])
        return service_response(
            result,
            lambda sent: {
                "message": "Verification code sent." if sent else "Email is already verified.",
                "email_sent": sent,
            },
        )


class VerifyEmailView(SubjectAuthView):
    @extend_schema(
        summary="Verify email with the six digit code",
        request=VerifyEmailCodeSerializer,
        responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = VerifyEmailCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().verify_email(
            email=serializer.validated_data["email"], code=serializer.validated_data["code"]
        )
        return service_response(result, lambda subject: {"message": "Email verified."})


class VerifyEmailTokenView(SubjectAuthView):
    @extend_schema(
        summary="Verify email with the token from the email link",
        request=VerifyEmailTokenSerializer,
        responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = VerifyEmailTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().verify_email(token=serializer.validated_data["token"])
        return service_response(result, lambda subject: {"message": "Email verified."})


class ForgotPasswordView(SubjectAuthView):
    @extend_schema(
        summary="Email a password reset code",
        description="Always answers 200 so the endpoint cannot be used to probe for accounts.",
        request=EmailSerializer,
        responses={200: MessageResponseSerializer},
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = EmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().forgot_password(serializer.validated_data["email"])
        return service_response(
            result, lambda _: {"message": "If an account exists for this email, a reset code has been sent."}
        )


class ResetPasswordView(SubjectAuthView):
    @extend_schema(
        summary="Set a new password using the reset code",
        request=ResetPasswordSerializer,
        responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def put(self, request):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().reset_password(**serializer.validated_data)
        return service_response(result, lambda _: {"message": "Password updated."})


class RefreshTokenView(SubjectAuthView):
    @extend_schema(
        summary="Exchange a refresh token for a new token pair",
        description="The submitted refresh token is blacklisted.",
        request=RefreshTokenSerializer,
        responses={200: TokenPairResponseSerializer, 401: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = RefreshTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().refresh(serializer.validated_data["refresh_token"])
        return service_response(
            result, lambda pair: {"access_token": pair.access_token, "refresh_token": pair.refresh_token}
        )


class LogoutView(SubjectAuthView):
    @extend_schema(
        summary="Blacklist a refresh token",
        request=RefreshTokenSerializer,
        responses={200: MessageResponseSerializer, 401: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def delete(self, request):
        serializer = RefreshTokenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().logout(serializer.validated_data["refresh_token"])
        return service_response(result, lambda _: {"message": "Logged out."})
