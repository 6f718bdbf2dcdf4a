from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from .profile_serializers import AddressSerializer, MultipartListsMixin


class SignupBaseSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})
    addresses = AddressSerializer(many=True, required=False)
    phone_numbers = serializers.ListField(
        child=serializers.CharField(max_length=20), max_length=2, required=False
    )

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        validate_password(value)
        return value


class CustomerSignupSerializer(SignupBaseSerializer):
    first_name = serializers.CharField(max_length=50)
    last_name = serializers.CharField(max_length=50)


class MerchantSignupSerializer(MultipartListsMixin, SignupBaseSerializer):
    brand_name = serializers.CharField(max_length=120)
    market_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    referrer_code = serializers.CharField(max_length=16, required=False, allow_blank=True)
    referrer_username = serializers.CharField(max_length=50, required=False, allow_blank=True)
    display_image = serializers.FileField(required=False, write_only=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


class EmailSerializer(serializers.Serializer):
    email = serializers.EmailField()


class VerifyEmailCodeSerializer(serializers.Serializer):
    email = serializers.EmailField()
    code = serializers.RegexField(r"^\d{6}$", error_messages={"invalid": "Code must be 6 digits."})


class VerifyEmailTokenSerializer(serializers.Serializer):
    token = serializers.UUIDField()


class ResetPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()
    code = serializers.RegexField(r"^\d{6}$", error_messages={"invalid": "Code must be 6 digits."})
    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate_password(self, value):
        validate_password(value)
        return value


class RefreshTokenSerializer(serializers.Serializer):
    refresh_token = serializers.CharField()


class GoogleLoginSerializer(serializers.Serializer):
    id_token = serializers.CharField(help_text="Google ID token obtained by the client")
