"""
Response Serializers for API Documentation

These serializers describe response bodies for OpenAPI schema generation
only; they never validate input.
"""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField(help_text="Machine readable error code")
    detail = serializers.CharField(help_text="Human readable message")


class TokenPairResponseSerializer(serializers.Serializer):
    access_token = serializers.CharField(help_text="JWT access token")
    refresh_token = serializers.CharField(help_text="JWT refresh token")


class AuthResponseSerializer(TokenPairResponseSerializer):
    subject_type = serializers.ChoiceField(choices=["customer", "merchant"])
    account = serializers.DictField(help_text="Customer or merchant profile")
    created = serializers.BooleanField(help_text="True when a Google sign-in created the account")


class RegisterResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    email_sent = serializers.BooleanField()
    account = serializers.DictField(help_text="Customer or merchant profile")


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
