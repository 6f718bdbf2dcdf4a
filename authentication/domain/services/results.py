"""
Result objects for the authentication services.

These are the success values carried inside ``ServiceResult``.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AuthResult:
    """Tokens issued for an authenticated customer or merchant."""

    subject: Any
    access_token: str
    refresh_token: str
    created: bool = False


@dataclass
class RegisterResult:
    """Outcome of a successful signup."""

    subject: Any
    email_sent: bool = False


@dataclass
class TokenPair:
    access_token: str
    refresh_token: str
