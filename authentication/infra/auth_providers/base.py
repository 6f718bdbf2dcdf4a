"""Contract for third-party identity providers used by social login."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class AuthProvider(ABC):
    @abstractmethod
    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Check an ID token issued to our client.

        Returns the token claims (``email``, ``email_verified``,
        ``given_name``, ``family_name``, ``picture``) or None when the token
        is rejected.
        """
        raise NotImplementedError
