"""
Google Authentication Provider Implementation.
"""

import logging
from typing import Any, Dict, Optional

from django.conf import settings
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from .base import AuthProvider

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class GoogleAuthProvider(AuthProvider):
    """
    Implementation of AuthProvider for Google Sign-In ID tokens.
    """

    def __init__(self, client_id: Optional[str] = None):
        self.client_id = client_id or getattr(settings, "GOOGLE_OAUTH_CLIENT_ID", "")
        self._transport = google_requests.Request()

    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        if not self.client_id:
            logger.error("GOOGLE_OAUTH_CLIENT_ID is not configured")
            return None

        try:
            id_info = id_token.verify_oauth2_token(token, self._transport, self.client_id)
        except ValueError as e:
            logger.warning(f"Invalid Google token: {e}")
            return None

        if id_info.get("iss") not in GOOGLE_ISSUERS:
            logger.warning("Invalid Google token issuer")
            return None

        return id_info
