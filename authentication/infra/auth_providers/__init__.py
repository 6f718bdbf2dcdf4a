from .base import AuthProvider
from .google import GoogleAuthProvider

__all__ = ["AuthProvider", "GoogleAuthProvider"]
