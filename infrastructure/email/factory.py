"""Builds the email service named in ``settings.INFRASTRUCTURE``."""

import logging
from typing import Literal

from django.conf import settings

from .interface import EmailServiceInterface
from .mock_service import MockEmailService
from .smtp_service import SMTPEmailService

logger = logging.getLogger(__name__)

EmailBackend = Literal["smtp", "mock"]

_SERVICES = {
    "smtp": SMTPEmailService,
    "mock": MockEmailService,
}


def _configured_backend() -> str:
    # Test runs never talk to a mail server unless told to.
    fallback = "mock" if getattr(settings, "TESTING", False) else "smtp"
    return getattr(settings, "INFRASTRUCTURE", {}).get("EMAIL_BACKEND_TYPE", fallback)


class EmailFactory:
    @staticmethod
    def create(backend: EmailBackend | None = None) -> EmailServiceInterface:
        name = backend or _configured_backend()
        service_class = _SERVICES.get(name)
        if service_class is None:
            raise ValueError(f"Unknown email backend {name!r}; expected one of {sorted(_SERVICES)}")

        logger.info(f"Email backend selected: {name}")
        return service_class()
