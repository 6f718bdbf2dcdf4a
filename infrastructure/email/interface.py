"""Outgoing mail: the message shape and the sender contract."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EmailMessage:
    """A transactional mail such as a verification code or password reset.

    ``from_email`` falls back to DEFAULT_FROM_EMAIL. ``tags`` never reach the
    recipient; they label the message in logs and in the mock outbox.
    """

    subject: str
    body: str
    to: List[str]
    from_email: Optional[str] = None
    html_body: Optional[str] = None
    tags: List[str] = field(default_factory=list)


class EmailException(Exception):
    """Raised when the mail transport rejects a message."""


class EmailServiceInterface(ABC):
    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        """Deliver ``message``; returns True once the transport accepts it."""
        raise NotImplementedError
