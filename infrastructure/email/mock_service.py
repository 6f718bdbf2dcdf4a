"""In-memory outbox used by tests and local development."""

import logging
from typing import List, Optional

from .interface import EmailMessage, EmailServiceInterface

logger = logging.getLogger(__name__)


class MockEmailService(EmailServiceInterface):
    def __init__(self):
        self.sent_messages: List[EmailMessage] = []

    def send(self, message: EmailMessage) -> bool:
        self.sent_messages.append(message)
        logger.info(
            f"Captured email #{len(self.sent_messages)} for {', '.join(message.to)} "
            f"(tags={message.tags or '-'}): {message.subject}"
        )
        return True

    def clear_sent_messages(self):
        del self.sent_messages[:]

    def get_last_message(self) -> Optional[EmailMessage]:
        if not self.sent_messages:
            return None
        return self.sent_messages[-1]
