"""In-memory message sender.

Stores messages instead of delivering them, for tests and demos.
"""

import threading

from genpass.core.logging import get_logger
from genpass.infrastructure.services.email.email_message import EmailMessage
from genpass.infrastructure.services.email.email_provider import MessageSender

logger = get_logger(__name__)


class InMemoryEmailSender(MessageSender):
    """Sender that records every message it is given.

    The message list is guarded by a lock so one instance can be shared
    across threads and event loops.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        with self._lock:
            self._messages.append(message)
            total = len(self._messages)
        logger.info("Mock email stored", total_stored=total)

    @property
    def sent_messages(self) -> list[EmailMessage]:
        """Snapshot of the messages sent so far."""
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        """Forget all stored messages."""
        with self._lock:
            self._messages.clear()
