"""Abstract base class for message senders.

Defines the interface that all email senders must implement.
"""

from abc import ABC, abstractmethod

from genpass.infrastructure.services.email.email_message import EmailMessage


class MessageSender(ABC):
    """Abstract base class for message senders.

    Real delivery (SMTP, HTTP APIs) is provided by the calling system as a
    subclass; GenPass ships console and in-memory senders only.
    """

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Send a fully built message.

        Args:
            message: The message to deliver.

        Raises:
            EmailDeliveryError: If the message could not be delivered.
        """
        pass
