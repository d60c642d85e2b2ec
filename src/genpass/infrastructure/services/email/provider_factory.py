"""Message sender selection."""

from enum import Enum

from genpass.infrastructure.services.email.console_provider import ConsoleEmailSender
from genpass.infrastructure.services.email.email_provider import MessageSender
from genpass.infrastructure.services.email.mock_provider import InMemoryEmailSender


class EmailProviderType(str, Enum):
    """Built-in message senders."""

    CONSOLE = "console"
    MOCK = "mock"


def create_message_sender(provider_type: EmailProviderType | str) -> MessageSender:
    """Create a built-in message sender.

    Args:
        provider_type: Provider type or its string value (e.g. from settings).

    Returns:
        A new sender instance.

    Raises:
        ValueError: If the provider type is unknown.
    """
    provider_type = EmailProviderType(provider_type)
    if provider_type is EmailProviderType.CONSOLE:
        return ConsoleEmailSender()
    return InMemoryEmailSender()
