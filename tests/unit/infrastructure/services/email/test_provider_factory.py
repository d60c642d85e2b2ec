"""Unit tests for message sender selection."""

import pytest

from genpass.infrastructure.services.email.console_provider import ConsoleEmailSender
from genpass.infrastructure.services.email.mock_provider import InMemoryEmailSender
from genpass.infrastructure.services.email.provider_factory import (
    EmailProviderType,
    create_message_sender,
)


@pytest.mark.parametrize(
    "provider_type,expected",
    [
        (EmailProviderType.CONSOLE, ConsoleEmailSender),
        (EmailProviderType.MOCK, InMemoryEmailSender),
        ("console", ConsoleEmailSender),
        ("mock", InMemoryEmailSender),
    ],
)
def test_create_message_sender(provider_type, expected):
    assert isinstance(create_message_sender(provider_type), expected)


def test_each_call_creates_new_sender():
    assert create_message_sender("mock") is not create_message_sender("mock")


def test_unknown_provider():
    with pytest.raises(ValueError):
        create_message_sender("smtp")
