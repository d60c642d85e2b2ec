"""Unit tests for the email message model."""

import pytest
from pydantic import ValidationError

from genpass.infrastructure.services.email.email_message import EmailMessage


def test_build_message():
    message = EmailMessage(
        from_address="noreply@example.com",
        to=["a@example.com", "b@example.com"],
        subject="Hello",
        text_body="Text",
        html_body="<p>HTML</p>",
    )

    assert message.to == ("a@example.com", "b@example.com")
    assert message.subject == "Hello"


def test_single_recipient_string():
    message = EmailMessage(to="a@example.com")
    assert message.to == ("a@example.com",)
    assert message.text_body is None
    assert message.html_body is None


def test_recipients_are_trimmed_and_blanks_dropped():
    message = EmailMessage(to=[" a@example.com ", "", "   "])
    assert message.to == ("a@example.com",)


@pytest.mark.parametrize("to", [[], "", ["  "]])
def test_recipient_required(to):
    with pytest.raises(ValidationError, match="At least one recipient"):
        EmailMessage(to=to)


def test_message_is_immutable():
    message = EmailMessage(to="a@example.com", subject="Hello")
    with pytest.raises(ValidationError):
        message.subject = "Changed"


def test_str_omits_bodies():
    message = EmailMessage(
        from_address="noreply@example.com",
        to="a@example.com",
        subject="Hello",
        text_body="secret link",
    )
    text = str(message)
    assert "a@example.com" in text
    assert "Hello" in text
    assert "secret link" not in text
