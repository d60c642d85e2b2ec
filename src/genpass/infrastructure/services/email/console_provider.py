"""Console message sender.

Prints messages to a text stream instead of delivering them. Intended for
local development, where the magic link can be copied from the terminal.
"""

import sys
from datetime import datetime, timezone
from typing import TextIO

from genpass.core.exceptions import EmailDeliveryError
from genpass.core.logging import get_logger
from genpass.infrastructure.services.email.email_message import EmailMessage
from genpass.infrastructure.services.email.email_provider import MessageSender

logger = get_logger(__name__)

_RULE = "-" * 59

_TEMPLATE = """\
================== GenPass Console Email ==================
Time     : {time}
From     : {from_address}
To       : {to}
Subject  : {subject}
{rule}
TEXT BODY:
{text_body}
{rule}
HTML BODY:
{html_body}
===========================================================
"""


class ConsoleEmailSender(MessageSender):
    """Sender that writes each message to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the console sender.

        Args:
            stream: Stream to write to. Resolved at send time when omitted,
                so redirected stdout is honoured.
        """
        self._stream = stream

    def format_message(self, message: EmailMessage) -> str:
        return _TEMPLATE.format(
            time=datetime.now(timezone.utc).isoformat(),
            from_address=message.from_address or "",
            to=", ".join(message.to),
            subject=message.subject or "",
            rule=_RULE,
            text_body=message.text_body or "",
            html_body=message.html_body or "",
        )

    async def send(self, message: EmailMessage) -> None:
        stream = self._stream or sys.stdout
        try:
            stream.write(self.format_message(message))
            stream.flush()
        except (OSError, ValueError) as e:
            logger.error("Failed to print email to console", error=str(e))
            raise EmailDeliveryError("Failed to print email to console") from e

        logger.info("Email printed to console", recipients=list(message.to))
