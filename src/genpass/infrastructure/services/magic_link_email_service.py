"""Magic link and OTP email composition.

Builds sign-in emails around freshly issued tokens and hands them to a
MessageSender. Tokens and codes are returned to the caller but never logged.
"""

from datetime import timedelta
from urllib.parse import urlencode

from genpass.core.config import Settings, get_settings
from genpass.core.logging import get_logger
from genpass.infrastructure.auth.magic_link_service import MagicLinkTokenService
from genpass.infrastructure.auth.otp_generator import DefaultOtpGenerator, OtpGenerator
from genpass.infrastructure.services.email.email_message import EmailMessage
from genpass.infrastructure.services.email.email_provider import MessageSender
from genpass.infrastructure.services.email.template_renderer import EmailTemplate, TemplateRenderer

logger = get_logger(__name__)

MAGIC_LINK_TEMPLATE = EmailTemplate(
    name="magic_link",
    subject="Your sign-in link for {{ app_name }}",
    text_body="""\
Hello,

Use the link below to sign in to {{ app_name }}:

{{ link }}

This link expires in {{ expires_in_minutes }} minutes.
If you did not request it, you can safely ignore this email.
""",
    html_body="""\
<p>Hello,</p>
<p>Use the link below to sign in to {{ app_name }}:</p>
<p><a href="{{ link }}">Sign in</a></p>
<p>This link expires in {{ expires_in_minutes }} minutes.<br>
If you did not request it, you can safely ignore this email.</p>
""",
)

OTP_TEMPLATE = EmailTemplate(
    name="otp",
    subject="Your {{ app_name }} verification code",
    text_body="""\
Your verification code is: {{ code }}

It expires in {{ expires_in_minutes }} minutes.
""",
    html_body="""\
<p>Your verification code is: <strong>{{ code }}</strong></p>
<p>It expires in {{ expires_in_minutes }} minutes.</p>
""",
)


def _minutes(ttl: timedelta) -> str:
    return str(max(1, int(ttl.total_seconds() // 60)))


class MagicLinkEmailService:
    """Service for emailing magic links and one-time codes."""

    def __init__(
        self,
        token_service: MagicLinkTokenService,
        sender: MessageSender,
        settings: Settings | None = None,
        otp_generator: OtpGenerator | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Initialize the magic link email service.

        Args:
            token_service: Service used to issue magic link tokens.
            sender: Sender that delivers the built messages.
            settings: Settings for URLs, TTLs and the sender address.
            otp_generator: Generator for emailed codes.
            renderer: Renderer for the email templates.
        """
        self.token_service = token_service
        self.sender = sender
        self.settings = settings or get_settings()
        self.otp_generator = otp_generator or DefaultOtpGenerator()
        self.renderer = renderer or TemplateRenderer()

    @property
    def from_address(self) -> str:
        return f"{self.settings.email_from_name} <{self.settings.email_from_address}>"

    def build_link(self, token: str) -> str:
        """Build the sign-in URL carrying a token."""
        query = urlencode({"token": token})
        return f"{self.settings.magic_link_base_url}{self.settings.magic_link_path}?{query}"

    def _build_message(
        self, to: str, template: EmailTemplate, variables: dict[str, str]
    ) -> EmailMessage:
        rendered = self.renderer.render(template, variables)
        return EmailMessage(
            from_address=self.from_address,
            to=[to],
            subject=rendered.subject,
            text_body=rendered.text_body,
            html_body=rendered.html_body,
        )

    async def send_magic_link(self, email: str, ttl: timedelta | None = None) -> str:
        """Issue a magic link token for an email address and send it.

        Args:
            email: Recipient address, also used as the token subject.
            ttl: Link lifetime. Defaults to the configured magic link TTL.

        Returns:
            The issued token.

        Raises:
            InvalidArgumentError: If the address cannot be a token subject.
            EmailDeliveryError: If the sender fails.
        """
        if ttl is None:
            ttl = timedelta(seconds=self.settings.magic_link_ttl_seconds)

        token = self.token_service.issue(email, ttl)
        variables = {
            "app_name": self.settings.app_name,
            "link": self.build_link(token),
            "expires_in_minutes": _minutes(ttl),
        }
        message = self._build_message(email, MAGIC_LINK_TEMPLATE, variables)
        await self.sender.send(message)

        logger.info("Magic link sent", recipients=list(message.to))
        return token

    async def send_otp(self, email: str) -> str:
        """Generate a one-time code and email it.

        The code is not stored; the caller keeps it for comparison.

        Returns:
            The generated 6-digit code.
        """
        code = self.otp_generator.generate()
        variables = {
            "app_name": self.settings.app_name,
            "code": code,
            "expires_in_minutes": _minutes(timedelta(seconds=self.settings.otp_ttl_seconds)),
        }
        message = self._build_message(email, OTP_TEMPLATE, variables)
        await self.sender.send(message)

        logger.info("OTP email sent", recipients=list(message.to))
        return code
