"""Command-line interface for GenPass.

This module provides commands for generating random tokens and OTP codes,
and for issuing, verifying and emailing magic link tokens.
"""

import asyncio
import sys
from datetime import timedelta
from typing import NoReturn

import click

from genpass import __version__
from genpass.core.config import get_settings
from genpass.core.exceptions import InvalidArgumentError
from genpass.core.logging import configure_logging, get_logger
from genpass.infrastructure.auth.magic_link_service import MagicLinkTokenService
from genpass.infrastructure.auth.otp_generator import otp_generator
from genpass.infrastructure.auth.token_generator import token_generator
from genpass.infrastructure.security.device_fingerprint import generate_fingerprint


@click.group()
@click.version_option(version=__version__, prog_name="GenPass")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides GENPASS_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """GenPass - passwordless sign-in building blocks.

    Issue and verify signed magic link tokens, and generate secure
    random tokens and one-time codes.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
@click.option(
    "--bytes",
    "byte_length",
    type=int,
    default=32,
    show_default=True,
    help="Number of random bytes of entropy",
)
def token(byte_length: int) -> None:
    """Print a URL-safe random token."""
    try:
        click.echo(token_generator.generate(byte_length))
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e), param_hint="--bytes") from e


@cli.command()
def otp() -> None:
    """Print a 6-digit one-time code."""
    click.echo(otp_generator.generate())


@cli.command()
@click.argument("subject")
@click.option(
    "--ttl",
    type=int,
    default=None,
    help="Token lifetime in seconds (defaults to GENPASS_MAGIC_LINK_TTL_SECONDS)",
)
@click.pass_obj
def issue(settings, subject: str, ttl: int | None) -> None:
    """Issue a signed magic link token for SUBJECT."""
    service = MagicLinkTokenService.from_settings(settings)
    lifetime = timedelta(seconds=ttl if ttl is not None else settings.magic_link_ttl_seconds)
    try:
        click.echo(service.issue(subject, lifetime))
    except InvalidArgumentError as e:
        raise click.UsageError(str(e)) from e


@cli.command()
@click.argument("token_value", metavar="TOKEN")
@click.pass_obj
def verify(settings, token_value: str) -> None:
    """Verify TOKEN and print its subject.

    Exits with status 1 and prints 'rejected' if the token is malformed,
    forged or expired.
    """
    service = MagicLinkTokenService.from_settings(settings)
    result = service.verify(token_value)
    if not result.is_valid:
        click.echo("rejected")
        sys.exit(1)
    click.echo(result.subject)


@cli.command()
@click.option("--user-agent", type=str, default=None, help="Client user agent")
@click.option("--ip", type=str, default=None, help="Client IP address")
@click.option(
    "--timestamp",
    type=int,
    default=None,
    help="Epoch milliseconds (defaults to now)",
)
@click.option(
    "--salted",
    is_flag=True,
    default=False,
    help="Mix a random salt into the fingerprint",
)
def fingerprint(user_agent: str | None, ip: str | None, timestamp: int | None, salted: bool) -> None:
    """Print a device fingerprint."""
    click.echo(generate_fingerprint(user_agent, ip, timestamp, salted=salted))


@cli.command("send-link")
@click.argument("email")
@click.option(
    "--ttl",
    type=int,
    default=None,
    help="Link lifetime in seconds (defaults to GENPASS_MAGIC_LINK_TTL_SECONDS)",
)
@click.pass_obj
def send_link(settings, email: str, ttl: int | None) -> None:
    """Email a magic link to EMAIL using the configured sender."""
    from genpass.infrastructure.services.email.provider_factory import create_message_sender
    from genpass.infrastructure.services.magic_link_email_service import MagicLinkEmailService

    logger = get_logger(__name__)
    service = MagicLinkEmailService(
        token_service=MagicLinkTokenService.from_settings(settings),
        sender=create_message_sender(settings.email_provider),
        settings=settings,
    )
    lifetime = timedelta(seconds=ttl) if ttl is not None else None

    try:
        asyncio.run(service.send_magic_link(email, lifetime))
    except InvalidArgumentError as e:
        raise click.UsageError(str(e)) from e

    logger.debug("send-link finished", provider=settings.email_provider)
    click.echo(f"Magic link sent to {email}")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `genpass` command is run
    or when using `python -m genpass`.
    """
    cli()


if __name__ == "__main__":
    main()
