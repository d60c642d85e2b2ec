"""Stateless magic link token service.

Creates compact, URL-safe tokens holding a payload and an HMAC-SHA256
signature. The payload is the UTF-8 string ``subject:expiryEpochMillis:nonce``
encoded as unpadded base64url, followed by ``.`` and the base64url
signature. The signature covers the raw payload bytes, not their encoding.

Issued tokens are not stored. Revocation or single-use enforcement needs a
separate store (e.g. a cache of seen nonces) in the calling system.
"""

import time
from datetime import timedelta
from typing import Callable

from genpass.core.config import Settings, get_settings
from genpass.core.exceptions import InvalidArgumentError
from genpass.core.logging import get_logger
from genpass.infrastructure.auth import token_codec
from genpass.infrastructure.auth.token_codec import TokenDecodeError
from genpass.infrastructure.auth.token_generator import (
    DefaultTokenGenerator,
    TokenGenerator,
)
from genpass.infrastructure.auth.token_types import (
    FIELD_DELIMITER,
    TokenPayload,
    VerificationResult,
)

logger = get_logger(__name__)

DEFAULT_NONCE_BYTE_LENGTH = 32

_ONE_MILLISECOND = timedelta(milliseconds=1)


def system_clock_millis() -> int:
    """Return the current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class MagicLinkTokenService:
    """Issue and verify signed, expiring magic link tokens.

    The service holds only immutable state (key, nonce generator, nonce
    length, clock) and is safe to share between threads.
    """

    def __init__(
        self,
        secret_key: bytes,
        token_generator: TokenGenerator | None = None,
        nonce_byte_length: int = DEFAULT_NONCE_BYTE_LENGTH,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the magic link token service.

        Args:
            secret_key: Secret bytes used for HMAC-SHA256 signing. Must not be empty.
            token_generator: Generator used to produce the nonce. Defaults to
                the secure base64url generator.
            nonce_byte_length: Random bytes per nonce (recommended 16 to 32).
            clock: Callable returning the current epoch milliseconds. Defaults
                to the system clock.

        Raises:
            InvalidArgumentError: If the key is empty or nonce_byte_length <= 0.
        """
        if not secret_key:
            raise InvalidArgumentError("secret_key must not be empty")
        if nonce_byte_length <= 0:
            raise InvalidArgumentError("nonce_byte_length must be > 0")

        self._secret_key = bytes(secret_key)
        self._token_generator = token_generator or DefaultTokenGenerator()
        self._nonce_byte_length = nonce_byte_length
        self._clock = clock or system_clock_millis

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "MagicLinkTokenService":
        """Build a service from application settings.

        Args:
            settings: Settings instance. Defaults to the cached settings.
        """
        settings = settings or get_settings()
        return cls(settings.signing_key, nonce_byte_length=settings.nonce_byte_length)

    @property
    def nonce_byte_length(self) -> int:
        return self._nonce_byte_length

    def issue(self, subject: str, ttl: timedelta) -> str:
        """Create a token for a subject with a time-to-live.

        Args:
            subject: The subject (e.g. user ID or email). Must not contain ':'.
            ttl: Time-to-live. Must be positive.

        Returns:
            Compact URL-safe token string.

        Raises:
            InvalidArgumentError: If the subject is empty, contains ':' or
                cannot be encoded as UTF-8, or if ttl is missing, zero or
                negative.
        """
        if not isinstance(subject, str) or not subject:
            raise InvalidArgumentError("subject must not be empty")
        if FIELD_DELIMITER in subject:
            raise InvalidArgumentError(f"subject must not contain '{FIELD_DELIMITER}'")
        try:
            subject.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidArgumentError("subject must be encodable as UTF-8") from e
        if not isinstance(ttl, timedelta) or ttl <= timedelta(0):
            raise InvalidArgumentError("ttl must be a positive timedelta")

        # Round up so a sub-millisecond ttl still expires after issuance
        ttl_ms = -(-ttl // _ONE_MILLISECOND)
        payload = TokenPayload(
            subject=subject,
            expires_at=self._clock() + ttl_ms,
            nonce=self._token_generator.generate(self._nonce_byte_length),
        )
        token = token_codec.encode(payload.to_bytes(), self._secret_key)

        logger.debug(
            "Magic link token issued",
            expires_at=payload.expires_at,
            ttl_ms=ttl_ms,
        )
        return token

    def verify(self, token: str | None) -> VerificationResult:
        """Verify a token created by :meth:`issue`.

        Never raises for malformed input: every failure (bad format, bad
        encoding, bad signature, bad payload, expired) returns
        ``VerificationResult.REJECTED``.

        Args:
            token: Token string.

        Returns:
            Accepted result carrying the subject, or the rejected result.
        """
        if not isinstance(token, str) or not token.strip():
            return self._reject("empty")

        halves = token_codec.split(token)
        if halves is None:
            return self._reject("missing_separator")
        encoded_payload, encoded_signature = halves

        try:
            payload_bytes = token_codec.base64url_decode(encoded_payload)
            signature = token_codec.base64url_decode(encoded_signature)
        except TokenDecodeError:
            return self._reject("invalid_encoding")

        expected_signature = token_codec.sign(self._secret_key, payload_bytes)
        if not token_codec.signatures_match(expected_signature, signature):
            return self._reject("invalid_signature")

        payload = TokenPayload.from_bytes(payload_bytes)
        if payload is None:
            return self._reject("invalid_payload")

        if payload.is_expired(self._clock()):
            return self._reject("expired")

        return VerificationResult.accepted(payload.subject)

    def verify_subject(self, token: str | None) -> str | None:
        """Verify a token and return its subject, or None if rejected."""
        return self.verify(token).subject

    @staticmethod
    def _reject(reason: str) -> VerificationResult:
        # The reason is for operators only and is never returned to callers
        logger.debug("Magic link token rejected", reason=reason)
        return VerificationResult.REJECTED

    def __repr__(self) -> str:
        return f"MagicLinkTokenService(nonce_bytes={self._nonce_byte_length})"
