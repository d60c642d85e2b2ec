"""Payload and result types for magic link tokens.

The payload travels as the UTF-8 text ``subject:expires_at:nonce``.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

FIELD_DELIMITER = ":"

_EXPIRY_RE = re.compile(r"[+-]?[0-9]+")


class TokenPayload(BaseModel):
    """Structure of the data signed into a magic link token."""

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., description="Identity the token was issued for (e.g. an email)")
    expires_at: int = Field(..., description="Epoch milliseconds after which the token is invalid")
    nonce: str = Field(default="", description="Random value making each token unique")

    def to_bytes(self) -> bytes:
        """Serialize the payload to its signed UTF-8 form."""
        return FIELD_DELIMITER.join(
            (self.subject, str(self.expires_at), self.nonce)
        ).encode("utf-8")

    @classmethod
    def from_bytes(cls, raw: bytes) -> Optional["TokenPayload"]:
        """Parse a signed payload.

        Only the subject and expiry are required; a missing nonce parses
        as an empty string.

        Returns:
            The parsed payload, or None if the bytes are not a valid payload.
        """
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

        parts = text.split(FIELD_DELIMITER, 2)
        if len(parts) < 2:
            return None

        subject, expiry = parts[0], parts[1]
        if not _EXPIRY_RE.fullmatch(expiry):
            return None

        return cls(
            subject=subject,
            expires_at=int(expiry),
            nonce=parts[2] if len(parts) == 3 else "",
        )

    def is_expired(self, now_ms: int) -> bool:
        """Check expiry. A token is still valid at its exact expiry instant."""
        return now_ms > self.expires_at


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of verifying a token.

    A rejected result carries no subject and no reason: malformed, forged
    and expired tokens are indistinguishable to the caller.
    """

    subject: str | None = None

    REJECTED: ClassVar["VerificationResult"]

    @property
    def is_valid(self) -> bool:
        return self.subject is not None

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def accepted(cls, subject: str) -> "VerificationResult":
        return cls(subject=subject)


VerificationResult.REJECTED = VerificationResult()
