"""Encoding helpers for magic link tokens.

Wire format: ``<base64url(payload)>.<base64url(hmac_sha256(payload))>``
Both halves use the URL-safe alphabet without ``=`` padding.
"""

import base64
import binascii
import hashlib
import hmac
import re

from genpass.core.exceptions import CryptoUnavailableError

SEPARATOR = "."

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


class TokenDecodeError(Exception):
    """Raised when a token half is not valid unpadded base64url."""
    pass


def base64url_encode(data: bytes) -> str:
    """Encode bytes to a base64url string without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str) -> bytes:
    """Strictly decode an unpadded base64url string.

    Characters outside the URL-safe alphabet, explicit padding, impossible
    lengths and non-zero trailing bits are all errors; nothing is silently
    discarded.

    Raises:
        TokenDecodeError: If the input is not valid unpadded base64url.
    """
    if not _BASE64URL_RE.fullmatch(data):
        raise TokenDecodeError("Invalid base64url characters")
    if len(data) % 4 == 1:
        raise TokenDecodeError("Invalid base64url length")
    padded = data + "=" * (-len(data) % 4)
    try:
        decoded = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise TokenDecodeError("Invalid base64url encoding") from e
    # Unused trailing bits must be zero, so each byte string has one encoding
    if base64url_encode(decoded) != data:
        raise TokenDecodeError("Non-canonical base64url encoding")
    return decoded


def sign(key: bytes, payload: bytes) -> bytes:
    """Compute HMAC-SHA256 of the raw payload bytes.

    Raises:
        CryptoUnavailableError: If HMAC-SHA256 cannot be computed.
    """
    try:
        return hmac.new(key, payload, hashlib.sha256).digest()
    except ValueError as e:
        raise CryptoUnavailableError("Failed to compute HMAC-SHA256") from e


def signatures_match(expected: bytes, actual: bytes) -> bool:
    """Compare two signatures in constant time."""
    return hmac.compare_digest(expected, actual)


def encode(payload: bytes, key: bytes) -> str:
    """Sign and encode a payload into the compact token string."""
    return f"{base64url_encode(payload)}{SEPARATOR}{base64url_encode(sign(key, payload))}"


def split(token: str) -> tuple[str, str] | None:
    """Split a token on its first separator.

    Returns:
        (encoded_payload, encoded_signature), or None if there is no separator.
    """
    encoded_payload, sep, encoded_signature = token.partition(SEPARATOR)
    if not sep:
        return None
    return encoded_payload, encoded_signature
