"""Device fingerprint helper.

Hashes typical client attributes (user agent, IP address and a timestamp)
into a SHA-256 hex string. Output is reproducible for identical inputs
unless ``salted`` is requested.
"""

import hashlib
import time

from genpass.infrastructure.security.random_source import (
    SecureRandomSource,
    get_random_source,
)

SALT_LENGTH = 8


def generate_fingerprint(
    user_agent: str | None,
    ip: str | None,
    timestamp: int | None = None,
    *,
    salted: bool = False,
    random_source: SecureRandomSource | None = None,
) -> str:
    """Generate a fingerprint from user agent, IP address and timestamp.

    Args:
        user_agent: Client user agent string (may be None).
        ip: Client IP address (may be None).
        timestamp: Epoch milliseconds. Defaults to the current time, which
            makes the fingerprint vary between calls; pass a fixed value
            (e.g. last login time) for a stable identifier.
        salted: Mix an 8-byte random salt into the hash so that two calls
            never produce the same fingerprint.
        random_source: Source for the salt. Defaults to the process-wide source.

    Returns:
        Hex-encoded SHA-256 digest (64 characters).

    Example:
        >>> fp = generate_fingerprint("Mozilla/5.0", "192.168.1.10", 123456789)
        >>> len(fp)
        64
    """
    if timestamp is None:
        timestamp = time.time_ns() // 1_000_000

    to_hash = f"{user_agent or ''}|{ip or ''}|{timestamp}"
    digest = hashlib.sha256(to_hash.encode("utf-8"))
    if salted:
        digest.update((random_source or get_random_source()).token_bytes(SALT_LENGTH))
    return digest.hexdigest()
