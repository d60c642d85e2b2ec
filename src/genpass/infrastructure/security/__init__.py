"""Security primitives: secure randomness and device fingerprints."""

from genpass.infrastructure.security.device_fingerprint import generate_fingerprint
from genpass.infrastructure.security.random_source import (
    SecureRandomSource,
    get_random_source,
)

__all__ = [
    "SecureRandomSource",
    "generate_fingerprint",
    "get_random_source",
]
