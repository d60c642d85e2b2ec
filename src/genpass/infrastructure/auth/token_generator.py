"""Secure random token generation.

Tokens are random bytes encoded as unpadded base64url, so they can be
placed in URLs without percent-encoding.
"""

from abc import ABC, abstractmethod

from genpass.core.exceptions import InvalidArgumentError
from genpass.infrastructure.auth.token_codec import base64url_encode
from genpass.infrastructure.security.random_source import (
    SecureRandomSource,
    get_random_source,
)


class TokenGenerator(ABC):
    """Interface for generating URL-safe random tokens."""

    @abstractmethod
    def generate(self, byte_length: int) -> str:
        """Generate a token carrying ``byte_length`` bytes of entropy.

        Args:
            byte_length: Number of random bytes (e.g. 16, 32).

        Returns:
            URL-safe token string.

        Raises:
            InvalidArgumentError: If byte_length <= 0.
        """
        pass


class DefaultTokenGenerator(TokenGenerator):
    """Token generator backed by the secure random source.

    A token of ``n`` bytes is ``ceil(n * 4 / 3)`` characters long, e.g. 43
    characters for 32 bytes.
    """

    def __init__(self, random_source: SecureRandomSource | None = None) -> None:
        self._random = random_source or get_random_source()

    def generate(self, byte_length: int) -> str:
        if byte_length <= 0:
            raise InvalidArgumentError("byte_length must be > 0")
        buf = bytearray(byte_length)
        self._random.fill(buf, byte_length)
        return base64url_encode(bytes(buf))

    def __repr__(self) -> str:
        return "DefaultTokenGenerator()"


# Default token generator instance
token_generator = DefaultTokenGenerator()
