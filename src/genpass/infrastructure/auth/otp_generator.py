"""One-time password generation.

Generates numeric codes suitable for email or SMS delivery.
"""

from abc import ABC, abstractmethod

from genpass.infrastructure.security.random_source import (
    SecureRandomSource,
    get_random_source,
)

OTP_DIGITS = 6
OTP_UPPER_BOUND = 10**OTP_DIGITS

# Width of each random sample drawn for rejection sampling
_SAMPLE_BYTES = 4
_SAMPLE_SPACE = 1 << (8 * _SAMPLE_BYTES)
# Samples at or above this limit would bias the low codes
_SAMPLE_LIMIT = _SAMPLE_SPACE - (_SAMPLE_SPACE % OTP_UPPER_BOUND)


class OtpGenerator(ABC):
    """Interface for generating numeric one-time passwords."""

    @abstractmethod
    def generate(self) -> str:
        """Generate a numeric OTP string."""
        pass


class DefaultOtpGenerator(OtpGenerator):
    """Six-digit OTP generator.

    Draws 32-bit samples from the secure random source and discards any
    sample at or above the largest multiple of 1,000,000 below 2**32, so
    every code from 000000 to 999999 is equally likely.
    """

    def __init__(self, random_source: SecureRandomSource | None = None) -> None:
        self._random = random_source or get_random_source()

    def _uniform_below_bound(self) -> int:
        buf = bytearray(_SAMPLE_BYTES)
        while True:
            self._random.fill(buf, _SAMPLE_BYTES)
            sample = int.from_bytes(buf, "big")
            if sample < _SAMPLE_LIMIT:
                return sample % OTP_UPPER_BOUND

    def generate(self) -> str:
        return f"{self._uniform_below_bound():0{OTP_DIGITS}d}"

    def __repr__(self) -> str:
        return f"DefaultOtpGenerator(digits={OTP_DIGITS})"


# Default OTP generator instance
otp_generator = DefaultOtpGenerator()
