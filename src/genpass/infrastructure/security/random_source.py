"""Cryptographically secure random byte source.

Wraps the operating system CSPRNG. There is no seeding API; a source that
cannot produce bytes raises instead of returning weak output.
"""

import os

from genpass.core.exceptions import InvalidArgumentError, RandomSourceUnavailableError


class SecureRandomSource:
    """OS-backed secure random byte generator.

    Safe for concurrent use: every call reads fresh bytes from the kernel,
    so threads never share generator state.
    """

    def fill(self, buffer: bytearray | memoryview, length: int) -> None:
        """Populate the first ``length`` bytes of ``buffer`` with random bytes.

        Args:
            buffer: Writable buffer to fill.
            length: Number of bytes to write, at most ``len(buffer)``.

        Raises:
            InvalidArgumentError: If length is negative or exceeds the buffer.
            RandomSourceUnavailableError: If the OS random source fails.
        """
        if length < 0 or length > len(buffer):
            raise InvalidArgumentError(
                f"length must be between 0 and {len(buffer)}, got {length}"
            )
        if length == 0:
            return
        try:
            data = os.urandom(length)
        except (NotImplementedError, OSError) as e:
            raise RandomSourceUnavailableError("OS random source is unavailable") from e
        if len(data) != length:
            raise RandomSourceUnavailableError(
                f"OS random source returned {len(data)} of {length} bytes"
            )
        buffer[:length] = data

    def token_bytes(self, length: int) -> bytes:
        """Return ``length`` fresh random bytes."""
        buf = bytearray(length if length > 0 else 0)
        self.fill(buf, length)
        return bytes(buf)

    def __repr__(self) -> str:
        return "SecureRandomSource(os.urandom)"


_default_source = SecureRandomSource()


def get_random_source() -> SecureRandomSource:
    """Get the process-wide random source."""
    return _default_source
