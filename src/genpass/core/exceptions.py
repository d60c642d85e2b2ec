"""Exceptions raised by GenPass.

Token verification never raises for bad input; a rejected token is a value
(see VerificationResult). These exceptions cover caller misuse and
unusable runtimes.
"""


class GenPassError(Exception):
    """Base class for all GenPass errors."""
    pass


class InvalidArgumentError(GenPassError, ValueError):
    """Raised when an operation is called with an invalid argument.

    Covers construction and issue-time misuse such as an empty signing key,
    a non-positive nonce length or a subject containing the field delimiter.
    """
    pass


class CryptoUnavailableError(GenPassError):
    """Raised when a cryptographic primitive cannot be used.

    This is not recoverable: the runtime is missing HMAC-SHA256, SHA-256 or
    a working entropy source.
    """
    pass


class RandomSourceUnavailableError(CryptoUnavailableError):
    """Raised when the OS random source cannot provide bytes."""
    pass


class EmailDeliveryError(GenPassError):
    """Raised when a message sender fails to deliver a message."""
    pass
