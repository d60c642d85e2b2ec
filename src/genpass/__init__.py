"""GenPass - passwordless sign-in building blocks.

Stateless signed magic link tokens, secure random tokens and numeric
one-time passwords.
"""

__version__ = "0.1.0"

from genpass.core.exceptions import (
    CryptoUnavailableError,
    EmailDeliveryError,
    GenPassError,
    InvalidArgumentError,
    RandomSourceUnavailableError,
)
from genpass.infrastructure.auth import (
    DefaultOtpGenerator,
    DefaultTokenGenerator,
    MagicLinkTokenService,
    OtpGenerator,
    TokenGenerator,
    VerificationResult,
)
from genpass.infrastructure.security import SecureRandomSource

__all__ = [
    "__version__",
    "CryptoUnavailableError",
    "DefaultOtpGenerator",
    "DefaultTokenGenerator",
    "EmailDeliveryError",
    "GenPassError",
    "InvalidArgumentError",
    "MagicLinkTokenService",
    "OtpGenerator",
    "RandomSourceUnavailableError",
    "SecureRandomSource",
    "TokenGenerator",
    "VerificationResult",
]
