"""Authentication infrastructure components.

This module provides the magic link token service and the random token
and OTP generators it is built from.
"""

from genpass.infrastructure.auth.magic_link_service import MagicLinkTokenService
from genpass.infrastructure.auth.otp_generator import (
    DefaultOtpGenerator,
    OtpGenerator,
    otp_generator,
)
from genpass.infrastructure.auth.token_generator import (
    DefaultTokenGenerator,
    TokenGenerator,
    token_generator,
)
from genpass.infrastructure.auth.token_types import TokenPayload, VerificationResult

__all__ = [
    "DefaultOtpGenerator",
    "DefaultTokenGenerator",
    "MagicLinkTokenService",
    "OtpGenerator",
    "TokenGenerator",
    "TokenPayload",
    "VerificationResult",
    "otp_generator",
    "token_generator",
]
