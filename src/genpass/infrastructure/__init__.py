"""Infrastructure layer - implementations of the GenPass building blocks.

This layer contains:
- Authentication (magic link tokens, random tokens, OTP codes)
- Security primitives (secure randomness, device fingerprints)
- Services (email composition and message senders)
"""
