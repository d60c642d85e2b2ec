"""Pytest configuration for all tests."""

from datetime import timedelta

import pytest
import structlog

from genpass.core.config import get_settings
from genpass.infrastructure.auth.magic_link_service import MagicLinkTokenService
from genpass.infrastructure.auth.token_generator import DefaultTokenGenerator

TEST_SECRET = b"super-secret-key-123456789"


class FakeClock:
    """Settable clock returning epoch milliseconds."""

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, delta: timedelta) -> None:
        self.now_ms += delta // timedelta(milliseconds=1)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep GENPASS_* variables from the host out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("GENPASS_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    # configure_logging binds the current stderr, which pytest replaces per test
    structlog.reset_defaults()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_service() -> MagicLinkTokenService:
    return MagicLinkTokenService(TEST_SECRET, DefaultTokenGenerator(), 16)


@pytest.fixture
def clocked_service(fake_clock) -> MagicLinkTokenService:
    return MagicLinkTokenService(TEST_SECRET, DefaultTokenGenerator(), 16, clock=fake_clock)
