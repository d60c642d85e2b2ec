"""Unit tests for the secure random source."""

import threading
from unittest.mock import patch

import pytest

from genpass.core.exceptions import (
    CryptoUnavailableError,
    InvalidArgumentError,
    RandomSourceUnavailableError,
)
from genpass.infrastructure.security.random_source import SecureRandomSource, get_random_source


@pytest.fixture
def source() -> SecureRandomSource:
    return SecureRandomSource()


class TestFill:
    def test_fills_requested_prefix_only(self, source):
        buf = bytearray(b"\x00" * 64)
        with patch("os.urandom", return_value=b"\xff" * 16):
            source.fill(buf, 16)
        assert buf[:16] == b"\xff" * 16
        assert buf[16:] == b"\x00" * 48

    def test_fills_whole_buffer(self, source):
        buf = bytearray(32)
        source.fill(buf, 32)
        other = bytearray(32)
        source.fill(other, 32)
        assert buf != other

    def test_fills_memoryview(self, source):
        backing = bytearray(8)
        with patch("os.urandom", return_value=b"\x01" * 8):
            source.fill(memoryview(backing), 8)
        assert backing == b"\x01" * 8

    def test_zero_length_is_noop(self, source):
        buf = bytearray(b"abc")
        source.fill(buf, 0)
        assert buf == b"abc"

    @pytest.mark.parametrize("length", [-1, 5])
    def test_invalid_length(self, source, length):
        with pytest.raises(InvalidArgumentError):
            source.fill(bytearray(4), length)

    def test_unavailable_source_fails_loudly(self, source):
        with patch("os.urandom", side_effect=NotImplementedError("no entropy")):
            with pytest.raises(RandomSourceUnavailableError):
                source.fill(bytearray(16), 16)

    def test_os_error_is_fatal(self, source):
        with patch("os.urandom", side_effect=OSError("getrandom failed")):
            with pytest.raises(CryptoUnavailableError):
                source.fill(bytearray(16), 16)

    def test_short_read_is_fatal(self, source):
        buf = bytearray(16)
        with patch("os.urandom", return_value=b"\x00" * 4):
            with pytest.raises(RandomSourceUnavailableError):
                source.fill(buf, 16)
        assert buf == bytearray(16)


class TestTokenBytes:
    def test_length(self, source):
        assert len(source.token_bytes(24)) == 24
        assert source.token_bytes(0) == b""

    def test_negative_length(self, source):
        with pytest.raises(InvalidArgumentError):
            source.token_bytes(-1)


def test_default_source_is_shared():
    assert get_random_source() is get_random_source()


def test_concurrent_fills_are_independent():
    source = get_random_source()
    results: list[bytes] = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            value = source.token_bytes(16)
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert len(set(results)) == 400
