"""Unit tests for the OTP generator."""

import re
from collections import Counter

import pytest

from genpass.infrastructure.auth.otp_generator import (
    DefaultOtpGenerator,
    OTP_UPPER_BOUND,
    otp_generator,
)
from genpass.infrastructure.security.random_source import SecureRandomSource

SIX_DIGITS = re.compile(r"^\d{6}$")

# Largest multiple of 1,000,000 below 2**32
SAMPLE_LIMIT = 4_294_000_000


class ScriptedRandomSource(SecureRandomSource):
    """Random source returning preset 32-bit big-endian samples."""

    def __init__(self, samples: list[int]) -> None:
        self.samples = list(samples)
        self.calls = 0

    def fill(self, buffer, length):
        self.calls += 1
        buffer[:length] = self.samples.pop(0).to_bytes(length, "big")


class TestGenerate:
    """Tests for DefaultOtpGenerator.generate."""

    def test_returns_six_digits(self):
        for _ in range(200):
            assert SIX_DIGITS.match(otp_generator.generate())

    def test_is_random(self):
        codes = {otp_generator.generate() for _ in range(20)}
        assert len(codes) > 1

    def test_zero_padded(self):
        generator = DefaultOtpGenerator(ScriptedRandomSource([42]))
        assert generator.generate() == "000042"

    def test_reduces_sample_modulo_bound(self):
        generator = DefaultOtpGenerator(ScriptedRandomSource([3 * OTP_UPPER_BOUND + 123456]))
        assert generator.generate() == "123456"

    def test_largest_unbiased_sample_accepted(self):
        source = ScriptedRandomSource([SAMPLE_LIMIT - 1])
        assert DefaultOtpGenerator(source).generate() == "999999"
        assert source.calls == 1

    def test_biased_samples_are_redrawn(self):
        source = ScriptedRandomSource([SAMPLE_LIMIT, 2**32 - 1, 7])
        assert DefaultOtpGenerator(source).generate() == "000007"
        assert source.calls == 3

    def test_repr(self):
        assert repr(DefaultOtpGenerator()) == "DefaultOtpGenerator(digits=6)"


@pytest.mark.slow
class TestDistribution:
    """Statistical checks on the generated codes."""

    def test_leading_digit_chi_square(self):
        samples = 50_000
        counts = Counter(otp_generator.generate()[0] for _ in range(samples))
        expected = samples / 10
        chi_square = sum((counts[str(d)] - expected) ** 2 / expected for d in range(10))
        # 9 degrees of freedom, p = 0.0001
        assert chi_square < 33.72

    def test_bucketed_values_chi_square(self):
        samples = 100_000
        buckets = 100
        counts = Counter(int(otp_generator.generate()) * buckets // OTP_UPPER_BOUND for _ in range(samples))
        expected = samples / buckets
        chi_square = sum((counts[b] - expected) ** 2 / expected for b in range(buckets))
        # 99 degrees of freedom, p ~ 0.0001
        assert chi_square < 160.0

    def test_every_digit_position_uniform(self):
        samples = 30_000
        codes = [otp_generator.generate() for _ in range(samples)]
        expected = samples / 10
        for position in range(6):
            counts = Counter(code[position] for code in codes)
            chi_square = sum((counts[str(d)] - expected) ** 2 / expected for d in range(10))
            assert chi_square < 33.72, f"digit position {position} looks biased"
