"""
kullback - pytest fixtures.
"""

import random

import pytest

from kullback.core.statistic import period_score


def repeating_xor(plaintext: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(plaintext))


@pytest.fixture
def xor_key3_data():
    """All-zero plaintext under a 3-byte key: every column of a multiple of 3 is constant."""
    return repeating_xor(bytes(60), b"\x11\x22\x33")


@pytest.fixture
def english_xor_data():
    plaintext = (
        b"It was the best of times, it was the worst of times, it was the age of wisdom, "
        b"it was the age of foolishness, it was the epoch of belief, it was the epoch of "
        b"incredulity, it was the season of Light, it was the season of Darkness, it was "
        b"the spring of hope, it was the winter of despair, we had everything before us, "
        b"we had nothing before us, we were all going direct to Heaven, we were all going "
        b"direct the other way."
    )
    return repeating_xor(plaintext, b"ICE5Z")


@pytest.fixture
def random_data():
    rng = random.Random(1234)
    return bytes(rng.randrange(256) for _ in range(97))


class CountingScorer:
    """Wraps period_score and records every period it was asked for."""

    def __init__(self):
        self.calls = []

    def __call__(self, data, period):
        self.calls.append(period)
        return period_score(data, period)


@pytest.fixture
def counting_scorer():
    return CountingScorer()
