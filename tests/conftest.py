"""
Shared fixtures: a deterministic random source and a fixed guess estimator.
"""

import random

import pytest

from passgen.random_source import SecureRandom


class StubGuessEstimator:
    """Returns the same guess count for every password."""

    def __init__(self, guesses=1024.0):
        self.guesses = guesses
        self.calls = []

    def estimate_guesses(self, password):
        self.calls.append(password)
        return self.guesses


@pytest.fixture
def seeded_rng():
    """SecureRandom bound to a seeded byte source, for reproducible output."""
    source = random.Random(1234)
    return SecureRandom(entropy_source=source.randbytes)


@pytest.fixture
def stub_estimator():
    return StubGuessEstimator()
