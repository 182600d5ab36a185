"""
Strength evaluation: entropy estimate and coarse label for a password.

The entropy number comes from an attacker guess-count model (zxcvbn by
default) adjusted by length and character-diversity rules. The label is
computed from length and diversity alone.
"""

from __future__ import annotations

import enum
import logging
import math
import string
from dataclasses import dataclass
from typing import Protocol

from zxcvbn import zxcvbn

logger = logging.getLogger(__name__)

# Narrower than the generation symbol set. Scores depend on this exact set.
SPECIAL_CHARACTERS = frozenset('!@#$%^&*(),.?":{}|<>')

# zxcvbn refuses longer input.
ZXCVBN_MAX_LENGTH = 72

SHORT_LENGTH = 10
LONG_LENGTH = 14
FULL_DIVERSITY = 4

SHORT_PENALTY = 10.0
LENGTH_BONUS = 15.0
DIVERSITY_BONUS = 5.0


class StrengthLabel(str, enum.Enum):
    VULNERABLE = "Vulnerable"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    label: StrengthLabel
    diversity_score: int


class GuessEstimator(Protocol):
    def estimate_guesses(self, password: str) -> float:
        """Estimated number of attacker guesses; higher means stronger."""
        ...


class ZxcvbnGuessEstimator:
    """
    Guess counts from zxcvbn (dictionary words, l33t, sequences, repeats,
    keyboard patterns).
    """

    def __init__(self, max_length: int = ZXCVBN_MAX_LENGTH) -> None:
        self.max_length = max_length

    def estimate_guesses(self, password: str) -> float:
        if not password:
            return 1.0

        if len(password) > self.max_length:
            logger.debug(
                "Estimating guesses on the first %d of %d characters",
                self.max_length,
                len(password),
            )
            password = password[: self.max_length]

        result = zxcvbn(password)
        # guesses may come back as a Decimal
        return max(float(result["guesses"]), 1.0)


def diversity_score(password: str) -> int:
    """Count of character classes present: lower, upper, digit, special."""
    has_lower = any(c in string.ascii_lowercase for c in password)
    has_upper = any(c in string.ascii_uppercase for c in password)
    has_digit = any(c in string.digits for c in password)
    has_special = any(c in SPECIAL_CHARACTERS for c in password)
    return sum((has_lower, has_upper, has_digit, has_special))


def _adjust_entropy(base_entropy: float, length: int, diversity: int) -> float:
    # First matching rule wins.
    if length < SHORT_LENGTH and diversity < FULL_DIVERSITY:
        return base_entropy - SHORT_PENALTY
    if length >= LONG_LENGTH:
        return base_entropy + LENGTH_BONUS
    if diversity == FULL_DIVERSITY:
        return base_entropy + DIVERSITY_BONUS
    return base_entropy


def _label(length: int, diversity: int) -> StrengthLabel:
    if length < SHORT_LENGTH and diversity < FULL_DIVERSITY:
        return StrengthLabel.VULNERABLE
    if length >= LONG_LENGTH and diversity == FULL_DIVERSITY:
        return StrengthLabel.STRONG
    if length < LONG_LENGTH or diversity < FULL_DIVERSITY:
        return StrengthLabel.WEAK
    # Not reachable with the thresholds above; kept as the explicit default.
    return StrengthLabel.MODERATE


def classify(password: str) -> StrengthLabel:
    return _label(len(password), diversity_score(password))


def estimate_entropy_bits(
    password: str,
    estimator: GuessEstimator | None = None,
) -> float:
    est = estimator or ZxcvbnGuessEstimator()
    base_entropy = math.log2(max(est.estimate_guesses(password), 1.0))
    return _adjust_entropy(base_entropy, len(password), diversity_score(password))


class StrengthEvaluator:
    """
    Scores passwords with one diversity scan shared by entropy and label.

    Nothing is cached; every call recomputes from the string.
    """

    def __init__(self, estimator: GuessEstimator | None = None) -> None:
        self.estimator = estimator or ZxcvbnGuessEstimator()

    def estimate_entropy_bits(self, password: str) -> float:
        return estimate_entropy_bits(password, self.estimator)

    def classify(self, password: str) -> StrengthLabel:
        return classify(password)

    def score(self, password: str) -> StrengthReport:
        length = len(password)
        diversity = diversity_score(password)
        guesses = max(self.estimator.estimate_guesses(password), 1.0)

        return StrengthReport(
            entropy_bits=_adjust_entropy(math.log2(guesses), length, diversity),
            label=_label(length, diversity),
            diversity_score=diversity,
        )
