"""
Password generator and strength evaluator package.
"""

from .config import (
    DEFAULT_POLICY,
    GenerationPolicy,
    PolicyDraft,
    policy_from_settings,
    snapshot_policy,
)
from .errors import EmptyCharsetError, PasswordGeneratorError, RandomSourceUnavailable
from .generator import PasswordGenerator
from .random_source import SecureRandom
from .strength import (
    GuessEstimator,
    StrengthEvaluator,
    StrengthLabel,
    StrengthReport,
    ZxcvbnGuessEstimator,
    classify,
    estimate_entropy_bits,
)
from .cli import generate_password, generate_password_with_meta

__all__ = [
    "DEFAULT_POLICY",
    "GenerationPolicy",
    "PolicyDraft",
    "policy_from_settings",
    "snapshot_policy",
    "EmptyCharsetError",
    "PasswordGeneratorError",
    "RandomSourceUnavailable",
    "PasswordGenerator",
    "SecureRandom",
    "GuessEstimator",
    "StrengthEvaluator",
    "StrengthLabel",
    "StrengthReport",
    "ZxcvbnGuessEstimator",
    "classify",
    "estimate_entropy_bits",
    "generate_password",
    "generate_password_with_meta",
]
