"""
Command-line interface and high-level generator function.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_POLICY, GenerationPolicy, PolicyDraft, snapshot_policy
from .generator import PasswordGenerator
from .random_source import SecureRandom
from .strength import StrengthEvaluator, StrengthLabel


@dataclass
class GenerationMeta:
    """
    Full result of one generation cycle.
    """
    # Final password
    password: str

    # Strength metadata
    entropy_bits: float
    label: StrengthLabel
    diversity_score: int

    # Policy snapshot the password was generated from
    policy: GenerationPolicy


def generate_password_with_meta(
    policy: GenerationPolicy | PolicyDraft | None = None,
    rng: SecureRandom | None = None,
    evaluator: StrengthEvaluator | None = None,
) -> GenerationMeta:
    """
    High-level pipeline with metadata:

    - Snapshot the policy.
    - Generate a password from it.
    - Score the password.
    """
    cfg = snapshot_policy(policy)

    password = PasswordGenerator(rng).generate(cfg)
    report = (evaluator or StrengthEvaluator()).score(password)

    return GenerationMeta(
        password=password,
        entropy_bits=report.entropy_bits,
        label=report.label,
        diversity_score=report.diversity_score,
        policy=cfg,
    )


def generate_password(
    policy: GenerationPolicy | PolicyDraft | None = None,
) -> str:
    """
    High-level function: generate one password for the policy.
    """
    return PasswordGenerator().generate(policy)


def main() -> None:
    """
    Entry point for `python -m passgen.cli` or `run_passgen.py`.
    """
    logging.basicConfig(level=logging.WARNING)
    meta = generate_password_with_meta(DEFAULT_POLICY)
    print("\n[Password Generator]")
    print(f"Generated password: {meta.password}")
    print(f"Strength: {meta.label.value}\n")


if __name__ == "__main__":
    main()
