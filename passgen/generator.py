"""
Password generator: turns a generation policy into a password string.
"""

from __future__ import annotations

import logging

from .config import GenerationPolicy, PolicyDraft, snapshot_policy
from .mapping import build_charset, charset_to_password, pattern_to_password
from .random_source import SecureRandom

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """
    Encapsulates both generation algorithms.

    - Pattern mode when the policy asks for a template and the pattern is
      not blank.
    - Random-charset mode otherwise.
    """

    def __init__(self, rng: SecureRandom | None = None) -> None:
        self.rng = rng or SecureRandom()

    def generate(self, policy: GenerationPolicy | PolicyDraft | None = None) -> str:
        cfg = snapshot_policy(policy)

        if cfg.pattern_mode:
            logger.debug("Generating from a %d-token pattern", len(cfg.template_pattern))
            return pattern_to_password(cfg.template_pattern, self.rng)

        charset = build_charset(cfg)
        return charset_to_password(charset, cfg.length, self.rng)

