"""
Configuration for the password generator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Hard bounds the engine enforces. A UI may restrict further (e.g. 8..32).
MIN_LENGTH = 1
MAX_LENGTH = 256

# Keys used by the host application's persisted settings.
HOST_SETTING_KEYS = {
    "defaultLength": "length",
    "useUppercase": "use_uppercase",
    "useNumbers": "use_numbers",
    "useSymbols": "use_symbols",
    "excludeSimilar": "exclude_similar",
    "includePattern": "use_template",
    "pattern": "template_pattern",
}


@dataclass(frozen=True)
class GenerationPolicy:
    # Output length in random mode. Ignored in pattern mode.
    length: int = 12

    # Lowercase letters are always part of the random-mode charset.
    use_uppercase: bool = True
    use_numbers: bool = True
    use_symbols: bool = True

    # Drop 0 O 1 l I | from the random-mode charset.
    exclude_similar: bool = False

    # Pattern tokens: L (lower), U (upper), D (digit), S (symbol).
    # Anything else is copied through literally.
    use_template: bool = False
    template_pattern: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an integer, got {self.length!r}")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ValueError(
                f"length={self.length} is outside the supported range "
                f"{MIN_LENGTH}..{MAX_LENGTH}."
            )
        if not isinstance(self.template_pattern, str):
            raise TypeError("template_pattern must be a string")

    @property
    def pattern_mode(self) -> bool:
        """True when the template pattern overrides random-charset mode."""
        return self.use_template and self.template_pattern.strip() != ""

    @property
    def character_set_count(self) -> int:
        """Number of character classes enabled for random mode."""
        return 1 + sum((self.use_uppercase, self.use_numbers, self.use_symbols))


# Default policy instance you can import elsewhere
DEFAULT_POLICY = GenerationPolicy()


@dataclass
class PolicyDraft:
    """
    Mutable copy of a policy that a settings panel edits in place.

    Generation never reads the draft directly; it works on snapshot().
    """

    length: int = DEFAULT_POLICY.length
    use_uppercase: bool = DEFAULT_POLICY.use_uppercase
    use_numbers: bool = DEFAULT_POLICY.use_numbers
    use_symbols: bool = DEFAULT_POLICY.use_symbols
    exclude_similar: bool = DEFAULT_POLICY.exclude_similar
    use_template: bool = DEFAULT_POLICY.use_template
    template_pattern: str = DEFAULT_POLICY.template_pattern

    @classmethod
    def from_policy(cls, policy: GenerationPolicy) -> "PolicyDraft":
        return cls(**_as_dict(policy))

    def snapshot(self) -> GenerationPolicy:
        return GenerationPolicy(**_as_dict(self))


def _as_dict(obj: Any) -> dict[str, Any]:
    return {f.name: getattr(obj, f.name) for f in fields(GenerationPolicy)}


def policy_from_settings(settings: Mapping[str, Any] | None = None) -> GenerationPolicy:
    """
    Build a policy from a host settings mapping.

    Values are laid over the defaults. Both the field names of
    GenerationPolicy and the host's camelCase keys are understood.
    """
    if not settings:
        return DEFAULT_POLICY

    field_names = {f.name for f in fields(GenerationPolicy)}
    values = _as_dict(DEFAULT_POLICY)

    for key, value in settings.items():
        name = HOST_SETTING_KEYS.get(key, key)
        if name not in field_names:
            logger.debug("Ignoring unknown setting %r", key)
            continue
        values[name] = value

    return GenerationPolicy(**values)


def snapshot_policy(policy: GenerationPolicy | PolicyDraft | None) -> GenerationPolicy:
    """Immutable policy for one generation call."""
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, PolicyDraft):
        return policy.snapshot()
    return policy
