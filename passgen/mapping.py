"""
Mapping logic: character sets and turning random draws into password text.
"""

from __future__ import annotations

import logging
import string

from .config import GenerationPolicy
from .errors import EmptyCharsetError
from .random_source import SecureRandom

logger = logging.getLogger(__name__)

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;':\",./<>?"

# Glyphs that are easy to confuse with each other when read back.
SIMILAR_CHARACTERS = "0O1lI|"

PATTERN_TOKENS = {
    "L": LOWERCASE,
    "U": UPPERCASE,
    "D": DIGITS,
    "S": SYMBOLS,
}


def exclude_similar(charset: str) -> str:
    """Remove visually ambiguous characters, keeping the original order."""
    return "".join(ch for ch in charset if ch not in SIMILAR_CHARACTERS)


def build_charset(policy: GenerationPolicy) -> str:
    """
    Effective random-mode charset for a policy.

    Lowercase first, then uppercase, digits and symbols as enabled.
    """
    charset = LOWERCASE
    if policy.use_uppercase:
        charset += UPPERCASE
    if policy.use_numbers:
        charset += DIGITS
    if policy.use_symbols:
        charset += SYMBOLS

    if policy.exclude_similar:
        charset = exclude_similar(charset)

    return charset


def charset_to_password(charset: str, length: int, rng: SecureRandom) -> str:
    """
    Draw `length` characters independently and uniformly from `charset`.
    """
    if not charset:
        raise EmptyCharsetError("No characters available to generate password.")

    logger.debug("Drawing %d characters from a charset of %d", length, len(charset))
    return "".join(rng.choice(charset) for _ in range(length))


def pattern_to_password(pattern: str, rng: SecureRandom) -> str:
    """
    Expand a template pattern token by token.

    Tokens are matched case-insensitively; unknown characters pass through.
    """
    password_chars: list[str] = []

    for ch in pattern:
        pool = PATTERN_TOKENS.get(ch.upper())
        if pool is None:
            password_chars.append(ch)
        else:
            password_chars.append(rng.choice(pool))

    return "".join(password_chars)
