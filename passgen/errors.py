"""
Exceptions raised by the password generator.
"""


class PasswordGeneratorError(Exception):
    """Generic password generator error."""


class EmptyCharsetError(PasswordGeneratorError, ValueError):
    """No characters are left to draw from after applying the policy filters."""


class RandomSourceUnavailable(PasswordGeneratorError, RuntimeError):
    """The operating system could not provide cryptographically secure randomness."""
