"""Exception types raised by envjson."""

from __future__ import annotations


class EnvJsonError(Exception):
    """Base class for all envjson errors."""


class ConfigurationError(EnvJsonError, ValueError):
    """Raised when a parser configuration is invalid.

    Examples are an empty separator or a base document that is not a
    mapping.
    """


class PatternError(ConfigurationError):
    """Raised when an include/exclude pattern does not compile.

    Attributes:
        pattern: The offending pattern string.
    """

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")
        self.pattern = pattern


class KeySplitError(EnvJsonError):
    """Raised when a variable name cannot be turned into a path."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class NotMatchingPrefix(KeySplitError):
    """The variable does not start with ``prefix + separator``."""


class MalformedKey(KeySplitError):
    """The variable splits into an empty segment."""
