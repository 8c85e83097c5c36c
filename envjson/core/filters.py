"""Include/exclude filtering of variable names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Tuple

from .errors import PatternError


def compile_patterns(patterns: Iterable[str]) -> Tuple[Pattern[str], ...]:
    """Compile pattern strings, reporting the first one that fails.

    Raises:
        PatternError: If a pattern is not a valid regular expression.
    """
    compiled = []
    for pattern in patterns:
        if not isinstance(pattern, str):
            raise PatternError(repr(pattern), "pattern must be a string")
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise PatternError(pattern, str(e)) from e
    return tuple(compiled)


@dataclass(frozen=True)
class Filter:
    """Filter for including/excluding variables by name.

    Attributes:
        include: A key must match at least one of these, if any are given.
        exclude: A key must match none of these.
    """

    include: Tuple[Pattern[str], ...] = ()
    exclude: Tuple[Pattern[str], ...] = ()

    @staticmethod
    def from_patterns(
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> Optional["Filter"]:
        """Create a Filter from pattern strings.

        Args:
            include: Inclusion patterns.
            exclude: Exclusion patterns.

        Returns:
            Filter instance, or None when both lists are empty.

        Raises:
            PatternError: If any pattern does not compile.
        """
        inc = compile_patterns(include)
        exc = compile_patterns(exclude)
        if not inc and not exc:
            return None
        return Filter(include=inc, exclude=exc)


def should_include_key(key: str, flt: Optional[Filter]) -> bool:
    """Check if a variable should be parsed.

    Patterns are searched anywhere in the full variable name, prefix
    included. Exclusion wins over inclusion.

    Args:
        key: Full variable name.
        flt: Filter to apply (None means include all).

    Returns:
        True if the key should be included, False otherwise.
    """
    if flt is None:
        return True
    if flt.include and not any(p.search(key) for p in flt.include):
        return False
    if any(p.search(key) for p in flt.exclude):
        return False
    return True
