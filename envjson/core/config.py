"""Validated parser configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .errors import ConfigurationError
from .filters import Filter
from .merge import ARRAY_STRATEGIES


def _as_patterns(name: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    try:
        return tuple(value)
    except TypeError:
        raise ConfigurationError(f"{name} must be a list of patterns, got {value!r}") from None


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how variables become a tree.

    Validated on construction: an empty separator, a base document that is
    not a mapping, an unknown array merge strategy or a pattern that does
    not compile all raise before any variable is read.

    Attributes:
        prefix: Variables must start with ``prefix + separator``; empty
            selects every variable.
        separator: Path separator inside variable names.
        include: Regex patterns; at least one must match when given.
        exclude: Regex patterns; none may match.
        base: Document the parsed tree is merged onto.
        raw_strings: Keep values as strings instead of coercing them.
        lowercase_keys: Lower-case object field names.
        array_merge: ``"replace"`` or ``"index"``, see ``deep_merge``.
        max_index: Largest array index a variable may use. Variables with
            a larger index are skipped so one name cannot allocate an
            arbitrarily long array.
    """

    prefix: str = ""
    separator: str = "__"
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    base: Optional[Dict[str, Any]] = None
    raw_strings: bool = False
    lowercase_keys: bool = True
    array_merge: str = "replace"
    max_index: int = 10_000
    filter: Optional[Filter] = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigurationError("separator must be a non-empty string")
        if self.prefix is None:
            object.__setattr__(self, "prefix", "")
        elif not isinstance(self.prefix, str):
            raise ConfigurationError(f"prefix must be a string, got {self.prefix!r}")
        if self.base is not None and not isinstance(self.base, dict):
            raise ConfigurationError(
                f"base document must be an object, got {type(self.base).__name__}"
            )
        if self.array_merge not in ARRAY_STRATEGIES:
            raise ConfigurationError(
                f"array_merge must be one of {', '.join(ARRAY_STRATEGIES)}, "
                f"got {self.array_merge!r}"
            )
        if (
            isinstance(self.max_index, bool)
            or not isinstance(self.max_index, int)
            or self.max_index < 0
        ):
            raise ConfigurationError(
                f"max_index must be a non-negative integer, got {self.max_index!r}"
            )

        include = _as_patterns("include", self.include)
        exclude = _as_patterns("exclude", self.exclude)
        object.__setattr__(self, "include", include)
        object.__setattr__(self, "exclude", exclude)
        object.__setattr__(self, "filter", Filter.from_patterns(include, exclude))
        if self.base is not None:
            object.__setattr__(self, "base", copy.deepcopy(self.base))

    @classmethod
    def from_dict(cls, d: Optional[Mapping[str, Any]]) -> "ParserConfig":
        """Create a ParserConfig from a plain mapping.

        Args:
            d: Mapping of option name to value; None gives the defaults.

        Returns:
            Validated ParserConfig.

        Raises:
            ConfigurationError: On unknown options or invalid values.
        """
        if not d:
            return cls()
        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigurationError(f"Unknown parser options: {', '.join(unknown)}")
        return cls(**dict(d))

    def with_prefix(self, prefix: str) -> "ParserConfig":
        return replace(self, prefix=prefix)

    def with_separator(self, separator: str) -> "ParserConfig":
        return replace(self, separator=separator)

    def with_include(self, patterns: Iterable[str]) -> "ParserConfig":
        return replace(self, include=tuple(patterns))

    def with_exclude(self, patterns: Iterable[str]) -> "ParserConfig":
        return replace(self, exclude=tuple(patterns))

    def with_base(self, base: Optional[Dict[str, Any]]) -> "ParserConfig":
        return replace(self, base=base)

    def with_raw_strings(self, raw_strings: bool = True) -> "ParserConfig":
        return replace(self, raw_strings=raw_strings)
