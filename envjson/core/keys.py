"""Splitting variable names into object/array paths."""

from __future__ import annotations

import re

from .errors import MalformedKey, NotMatchingPrefix
from .types import Field, Index, KeyPath, PathSegment

_INDEX_RE = re.compile(r"[0-9]+")


def key_lead(prefix: str, separator: str) -> str:
    """Return the text a variable must start with to belong to ``prefix``.

    A prefix that already ends with the separator is used as-is, so
    ``"APP"`` and ``"APP__"`` select the same variables for ``"__"``.
    """
    if not prefix:
        return ""
    if prefix.endswith(separator):
        return prefix
    return prefix + separator


def classify_segment(text: str, lowercase: bool = True) -> PathSegment:
    """Classify one segment as an array index or an object field.

    Only plain ASCII digits form an index; leading zeros are allowed and
    signs are not.
    """
    if _INDEX_RE.fullmatch(text):
        try:
            return Index(int(text))
        except ValueError:
            # digit run longer than int() accepts
            pass
    return Field(text.lower() if lowercase else text)


def split_key(
    key: str,
    prefix: str,
    separator: str,
    lowercase: bool = True,
) -> KeyPath:
    """Split a variable name into path segments.

    Args:
        key: Full variable name.
        prefix: Required leading prefix, empty for none.
        separator: Segment separator, must not be empty.
        lowercase: Lower-case field names.

    Returns:
        Tuple of Field/Index segments.

    Raises:
        NotMatchingPrefix: If ``key`` does not start with the prefix.
        MalformedKey: If any segment would be empty.
    """
    lead = key_lead(prefix, separator)
    if not key.startswith(lead):
        raise NotMatchingPrefix(key, f"{key!r} does not start with {lead!r}")

    remainder = key[len(lead):]
    if not remainder:
        raise MalformedKey(key, f"{key!r} has no path after {lead!r}")

    parts = remainder.split(separator)
    if any(part == "" for part in parts):
        raise MalformedKey(key, f"{key!r} contains an empty segment")

    return tuple(classify_segment(part, lowercase) for part in parts)
