"""Conversion of raw variable strings into JSON scalars."""

from __future__ import annotations

import math
import re
from typing import Union

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

Scalar = Union[bool, int, float, str]


def coerce_scalar(raw: str) -> Scalar:
    """Return the most specific scalar ``raw`` represents.

    Tries, in order: ``"true"``/``"false"`` (exact, case-sensitive), a
    base-10 integer, a finite decimal or exponent float. Anything else is
    returned unchanged.

    Args:
        raw: Raw variable value.

    Returns:
        bool, int, float or the original string.
    """
    if raw == "true":
        return True
    if raw == "false":
        return False
    # int()/float() accept whitespace and underscores, the patterns do not
    if _INT_RE.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # too many digits for int(), try float
            pass
    if _FLOAT_RE.fullmatch(raw):
        number = float(raw)
        if math.isfinite(number):
            return number
    return raw
