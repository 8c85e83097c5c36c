"""Type definitions for envjson paths and entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

# JSON value as produced by the parser
Value = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


@dataclass(frozen=True)
class Field:
    """Path segment addressing a key of an object.

    Attributes:
        name: Object key.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index:
    """Path segment addressing a position in an array.

    Attributes:
        position: Non-negative array index.
    """

    position: int

    def __str__(self) -> str:
        return str(self.position)


PathSegment = Union[Field, Index]
KeyPath = Tuple[PathSegment, ...]


@dataclass(frozen=True)
class Entry:
    """One filtered variable, split into a path with its coerced value.

    Attributes:
        key: Original variable name, prefix included.
        path: Segments leading to the value.
        value: Scalar to store at the end of the path.
    """

    key: str
    path: KeyPath
    value: Value


def format_path(path: KeyPath) -> str:
    """Render a path as ``a.b[0].c`` for logs and CLI output."""
    out = ""
    for segment in path:
        if isinstance(segment, Index):
            out += f"[{segment.position}]"
        else:
            out += f".{segment.name}" if out else segment.name
    return out
