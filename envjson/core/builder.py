"""Incremental assembly of a nested tree from path/value entries."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Union

from .types import Entry, Index, KeyPath, PathSegment, Value, format_path

logger = logging.getLogger(__name__)

Container = Union[Dict[str, Any], List[Any]]
SlotKey = Union[str, int]


def _slot_key(segment: PathSegment) -> SlotKey:
    return segment.position if isinstance(segment, Index) else segment.name


def _get(container: Container, key: SlotKey) -> Any:
    if isinstance(container, list):
        return container[key] if key < len(container) else None
    return container.get(key)


def _put(container: Container, key: SlotKey, value: Any) -> None:
    if isinstance(container, list):
        if key >= len(container):
            # sparse fill, never truncate
            container.extend([None] * (key + 1 - len(container)))
        container[key] = value
    else:
        container[key] = value


class TreeBuilder:
    """Fold path/value entries into a single nested tree.

    The root is always an object. Intermediate containers are created on
    demand: a field segment requires an object at its slot and an index
    segment requires an array. A slot holding anything else is replaced,
    and the last segment always overwrites. This makes the result
    independent of insertion order unless two entries disagree about the
    shape at the same path, in which case the later insert wins.

    A builder is single-use and must not be shared between threads.
    """

    def __init__(self) -> None:
        self._root: Dict[str, Any] = {}

    def insert(self, path: KeyPath, value: Value) -> None:
        """Store ``value`` at ``path``, creating containers as needed.

        Args:
            path: Non-empty sequence of segments.
            value: Scalar placed at the final segment.

        Raises:
            ValueError: If ``path`` is empty.
        """
        if not path:
            raise ValueError("Cannot insert a value at an empty path")

        parent: Container = self._root
        # the root is an object, so a leading index is keyed by its text
        key: SlotKey = str(path[0])
        for depth, segment in enumerate(path[1:], start=1):
            wanted = list if isinstance(segment, Index) else dict
            child = _get(parent, key)
            if not isinstance(child, wanted):
                if child is not None:
                    logger.debug(
                        "Replacing %s at %s with %s",
                        type(child).__name__,
                        format_path(path[:depth]),
                        wanted.__name__,
                    )
                child = wanted()
                _put(parent, key, child)
            parent = child
            key = _slot_key(segment)

        existing = _get(parent, key)
        if isinstance(existing, (dict, list)):
            logger.debug("Overwriting container at %s", format_path(path))
        _put(parent, key, value)

    def insert_entry(self, entry: Entry) -> None:
        self.insert(entry.path, entry.value)

    def insert_all(self, entries: Iterable[Entry]) -> "TreeBuilder":
        for entry in entries:
            self.insert_entry(entry)
        return self

    def build(self) -> Dict[str, Any]:
        """Return the assembled root object."""
        return self._root
