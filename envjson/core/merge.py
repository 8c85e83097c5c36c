"""Merging a parsed tree onto a base document."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

ARRAY_STRATEGIES = ("replace", "index")


def deep_merge(overlay: Any, base: Optional[Any], array_strategy: str = "replace") -> Any:
    """Merge ``overlay`` onto ``base`` and return the combined value.

    Objects are merged key by key with overlay values taking precedence
    and base-only keys kept. Arrays are replaced wholesale by the overlay
    with the ``"replace"`` strategy; with ``"index"`` they are merged
    element-wise and an overlay ``None`` placeholder keeps the base element
    at that position. Any other pairing resolves to the overlay value.

    Neither argument is mutated and the result shares no containers with
    ``base``.

    Args:
        overlay: Higher-priority tree, usually freshly parsed variables.
        base: Lower-priority document; ``None`` is treated as ``{}``.
        array_strategy: ``"replace"`` or ``"index"``.

    Returns:
        Merged value.

    Raises:
        ValueError: If ``array_strategy`` is unknown.
    """
    if array_strategy not in ARRAY_STRATEGIES:
        raise ValueError(f"Unknown array merge strategy: {array_strategy!r}")
    if base is None:
        base = {}
    return _merge(overlay, base, array_strategy)


def _merge(overlay: Any, base: Any, array_strategy: str) -> Any:
    if isinstance(overlay, dict) and isinstance(base, dict):
        return _merge_objects(overlay, base, array_strategy)
    if (
        array_strategy == "index"
        and isinstance(overlay, list)
        and isinstance(base, list)
    ):
        return _merge_arrays(overlay, base, array_strategy)
    return copy.deepcopy(overlay)


def _merge_objects(
    overlay: Dict[str, Any], base: Dict[str, Any], array_strategy: str
) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for key, value in base.items():
        if key in overlay:
            merged[key] = _merge(overlay[key], value, array_strategy)
        else:
            merged[key] = copy.deepcopy(value)
    for key, value in overlay.items():
        if key not in base:
            merged[key] = copy.deepcopy(value)
    return merged


def _merge_arrays(overlay: List[Any], base: List[Any], array_strategy: str) -> List[Any]:
    merged: List[Any] = []
    for i in range(max(len(overlay), len(base))):
        if i >= len(overlay):
            merged.append(copy.deepcopy(base[i]))
        elif i >= len(base):
            merged.append(copy.deepcopy(overlay[i]))
        elif overlay[i] is None:
            # None in an overlay array is a sparse-fill gap, not a value
            merged.append(copy.deepcopy(base[i]))
        else:
            merged.append(_merge(overlay[i], base[i], array_strategy))
    return merged
