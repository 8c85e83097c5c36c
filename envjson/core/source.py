"""Source protocol for variable mappings."""

from __future__ import annotations

from typing import Dict, Protocol


class Source(Protocol):
    """Protocol for anything that supplies raw variables.

    Sources are read-only: they hand the parser a flat mapping of
    variable name to string value.
    """

    id: str
    name: str

    def load(self) -> Dict[str, str]:
        """Load the variables from the source.

        Returns:
            Dictionary of variable name to raw string value.
        """
        ...
