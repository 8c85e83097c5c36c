"""Environment file (.env) variable source."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

from ..core.source import Source

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$")
_VAR_RE = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))")


class EnvFileSource(Source):
    """Variable source reading ``KEY=VALUE`` lines from a .env file.

    Blank lines and ``#`` comments are skipped and an ``export`` keyword
    before the name is allowed. Values may be wrapped in single or double
    quotes; double-quoted values understand ``\\"``, ``\\n``, ``\\r`` and
    ``\\t``. ``${VAR}`` and ``$VAR`` expand from earlier lines of the file,
    then from the process environment, except inside single quotes.

    The file is only read; ``os.environ`` is never modified.
    """

    def __init__(
        self,
        path: Union[str, Path],
        name: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize EnvFileSource.

        Args:
            path: Path to the .env file.
            name: Optional custom name for this source.
            environ: Mapping used for expansion instead of ``os.environ``.
        """
        self.path = Path(path)
        self.name = name or f"env:{self.path.name}"
        self.id = str(self.path.resolve())
        self._environ = environ

    def load(self) -> Dict[str, str]:
        """Read and parse the file.

        Returns:
            Variables in file order; a repeated name keeps its last value.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        values: Dict[str, str] = {}
        with open(self.path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    continue
                parsed = self._parse_line(stripped, values)
                if parsed is None:
                    logger.warning("Skipping unparseable line %d in %s", line_num, self.path)
                    continue
                key, value = parsed
                values[key] = value
        logger.debug("Loaded %d variables from %s", len(values), self.path)
        return values

    def _parse_line(self, line: str, seen: Mapping[str, str]) -> Optional[Tuple[str, str]]:
        match = _LINE_RE.match(line)
        if not match:
            return None
        key, value = match.groups()

        if len(value) >= 2 and value[0] == value[-1] == "'":
            return key, value[1:-1]

        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = (
                value[1:-1]
                .replace('\\"', '"')
                .replace("\\n", "\n")
                .replace("\\r", "\r")
                .replace("\\t", "\t")
            )
        else:
            # unquoted: drop a trailing inline comment
            value = re.sub(r"\s+#.*$", "", value)

        return key, self._expand_variables(value, seen)

    def _expand_variables(self, value: str, seen: Mapping[str, str]) -> str:
        environ = os.environ if self._environ is None else self._environ

        def lookup(match: "re.Match[str]") -> str:
            name = match.group(1) or match.group(2)
            if name in seen:
                return seen[name]
            return environ.get(name, "")

        # one pass, so expanded text is never expanded again
        return _VAR_RE.sub(lookup, value)
