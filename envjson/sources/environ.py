"""Process environment variable source."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from ..core.source import Source


class ProcessEnvSource(Source):
    """Snapshot of the process environment.

    An explicit mapping can be injected in place of ``os.environ``.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, name: Optional[str] = None):
        self._environ = environ
        self.name = name or "environ"
        self.id = "environ"

    def load(self) -> Dict[str, str]:
        environ = os.environ if self._environ is None else self._environ
        return dict(environ)
