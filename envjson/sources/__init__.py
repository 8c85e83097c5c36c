"""Variable source implementations.

This package contains the sources the parser can read variables from:
the process environment and .env files.
"""

from .environ import ProcessEnvSource
from .env_file import EnvFileSource

__all__ = [
    "ProcessEnvSource",
    "EnvFileSource",
]
