"""envjson - Environment variables to JSON.

Turn flat ``PREFIX__A__B__0=value`` variables into a nested tree of
objects and arrays, optionally merged onto a base document.
"""

from .core.parser import Parser
from .core.config import ParserConfig
from .core.builder import TreeBuilder
from .core.coerce import coerce_scalar
from .core.keys import split_key
from .core.merge import deep_merge
from .core.filters import Filter
from .core.source import Source
from .core.errors import ConfigurationError, EnvJsonError, PatternError
from .core.types import Entry, Field, Index

__all__ = [
    "Parser",
    "ParserConfig",
    "TreeBuilder",
    "coerce_scalar",
    "split_key",
    "deep_merge",
    "Filter",
    "Source",
    "Entry",
    "Field",
    "Index",
    "EnvJsonError",
    "ConfigurationError",
    "PatternError",
]
