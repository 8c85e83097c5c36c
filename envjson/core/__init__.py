from .builder import TreeBuilder
from .coerce import coerce_scalar
from .config import ParserConfig
from .errors import ConfigurationError, EnvJsonError, PatternError
from .filters import Filter
from .keys import split_key
from .merge import deep_merge
from .parser import Parser
from .source import Source

__all__ = [
    "Parser",
    "ParserConfig",
    "TreeBuilder",
    "Filter",
    "Source",
    "coerce_scalar",
    "split_key",
    "deep_merge",
    "EnvJsonError",
    "ConfigurationError",
    "PatternError",
]
