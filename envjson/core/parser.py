"""Turning flat variables into a nested JSON tree."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .builder import TreeBuilder
from .coerce import coerce_scalar
from .config import ParserConfig
from .errors import KeySplitError
from .filters import should_include_key
from .keys import split_key
from .merge import deep_merge
from .source import Source
from .types import Entry, Index, format_path

logger = logging.getLogger(__name__)


class Parser:
    """Parse environment-style variables into a nested tree.

    Each variable that passes the filter and carries the configured prefix
    is split on the separator into a path. Numeric segments address array
    positions, other segments address object fields. The coerced value is
    stored at that path and the finished tree is merged onto the configured
    base document.

    A Parser holds only its configuration and may be reused; every call
    builds a fresh tree.

    Example:
        >>> Parser(prefix="APP").parse({"APP__DB__PORTS__0": "5432"})
        {'db': {'ports': [5432]}}
    """

    def __init__(self, config: Optional[ParserConfig] = None, **options: Any):
        """Initialize Parser.

        Args:
            config: Ready-made configuration.
            **options: ParserConfig fields, used when ``config`` is None.

        Raises:
            ConfigurationError: If the options are invalid.
            TypeError: If both ``config`` and options are given.
        """
        if config is not None and options:
            raise TypeError("Pass either a ParserConfig or keyword options, not both")
        self.config = config if config is not None else ParserConfig.from_dict(options)

    def entries(self, items: Iterable[Tuple[str, str]]) -> Iterator[Entry]:
        """Filter, split and coerce variables, preserving their order.

        Keys that are filtered out, lack the prefix, contain an empty
        segment or use an array index above ``max_index`` are skipped.

        Raises:
            TypeError: If a key or value is not a string.
        """
        cfg = self.config
        for key, raw in items:
            if not isinstance(key, str) or not isinstance(raw, str):
                raise TypeError(f"Variables must be str -> str, got {key!r}: {raw!r}")
            if not should_include_key(key, cfg.filter):
                logger.debug("Filtered out %s", key)
                continue
            try:
                path = split_key(key, cfg.prefix, cfg.separator, cfg.lowercase_keys)
            except KeySplitError as e:
                logger.debug("Skipping %s: %s", key, e)
                continue
            if any(isinstance(s, Index) and s.position > cfg.max_index for s in path):
                logger.debug("Skipping %s: index above max_index %d", key, cfg.max_index)
                continue
            value = raw if cfg.raw_strings else coerce_scalar(raw)
            yield Entry(key=key, path=path, value=value)

    def parse_items(self, items: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
        """Parse ordered ``(name, value)`` pairs.

        Pairs are applied in the given order, so when two variables
        disagree about the shape at one path the later one wins.

        Returns:
            The tree merged onto the base document.
        """
        builder = TreeBuilder()
        count = 0
        for entry in self.entries(items):
            logger.debug("%s -> %s", entry.key, format_path(entry.path))
            builder.insert_entry(entry)
            count += 1
        logger.debug("Parsed %d variables", count)
        return deep_merge(builder.build(), self.config.base, self.config.array_merge)

    def parse(self, variables: Mapping[str, str]) -> Dict[str, Any]:
        """Parse a mapping of variable name to raw value."""
        return self.parse_items(variables.items())

    def parse_from_env(self, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Parse the process environment, or ``environ`` when given."""
        from ..sources.environ import ProcessEnvSource

        return self.parse_sources(ProcessEnvSource(environ))

    def parse_sources(self, *sources: Source) -> Dict[str, Any]:
        """Parse variables gathered from several sources.

        Sources are loaded in order and a later source overrides an earlier
        one for the same variable name.
        """
        variables: Dict[str, str] = {}
        for source in sources:
            loaded = source.load()
            logger.debug("Loaded %d variables from %s", len(loaded), source.name)
            variables.update(loaded)
        return self.parse(variables)
