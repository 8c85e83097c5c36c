"""Profile loader for envjson.yaml files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .config import ParserConfig
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "envjson.yaml"


def load_document(path: Union[str, Path]) -> Any:
    """Load a JSON or YAML document.

    Files ending in ``.json`` are read as JSON, everything else as YAML
    (which also accepts JSON).

    Raises:
        ConfigurationError: If the file cannot be decoded.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid document at {path}: {e}") from e


class ConfigLoader:
    """Handles loading parser profiles from envjson.yaml files."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config loader.

        Args:
            config_path: Path to envjson.yaml. If None, looks in the current
                directory and its parents.
        """
        self.config_path = self._find_config_file(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def _find_config_file(
        self, config_path: Optional[Union[str, Path]] = None
    ) -> Optional[Path]:
        """Find the envjson.yaml file.

        Args:
            config_path: Explicit path to config file, or None to search.

        Returns:
            Path to config file if found, None otherwise.
        """
        if config_path is not None:
            path = Path(config_path)
            if path.exists():
                return path
            return None

        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            if current == current.parent:
                return None
            current = current.parent

    def load(self) -> Dict[str, Any]:
        """Load the configuration file.

        Returns:
            Parsed configuration dictionary, or empty dict if no config file.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping.
        """
        if self.config_path is None:
            return {}

        if self._config is not None:
            return self._config

        data = load_document(self.config_path) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_path} must contain a mapping")
        logger.debug("Loaded %s", self.config_path)
        self._config = data
        return self._config

    def profile_names(self) -> List[str]:
        return list(self.load().get("profiles") or {})

    def profile(self, name: str) -> Optional[Dict[str, Any]]:
        """Get the raw options of a profile.

        Args:
            name: Profile name.

        Returns:
            Profile dict, or None if not found.

        Raises:
            ConfigurationError: If the profile is not a mapping.
        """
        profiles = self.load().get("profiles") or {}
        options = profiles.get(name)
        if options is None:
            return None
        if not isinstance(options, dict):
            raise ConfigurationError(f"Profile {name!r} must be a mapping")
        return dict(options)

    def parser_config(self, name: str = "default", **overrides: Any) -> ParserConfig:
        """Build a ParserConfig from a profile.

        A ``base_file`` entry is loaded relative to the config file and
        used as the base document. Overrides whose value is None are
        ignored.

        Args:
            name: Profile name; a missing ``default`` profile yields the
                default options.
            **overrides: ParserConfig fields taking precedence over the
                profile.

        Raises:
            ConfigurationError: If the profile is unknown or invalid.
        """
        options = self.profile(name)
        if options is None:
            if name != "default":
                raise ConfigurationError(f"Unknown profile: {name!r}")
            options = {}

        base_file = options.pop("base_file", None)
        if base_file is not None:
            if "base" in options:
                raise ConfigurationError(
                    f"Profile {name!r} sets both 'base' and 'base_file'"
                )
            options["base"] = load_document(self._resolve(base_file))

        options.update({k: v for k, v in overrides.items() if v is not None})
        return ParserConfig.from_dict(options)

    def _resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.is_absolute() or self.config_path is None:
            return path
        return self.config_path.parent / path
