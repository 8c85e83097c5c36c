"""Tests for envjson.yaml profile loading."""

import json

import pytest
import yaml

from envjson.core.config_loader import ConfigLoader, load_document
from envjson.core.errors import ConfigurationError


class TestConfigLoader:
    """Test ConfigLoader functionality."""

    def test_init_with_explicit_path(self, tmp_path):
        """Test initialization with explicit config path."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("profiles: {}")

        loader = ConfigLoader(config_file)
        assert loader.config_path == config_file

    def test_init_with_nonexistent_explicit_path(self, tmp_path):
        """Test initialization with nonexistent explicit path."""
        loader = ConfigLoader(tmp_path / "nonexistent.yaml")
        assert loader.config_path is None

    def test_find_config_in_current_dir(self, tmp_path, monkeypatch):
        """Test finding envjson.yaml in current directory."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("profiles: {}")
        monkeypatch.chdir(tmp_path)

        assert ConfigLoader().config_path == config_file

    def test_find_config_in_parent_dir(self, tmp_path, monkeypatch):
        """Test finding envjson.yaml in parent directory."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("profiles: {}")
        subdir = tmp_path / "subdir"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        assert ConfigLoader().config_path == config_file

    def test_no_config_file(self, tmp_path, monkeypatch):
        """Test defaults when no envjson.yaml exists."""
        monkeypatch.chdir(tmp_path)

        loader = ConfigLoader(tmp_path / "missing.yaml")
        assert loader.load() == {}
        assert loader.profile_names() == []
        cfg = loader.parser_config()
        assert cfg.separator == "__"

    def test_load_caches(self, tmp_path):
        """Test the file is read once."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text(yaml.dump({"profiles": {"default": {"prefix": "A"}}}))
        loader = ConfigLoader(config_file)
        first = loader.load()
        config_file.write_text("profiles: {}")
        assert loader.load() is first

    def test_load_invalid_yaml(self, tmp_path):
        """Test loading invalid YAML raises ConfigurationError."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("profiles: [unclosed")

        with pytest.raises(ConfigurationError, match="Invalid document"):
            ConfigLoader(config_file).load()

    def test_load_non_mapping(self, tmp_path):
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader(config_file).load()

    def test_parser_config_from_profile(self, tmp_path):
        """Test building a ParserConfig from a named profile."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text(
            yaml.dump(
                {
                    "profiles": {
                        "default": {"prefix": "APP"},
                        "service": {
                            "prefix": "SVC",
                            "separator": ".",
                            "include": ["^SVC"],
                            "exclude": ["SECRET"],
                            "raw_strings": True,
                            "base": {"port": 80},
                        },
                    }
                }
            )
        )
        loader = ConfigLoader(config_file)
        assert sorted(loader.profile_names()) == ["default", "service"]
        assert loader.parser_config().prefix == "APP"

        cfg = loader.parser_config("service")
        assert cfg.prefix == "SVC"
        assert cfg.separator == "."
        assert cfg.include == ("^SVC",)
        assert cfg.exclude == ("SECRET",)
        assert cfg.raw_strings is True
        assert cfg.base == {"port": 80}

    def test_overrides(self, tmp_path):
        """Test overrides win and None overrides are ignored."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text(yaml.dump({"profiles": {"default": {"prefix": "APP", "separator": "."}}}))
        cfg = ConfigLoader(config_file).parser_config(prefix="OTHER", separator=None)
        assert cfg.prefix == "OTHER"
        assert cfg.separator == "."

    def test_unknown_profile(self, tmp_path):
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("profiles: {}")
        with pytest.raises(ConfigurationError, match="Unknown profile"):
            ConfigLoader(config_file).parser_config("nope")

    def test_profile_not_mapping(self, tmp_path):
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text("profiles:\n  default: 3\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_file).parser_config()

    def test_invalid_profile_options(self, tmp_path):
        """Test invalid options surface as ConfigurationError."""
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text(yaml.dump({"profiles": {"default": {"separator": ""}}}))
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_file).parser_config()

    def test_base_file_relative(self, tmp_path):
        """Test base_file is resolved next to envjson.yaml."""
        (tmp_path / "defaults.json").write_text(json.dumps({"db": {"port": 5432}}))
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text(yaml.dump({"profiles": {"default": {"base_file": "defaults.json"}}}))

        cfg = ConfigLoader(config_file).parser_config()
        assert cfg.base == {"db": {"port": 5432}}

    def test_base_and_base_file(self, tmp_path):
        (tmp_path / "b.yaml").write_text("a: 1\n")
        config_file = tmp_path / "envjson.yaml"
        config_file.write_text(
            yaml.dump({"profiles": {"default": {"base": {"a": 2}, "base_file": "b.yaml"}}})
        )
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_file).parser_config()


class TestLoadDocument:
    """Test load_document."""

    def test_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text('{"a": [1, 2]}')
        assert load_document(path) == {"a": [1, 2]}

    def test_yaml(self, tmp_path):
        path = tmp_path / "doc.yml"
        path.write_text("a:\n  - 1\n  - 2\n")
        assert load_document(path) == {"a": [1, 2]}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("{")
        with pytest.raises(ConfigurationError):
            load_document(path)

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.json")
