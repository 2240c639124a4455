"""
Unit tests for Config module.

Tests configuration loading, dataclass behavior, and defaults.
"""

import json
import logging

import pytest

from cursorvec import (
    Config,
    ConfigError,
    ContainerConfig,
    CursorVec,
    LoggingConfig,
    get_config,
    load_config,
    save_config,
    set_config,
)


class TestContainerConfig:
    """Test ContainerConfig dataclass."""

    def test_default_values(self):
        """Test default container flags."""
        config = ContainerConfig()
        assert config.rotatable is False
        assert config.strict is False

    def test_custom_values(self):
        """Test custom container flags."""
        config = ContainerConfig(rotatable=True, strict=True)
        assert config.rotatable is True
        assert config.strict is True


class TestLoggingConfig:
    """Test LoggingConfig dataclass."""

    def test_default_values(self):
        """Test default logging settings."""
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.console is True
        assert config.file is False
        assert config.log_dir is None


class TestConfigDict:
    """Test dictionary conversion."""

    def test_from_dict(self):
        """Test partial sections fall back to field defaults."""
        config = Config.from_dict({
            "container": {"rotatable": True},
            "logging": {"level": "DEBUG"},
        })
        assert config.container.rotatable is True
        assert config.container.strict is False
        assert config.logging.level == "DEBUG"

    def test_from_empty_dict(self):
        """Test an empty dictionary yields the default config."""
        assert Config.from_dict({}) == Config()

    def test_round_trip(self):
        """Test to_dict output is accepted by from_dict."""
        config = Config(container=ContainerConfig(rotatable=True, strict=True))
        assert Config.from_dict(config.to_dict()) == config

    def test_unknown_field(self):
        """Test an unknown field names its section in the error."""
        with pytest.raises(ConfigError) as exc_info:
            Config.from_dict({"container": {"wrap": True}})
        assert exc_info.value.section == "container"

    def test_section_not_mapping(self):
        """Test a non-mapping section is rejected."""
        with pytest.raises(ConfigError):
            Config.from_dict({"logging": "DEBUG"})

    def test_root_not_mapping(self):
        """Test a non-mapping root is rejected."""
        with pytest.raises(ConfigError):
            Config.from_dict(["container"])


class TestLoadConfig:
    """Test loading from JSON files."""

    def test_load_from_file(self, tmp_path):
        """Test values are read from file and become the global config."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"container": {"rotatable": True, "strict": True}}))

        config = load_config(str(path))

        assert config.container.rotatable is True
        assert config.container.strict is True
        assert get_config() is config

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing file yields the default config."""
        config = load_config(str(tmp_path / "missing.json"))
        assert config == Config()

    def test_invalid_json_uses_defaults(self, tmp_path, caplog):
        """Test malformed JSON falls back to defaults with a warning."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with caplog.at_level(logging.WARNING, logger="cursorvec"):
            config = load_config(str(path))

        assert config == Config()
        assert "Using defaults" in caplog.text

    def test_invalid_utf8_uses_defaults(self, tmp_path, caplog):
        """Test undecodable bytes fall back to defaults with a warning."""
        path = tmp_path / "config.json"
        path.write_bytes(b'{"container": {"rotatable": tr\xff\xfeue}}')

        with caplog.at_level(logging.WARNING, logger="cursorvec"):
            config = load_config(str(path))

        assert config == Config()
        assert "Using defaults" in caplog.text

    def test_invalid_utf8_does_not_break_from_config(self, tmp_path, monkeypatch, words):
        """Test a corrupt default file still lets containers be built."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "cursorvec.json").write_bytes(b"\xff\xfe\x00")
        set_config(None)

        vec = CursorVec.from_config(words)

        assert not vec.is_rotatable
        assert get_config() == Config()

    def test_directory_path_uses_defaults(self, tmp_path):
        """Test a directory in place of a file falls back to defaults."""
        assert load_config(str(tmp_path)) == Config()

    def test_invalid_section_uses_defaults(self, tmp_path):
        """Test a rejected section falls back to defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"container": {"unknown": 1}}))
        assert load_config(str(path)) == Config()

    def test_default_path_is_working_directory(self, tmp_path, monkeypatch):
        """Test load_config without a path reads cursorvec.json from the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "cursorvec.json").write_text(json.dumps({"container": {"strict": True}}))

        assert load_config().container.strict is True

    def test_save_then_load(self, tmp_path):
        """Test a saved config loads back unchanged."""
        path = tmp_path / "config.json"
        config = Config(logging=LoggingConfig(level="INFO", console=False))

        save_config(config, str(path))

        assert load_config(str(path)) == config

    def test_save_default_path_is_working_directory(self, tmp_path, monkeypatch):
        """Test save_config without a path writes into the working directory."""
        monkeypatch.chdir(tmp_path)
        config = Config(container=ContainerConfig(rotatable=True))

        save_config(config)

        saved = json.loads((tmp_path / "cursorvec.json").read_text(encoding="utf-8"))
        assert saved["container"]["rotatable"] is True


class TestGlobalConfig:
    """Test the global config instance and container defaults."""

    def test_set_and_get(self):
        """Test set_config replaces the global instance."""
        config = Config(container=ContainerConfig(rotatable=True))
        set_config(config)
        assert get_config() is config

    def test_from_config_uses_global(self, words):
        """Test from_config picks up the global container flags."""
        set_config(Config(container=ContainerConfig(rotatable=True)))
        vec = CursorVec.from_config(words)
        assert vec.is_rotatable
        assert not vec.is_strict
        assert vec.move_prev_and_get().value() == "fifth"

    def test_from_config_explicit(self, words):
        """Test an explicit config overrides the global one."""
        config = Config(container=ContainerConfig(strict=True))
        vec = CursorVec.from_config(words, config=config)
        assert vec.is_strict
        assert not vec.is_rotatable
