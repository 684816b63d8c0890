"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from cchmod.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path, clean_env):
        cfg = load_config(tmp_path)
        assert cfg.output.format is None
        assert cfg.diff.format == "terminal"
        assert cfg.diff.show_unchanged is True

    def test_custom_toml(self, tmp_path: Path, clean_env):
        (tmp_path / ".cchmod.toml").write_text(
            'version = "1.0"\n'
            '[output]\n'
            'format = "num"\n'
            '[diff]\n'
            'format = "json"\n'
            'show_unchanged = false\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.output.format == "num"
        assert cfg.diff.format == "json"
        assert cfg.diff.show_unchanged is False

    def test_unknown_keys_ignored(self, tmp_path: Path, clean_env):
        (tmp_path / ".cchmod.toml").write_text('[output]\nformat = "sym"\ncolour = "red"\n')
        cfg = load_config(tmp_path)
        assert cfg.output.format == "sym"

    def test_override_path(self, tmp_path: Path, clean_env):
        custom = tmp_path / "custom.toml"
        custom.write_text('[diff]\nformat = "json"\n')
        cfg = load_config(tmp_path, str(custom))
        assert cfg.diff.format == "json"

    def test_missing_override(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, str(tmp_path / "nope.toml"))

    def test_malformed_toml(self, tmp_path: Path):
        (tmp_path / ".cchmod.toml").write_text("[output\nformat = ")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_output_format(self, tmp_path: Path):
        (tmp_path / ".cchmod.toml").write_text('[output]\nformat = "hex"\n')
        with pytest.raises(ConfigError, match="output.format"):
            load_config(tmp_path)

    def test_invalid_diff_format(self, tmp_path: Path):
        (tmp_path / ".cchmod.toml").write_text('[diff]\nformat = "sarif"\n')
        with pytest.raises(ConfigError, match="diff.format"):
            load_config(tmp_path)


class TestEnvOverrides:
    def test_format_override(self, sym_config: Path, monkeypatch):
        monkeypatch.setenv("CCHMOD_FORMAT", "num")
        cfg = load_config(sym_config)
        assert cfg.output.format == "num"

    def test_diff_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CCHMOD_DIFF_FORMAT", "json")
        cfg = load_config(tmp_path)
        assert cfg.diff.format == "json"

    def test_invalid_env_ignored(self, sym_config: Path, monkeypatch):
        monkeypatch.setenv("CCHMOD_FORMAT", "octal")
        cfg = load_config(sym_config)
        assert cfg.output.format == "sym"
