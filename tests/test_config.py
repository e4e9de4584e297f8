"""Tests for config module."""

from pathlib import Path

import pytest

from graphmap.config import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_vault_path_from_env(self, tmp_vault: Path, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_vault))

        settings = Settings(_env_file=None)
        assert settings.vault_path == tmp_vault.resolve()

    def test_defaults(self, tmp_vault: Path, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_vault))
        monkeypatch.delenv("GRAPHMAP_DEBOUNCE_SECONDS", raising=False)
        monkeypatch.delenv("GRAPHMAP_LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)
        assert settings.debounce_seconds == 2.0
        assert settings.log_level == "INFO"

    def test_custom_values(self, tmp_vault: Path, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_vault))
        monkeypatch.setenv("GRAPHMAP_DEBOUNCE_SECONDS", "0.5")
        monkeypatch.setenv("GRAPHMAP_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)
        assert settings.debounce_seconds == 0.5
        assert settings.log_level == "DEBUG"

    def test_overrides_take_precedence(self, tmp_vault: Path, tmp_path: Path, monkeypatch):
        other = tmp_path / "other"
        other.mkdir()
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_vault))

        settings = get_settings(vault_path=str(other))
        assert settings.vault_path == other.resolve()

    def test_vault_path_validation_not_exists(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_path / "nonexistent"))

        with pytest.raises(ValueError, match="does not exist"):
            Settings(_env_file=None)

    def test_vault_path_validation_not_directory(self, tmp_path: Path, monkeypatch):
        file_path = tmp_path / "file.txt"
        file_path.touch()
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(file_path))

        with pytest.raises(ValueError, match="not a directory"):
            Settings(_env_file=None)

    def test_debounce_must_be_positive(self, tmp_vault: Path, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_vault))
        monkeypatch.setenv("GRAPHMAP_DEBOUNCE_SECONDS", "0")

        with pytest.raises(ValueError, match="positive"):
            Settings(_env_file=None)

    def test_unknown_log_level(self, tmp_vault: Path, monkeypatch):
        monkeypatch.setenv("GRAPHMAP_VAULT_PATH", str(tmp_vault))
        monkeypatch.setenv("GRAPHMAP_LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="Unknown log level"):
            Settings(_env_file=None)
