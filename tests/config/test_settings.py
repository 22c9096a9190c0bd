"""Tests for jsonchain settings."""

import pathlib as _pathlib

import pydantic as _pydantic
import pytest as _pytest

import jsonchain.config as config
import jsonchain.config.settings as settings_module


class TestSettingsDefaults:
    """Defaults without any environment."""

    def test_defaults(self) -> None:
        """Defaults match the documented serialization format."""
        settings = config.Settings()

        assert settings.indent == 2
        assert settings.sort_keys is True
        assert settings.ensure_ascii is False
        assert settings.trailing_newline is True
        assert settings.log_level == "WARNING"


class TestSettingsEnvironment:
    """JSONCHAIN_* environment variables."""

    def test_env_overrides(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("JSONCHAIN_INDENT", "4")
        monkeypatch.setenv("JSONCHAIN_SORT_KEYS", "false")

        settings = config.Settings()

        assert settings.indent == 4
        assert settings.sort_keys is False

    def test_constructor_beats_env(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        """Constructor arguments have the highest precedence."""
        monkeypatch.setenv("JSONCHAIN_INDENT", "4")

        assert config.Settings(indent=8).indent == 8

    def test_log_level_normalized(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        """Level names are upper-cased."""
        monkeypatch.setenv("JSONCHAIN_LOG_LEVEL", "debug")

        assert config.Settings().log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Unknown level names are rejected."""
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings(log_level="chatty")

    def test_negative_indent_rejected(self) -> None:
        """indent must not be negative."""
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings(indent=-1)


class TestEnvFile:
    """Locating the optional .env file."""

    def test_no_env_file_by_default(self) -> None:
        """Without JSONCHAIN_ENV_FILE no .env is loaded."""
        assert settings_module._get_env_file() is None

    def test_explicit_env_file(
        self, monkeypatch: _pytest.MonkeyPatch, tmp_path: _pathlib.Path
    ) -> None:
        """An existing JSONCHAIN_ENV_FILE is used."""
        env_file = tmp_path / ".env"
        env_file.write_text("JSONCHAIN_INDENT=3\n")
        monkeypatch.setenv("JSONCHAIN_ENV_FILE", str(env_file))

        assert settings_module._get_env_file() == str(env_file)
        assert config.Settings(_env_file=settings_module._get_env_file()).indent == 3

    def test_missing_env_file(
        self, monkeypatch: _pytest.MonkeyPatch, tmp_path: _pathlib.Path
    ) -> None:
        """A JSONCHAIN_ENV_FILE that doesn't exist is ignored."""
        monkeypatch.setenv("JSONCHAIN_ENV_FILE", str(tmp_path / "missing.env"))

        assert settings_module._get_env_file() is None


class TestGetSettings:
    """The cached process-wide settings."""

    def test_cached(self) -> None:
        """get_settings() returns the same instance until cleared."""
        assert config.get_settings() is config.get_settings()

    def test_cache_clear_rereads_env(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        """Clearing the cache picks up environment changes."""
        first = config.get_settings()
        monkeypatch.setenv("JSONCHAIN_INDENT", "6")
        config.get_settings.cache_clear()

        assert config.get_settings() is not first
        assert config.get_settings().indent == 6
