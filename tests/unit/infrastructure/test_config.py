"""Unit tests for Settings and load_settings."""

from pathlib import Path

import pytest

from fittrack.infrastructure.config import Settings, load_settings

ENV_VARS = (
    "FITTRACK_STORAGE_BACKEND",
    "FITTRACK_STORAGE_DIR",
    "FITTRACK_STORAGE_QUOTA_BYTES",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Recorded first so values loaded from .env files are undone too
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()

        assert settings == Settings()
        assert settings.storage_backend == "inmemory"
        assert settings.storage_dir == Path(".fittrack")
        assert settings.storage_quota_bytes is None
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FITTRACK_STORAGE_BACKEND", "JSON_FILE")
        monkeypatch.setenv("FITTRACK_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("FITTRACK_STORAGE_QUOTA_BYTES", "5242880")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "json")

        settings = load_settings()

        assert settings.storage_backend == "json_file"
        assert settings.storage_dir == tmp_path
        assert settings.storage_quota_bytes == 5242880
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == 10
        assert settings.log_format == "json"

    def test_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_FORMAT=json\nLOG_LEVEL=WARNING\n", encoding="utf-8")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        settings = load_settings(env_file)

        assert settings.log_format == "json"
        # Existing environment wins over the file
        assert settings.log_level == "ERROR"

    def test_missing_env_file_ignored(self, tmp_path):
        assert load_settings(tmp_path / "missing.env") == Settings()

    def test_invalid_backend(self, monkeypatch):
        monkeypatch.setenv("FITTRACK_STORAGE_BACKEND", "mongodb")

        with pytest.raises(ValueError, match="FITTRACK_STORAGE_BACKEND"):
            load_settings()

    def test_invalid_quota(self, monkeypatch):
        monkeypatch.setenv("FITTRACK_STORAGE_QUOTA_BYTES", "lots")

        with pytest.raises(ValueError, match="FITTRACK_STORAGE_QUOTA_BYTES"):
            load_settings()

    def test_non_positive_quota(self, monkeypatch):
        monkeypatch.setenv("FITTRACK_STORAGE_QUOTA_BYTES", "0")

        with pytest.raises(ValueError, match="FITTRACK_STORAGE_QUOTA_BYTES"):
            load_settings()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            load_settings()

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ValueError, match="LOG_FORMAT"):
            load_settings()
