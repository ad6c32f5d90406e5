"""Unit tests for application settings configuration."""

from pathlib import Path

from shop_api.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("PASSWORD_HASH_METHOD", "pbkdf2:sha256")
    monkeypatch.setenv("LOG_LEVEL_FACADES", "DEBUG")

    settings = Settings()

    assert settings.database_url == "sqlite:///:memory:"
    assert settings.password_hash_method == "pbkdf2:sha256"
    assert settings.log_level_facades == "DEBUG"
