"""Unit tests for client settings configuration."""

from pathlib import Path

from management_api.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("ORG_NAME", "acme")
    monkeypatch.setenv("ENDPOINT", "https://mgmt.test/v1")
    monkeypatch.setenv("HTTP_TIMEOUT", "5")

    settings = Settings()

    assert settings.org_name == "acme"
    assert settings.endpoint == "https://mgmt.test/v1"
    assert settings.http_timeout == 5.0
