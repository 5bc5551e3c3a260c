from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Management API connection
    endpoint: str = "https://api.enterprise.apigee.com/v1"
    org_name: str = ""
    username: str = ""
    password: str = ""
    http_timeout: float = 30.0
    user_agent: str = "management-api-client"

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_transport: str = "INFO"        # HttpxTransport
    log_level_proxy: str = "INFO"            # save fallbacks, existence checks

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
