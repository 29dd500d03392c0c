"""Client configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_rest.domain.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_UPLOAD_URL = "https://uploads.github.com/"
DEFAULT_API_VERSION = "2022-11-28"
LIBRARY_VERSION = "0.3.0"
DEFAULT_USER_AGENT = f"github-rest/{LIBRARY_VERSION}"


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = None
    github_base_url: str = DEFAULT_BASE_URL
    github_upload_url: str = DEFAULT_UPLOAD_URL
    github_user_agent: str = DEFAULT_USER_AGENT
    github_api_version: str = DEFAULT_API_VERSION
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @field_validator("github_base_url", "github_upload_url")
    @classmethod
    def _trailing_slash(cls, v: str) -> str:
        v = v.strip()
        return v if v.endswith("/") else v + "/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton settings (cached after first call).

    Raises :class:`ConfigurationError` when the environment holds a value
    that does not validate.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
