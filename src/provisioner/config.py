"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from provisioner.errors import ConfigurationError

DEFAULT_TRIGGER_URL = "https://gitlab.com/api/v4/projects/11499648/trigger/pipeline"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Slack
    slack_bot_token: str = Field(
        default="",
        validation_alias=AliasChoices("slack_bot_token", "env_slack_app_token"),
    )
    slack_signing_secret: str = Field(
        default="",
        validation_alias=AliasChoices("slack_signing_secret", "env_slack_sig_secret"),
    )

    # GitLab pipeline trigger
    gitlab_trigger_token: str = Field(
        default="",
        validation_alias=AliasChoices("gitlab_trigger_token", "env_gitlab_trigger_token"),
    )
    gitlab_trigger_url: str = DEFAULT_TRIGGER_URL
    gitlab_trigger_ref: str = "master"
    gitlab_trigger_label: str = "ESXi"

    # App
    http_timeout: int = 10
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 4390

    def check_required(self) -> None:
        """Raise ConfigurationError listing every required value that is unset."""
        missing = [
            name
            for name in ("slack_bot_token", "slack_signing_secret", "gitlab_trigger_token")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                "Missing required configuration: " + ", ".join(m.upper() for m in missing)
            )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
