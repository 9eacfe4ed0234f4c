from typing import Any

from pydantic import AliasChoices, Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slack_workflow_notifier.core.application.exceptions import ConfigurationError


class ActionSettings(BaseSettings):
    """Inputs of the action, read from the INPUT_* variables set by the runner."""

    # ── Secrets ──
    webhook_url: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("INPUT_WEBHOOKURL", "SLACK_WEBHOOK_URL")
    )
    github_token: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("INPUT_GITHUBTOKEN", "GITHUB_TOKEN")
    )

    # ── Message appearance ──
    channel: str = Field(default="#app-log", validation_alias="INPUT_CHANNEL")
    username: str = Field(default="Github Actions", validation_alias="INPUT_USERNAME")
    icon: str = Field(default=":octocat:", validation_alias="INPUT_ICON")

    starting: bool = Field(default=False, validation_alias="INPUT_STARTING")

    @field_validator("channel", "username", "icon", mode="before")
    @classmethod
    def blank_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """An empty input behaves as if it had not been supplied."""
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("webhook_url", "github_token", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("starting", mode="before")
    @classmethod
    def parse_starting(cls, value: Any) -> bool:
        """Only the literal string 'true' marks a starting notification."""
        if isinstance(value, str):
            return value.strip() == "true"
        return bool(value)

    def require_webhook_url(self) -> SecretStr:
        if not self.webhook_url:
            raise ConfigurationError("Input required and not supplied: webhookUrl")
        return self.webhook_url

    def require_github_token(self) -> SecretStr:
        if not self.github_token:
            raise ConfigurationError("Input required and not supplied: githubToken")
        return self.github_token

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)
