import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slack_workflow_notifier.core.application.exceptions import ConfigurationError
from slack_workflow_notifier.core.domain.workflow import RunContext

logger = structlog.get_logger()

AVATAR_BASE_URL = "https://avatars.githubusercontent.com"


class GithubContextSettings(BaseSettings):
    """Default environment variables exposed by the GitHub Actions runner."""

    repository: str = Field(default="", alias="GITHUB_REPOSITORY")
    actor: str = Field(default="", alias="GITHUB_ACTOR")
    sha: str = Field(default="", alias="GITHUB_SHA")
    ref: str = Field(default="", alias="GITHUB_REF")
    run_id: int | None = Field(default=None, alias="GITHUB_RUN_ID")
    workflow: str = Field(default="", alias="GITHUB_WORKFLOW")
    event_path: Path | None = Field(default=None, alias="GITHUB_EVENT_PATH")
    server_url: str = Field(default="https://github.com", alias="GITHUB_SERVER_URL")
    api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")

    def to_run_context(self) -> RunContext:
        missing = [
            name
            for name, value in {
                "GITHUB_REPOSITORY": self.repository,
                "GITHUB_RUN_ID": self.run_id,
            }.items()
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        return RunContext(
            repository=self.repository,
            actor=self.actor,
            actor_avatar_url=self.actor_avatar_url(),
            sha=self.sha,
            ref=self.ref,
            run_id=self.run_id,
            workflow=self.workflow,
            server_url=self.server_url,
        )

    def actor_avatar_url(self) -> str:
        """Avatar of the event sender, falling back to the actor's public avatar."""
        sender = self._read_event_payload().get("sender")
        if isinstance(sender, dict) and sender.get("avatar_url"):
            return str(sender["avatar_url"])
        return f"{AVATAR_BASE_URL}/{self.actor}"

    def _read_event_payload(self) -> dict[str, Any]:
        if self.event_path is None or not self.event_path.is_file():
            return {}
        try:
            payload = json.loads(self.event_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(
                "Could not read event payload", path=str(self.event_path), error=str(exc)
            )
            return {}
        return payload if isinstance(payload, dict) else {}

    model_config = SettingsConfigDict(env_file=None, env_ignore_empty=True, extra="ignore")
