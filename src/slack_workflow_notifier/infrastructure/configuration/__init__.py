from slack_workflow_notifier.infrastructure.configuration.action_settings import ActionSettings
from slack_workflow_notifier.infrastructure.configuration.github_context_settings import (
    GithubContextSettings,
)

__all__ = ["ActionSettings", "GithubContextSettings"]
