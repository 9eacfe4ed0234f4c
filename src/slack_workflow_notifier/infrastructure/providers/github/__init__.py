from slack_workflow_notifier.infrastructure.providers.github.clients.github_http_client import (
    GitHubHttpClient,
)
from slack_workflow_notifier.infrastructure.providers.github.github_actions_adapter import (
    GitHubActionsAdapter,
)
from slack_workflow_notifier.infrastructure.providers.github.mappers.github_jobs_mapper import (
    GitHubJobsMapper,
)

__all__ = ["GitHubActionsAdapter", "GitHubHttpClient", "GitHubJobsMapper"]
