"""Composition root: assembles the notify workflow from validated settings."""

from slack_workflow_notifier.core.application.workflows import NotifyWorkflowStatusWorkflow
from slack_workflow_notifier.infrastructure.actions.workflow_commands import add_mask
from slack_workflow_notifier.infrastructure.configuration import (
    ActionSettings,
    GithubContextSettings,
)
from slack_workflow_notifier.infrastructure.providers.github import (
    GitHubActionsAdapter,
    GitHubHttpClient,
)
from slack_workflow_notifier.infrastructure.providers.slack import SlackWebhookNotifier


def build_notify_workflow(
    settings: ActionSettings, github: GithubContextSettings
) -> NotifyWorkflowStatusWorkflow:
    # Fail fast on inputs and mask secrets before anything can log them
    webhook_url = settings.require_webhook_url()
    add_mask(webhook_url.get_secret_value())

    ci_jobs = None
    if not settings.starting:
        github_token = settings.require_github_token()
        add_mask(github_token.get_secret_value())
        ci_jobs = GitHubActionsAdapter(GitHubHttpClient(github_token, base_url=github.api_url))

    return NotifyWorkflowStatusWorkflow(
        context=github.to_run_context(),
        notifier=SlackWebhookNotifier(webhook_url),
        ci_jobs=ci_jobs,
        channel=settings.channel,
        username=settings.username,
        icon_emoji=settings.icon,
    )
