from slack_workflow_notifier.infrastructure.providers.slack.slack_webhook_notifier import (
    SlackWebhookNotifier,
)

__all__ = ["SlackWebhookNotifier"]
