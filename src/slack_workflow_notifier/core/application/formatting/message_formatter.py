"""Pure functions building the Slack messages for each workflow event."""

from slack_workflow_notifier.core.domain.notification import (
    AttachmentColor,
    SlackAttachment,
    SlackMessage,
)
from slack_workflow_notifier.core.domain.workflow import Classification, RunContext


def build_base_message(
    context: RunContext, channel: str, username: str, icon_emoji: str
) -> SlackMessage:
    """Build the message shared by every variant; its text is filled in later."""
    footer = slack_link(context.repository_url, f"{context.repository} @ {context.short_sha}")
    return SlackMessage(
        channel=channel,
        username=username,
        icon_emoji=icon_emoji,
        attachments=(
            SlackAttachment(
                author_name=context.actor,
                author_icon=context.actor_avatar_url,
                footer=footer,
            ),
        ),
    )


def starting_message(base: SlackMessage, context: RunContext) -> SlackMessage:
    return base.with_attachment(text=f"Starting *{workflow_link(context)}* workflow")


def success_message(base: SlackMessage, context: RunContext) -> SlackMessage:
    return base.with_attachment(
        text=f"Finished *{workflow_link(context)}* workflow successfully",
        color=AttachmentColor.GOOD,
    )


def failure_message(
    base: SlackMessage, context: RunContext, classification: Classification
) -> SlackMessage:
    job_link = slack_link(
        context.job_url(classification.failed_id), classification.failed_job or ""
    )
    text = f"Workflow *{workflow_link(context)} failed* during job {job_link}"
    if classification.failed_step:
        text += f" at step `{classification.failed_step}`"
    return base.with_attachment(text=text, color=AttachmentColor.DANGER)


def cancelled_message(base: SlackMessage, context: RunContext) -> SlackMessage:
    return base.with_attachment(
        text=f"Workflow *{workflow_link(context)} cancelled*",
        color=AttachmentColor.WARNING,
    )


def workflow_link(context: RunContext) -> str:
    return slack_link(context.workflow_run_url, context.workflow)


def slack_link(url: str, label: str) -> str:
    """Format a Slack mrkdwn link."""
    return f"<{url}|{label}>"
