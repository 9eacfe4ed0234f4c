from slack_workflow_notifier.core.domain.notification.delivery_result import DeliveryResult
from slack_workflow_notifier.core.domain.notification.slack_message import (
    AttachmentColor,
    SlackAttachment,
    SlackMessage,
)

__all__ = ["AttachmentColor", "DeliveryResult", "SlackAttachment", "SlackMessage"]
