from slack_workflow_notifier.core.application.formatting.message_formatter import (
    build_base_message,
    cancelled_message,
    failure_message,
    starting_message,
    success_message,
)

__all__ = [
    "build_base_message",
    "cancelled_message",
    "failure_message",
    "starting_message",
    "success_message",
]
