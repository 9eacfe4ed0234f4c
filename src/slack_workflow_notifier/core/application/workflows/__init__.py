from slack_workflow_notifier.core.application.workflows.notify_workflow_status import (
    NotifyWorkflowStatusWorkflow,
)

__all__ = ["NotifyWorkflowStatusWorkflow"]
