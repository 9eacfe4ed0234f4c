from slack_workflow_notifier.core.domain.workflow.value_objects.job_status import JobStatus
from slack_workflow_notifier.core.domain.workflow.value_objects.workflow_conclusion import (
    WorkflowConclusion,
)

__all__ = ["JobStatus", "WorkflowConclusion"]
