from slack_workflow_notifier.core.domain.workflow.classification import Classification
from slack_workflow_notifier.core.domain.workflow.job_record import JobRecord, StepRecord
from slack_workflow_notifier.core.domain.workflow.outcome_classifier import classify_jobs
from slack_workflow_notifier.core.domain.workflow.run_context import RunContext
from slack_workflow_notifier.core.domain.workflow.value_objects import (
    JobStatus,
    WorkflowConclusion,
)

__all__ = [
    "Classification",
    "JobRecord",
    "JobStatus",
    "RunContext",
    "StepRecord",
    "WorkflowConclusion",
    "classify_jobs",
]
