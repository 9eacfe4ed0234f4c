from dataclasses import dataclass

from slack_workflow_notifier.core.domain.workflow.value_objects import WorkflowConclusion


@dataclass(frozen=True)
class Classification:
    conclusion: WorkflowConclusion = WorkflowConclusion.SUCCESS
    failed_id: int | None = None
    failed_job: str | None = None
    failed_step: str | None = None
