"""Reduces the jobs of a workflow run to a single outcome."""

from collections.abc import Iterable

from slack_workflow_notifier.core.domain.workflow.classification import Classification
from slack_workflow_notifier.core.domain.workflow.job_record import JobRecord
from slack_workflow_notifier.core.domain.workflow.value_objects import WorkflowConclusion

CANCELLED_CONCLUSION = "cancelled"


def classify_jobs(jobs: Iterable[JobRecord]) -> Classification:
    """Return the outcome of the run from its jobs, in API order.

    Jobs that are not completed are skipped: the only job still running
    should be the one sending the notification. Only the first completed,
    non-successful job is reported, even when several failed in parallel.
    """
    for job in jobs:
        if not job.is_completed():
            continue
        if job.succeeded():
            continue

        failed_step = job.first_failed_step()
        conclusion = WorkflowConclusion.FAILURE
        if job.conclusion == CANCELLED_CONCLUSION:
            conclusion = WorkflowConclusion.CANCELLED

        return Classification(
            conclusion=conclusion,
            failed_id=job.id,
            failed_job=job.name,
            failed_step=failed_step.name if failed_step else None,
        )

    return Classification()
