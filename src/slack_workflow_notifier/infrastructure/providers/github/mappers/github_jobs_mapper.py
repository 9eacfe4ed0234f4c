from typing import Any

from slack_workflow_notifier.core.domain.workflow import JobRecord, StepRecord


class GitHubJobsMapper:
    """Maps the 'list jobs for a workflow run' payload onto domain records."""

    def to_jobs(self, payload: Any) -> list[JobRecord]:
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        jobs = payload.get("jobs")
        if not isinstance(jobs, list):
            raise ValueError("Response has no 'jobs' list")
        return [self.to_job(job) for job in jobs if isinstance(job, dict)]

    def to_job(self, job: dict[str, Any]) -> JobRecord:
        steps = job.get("steps") or []
        return JobRecord(
            id=int(job["id"]),
            name=str(job.get("name", "")),
            status=str(job.get("status") or ""),
            conclusion=job.get("conclusion"),
            steps=tuple(self.to_step(step) for step in steps if isinstance(step, dict)),
        )

    @staticmethod
    def to_step(step: dict[str, Any]) -> StepRecord:
        return StepRecord(name=str(step.get("name", "")), conclusion=step.get("conclusion"))
