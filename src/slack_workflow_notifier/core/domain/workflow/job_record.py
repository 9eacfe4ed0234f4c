from dataclasses import dataclass, field

from slack_workflow_notifier.core.domain.workflow.value_objects import JobStatus

SUCCESS_CONCLUSION = "success"


@dataclass(frozen=True)
class StepRecord:
    name: str
    conclusion: str | None = None

    def succeeded(self) -> bool:
        return self.conclusion == SUCCESS_CONCLUSION


@dataclass(frozen=True)
class JobRecord:
    """A single job of a workflow run, as reported by the CI provider."""

    id: int
    name: str
    status: str
    conclusion: str | None = None
    steps: tuple[StepRecord, ...] = field(default_factory=tuple)

    def is_completed(self) -> bool:
        return self.status == JobStatus.COMPLETED

    def succeeded(self) -> bool:
        return self.conclusion == SUCCESS_CONCLUSION

    def first_failed_step(self) -> StepRecord | None:
        return next((step for step in self.steps if not step.succeeded()), None)
