from enum import StrEnum


class WorkflowConclusion(StrEnum):
    """Terminal outcome reported for a whole workflow run."""

    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"
