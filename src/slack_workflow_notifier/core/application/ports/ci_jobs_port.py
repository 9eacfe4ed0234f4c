from abc import ABC, abstractmethod

from slack_workflow_notifier.core.domain.workflow import JobRecord


class CiJobsPort(ABC):
    @abstractmethod
    async def list_run_jobs(self, owner: str, repo: str, run_id: int) -> list[JobRecord]:
        """Returns every job of the given workflow run, in provider order."""
        pass
