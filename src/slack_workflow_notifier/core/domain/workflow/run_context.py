from dataclasses import dataclass

BRANCH_REF_PREFIX = "refs/heads/"
SHORT_SHA_LENGTH = 6


@dataclass(frozen=True)
class RunContext:
    """Metadata of the workflow run that is being reported on."""

    repository: str
    actor: str
    actor_avatar_url: str
    sha: str
    ref: str
    run_id: int
    workflow: str
    server_url: str = "https://github.com"

    def __post_init__(self) -> None:
        if self.repository.count("/") != 1:
            raise ValueError(f"Repository must look like 'owner/name', got '{self.repository}'")

    @property
    def owner(self) -> str:
        return self.repository.split("/")[0]

    @property
    def repository_name(self) -> str:
        return self.repository.split("/")[1]

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def repository_url(self) -> str:
        url = f"{self.server_url.rstrip('/')}/{self.repository}"
        if self.ref.startswith(BRANCH_REF_PREFIX):
            url += f"/tree/{self.ref.removeprefix(BRANCH_REF_PREFIX)}"
        return url

    @property
    def workflow_run_url(self) -> str:
        return f"{self.server_url.rstrip('/')}/{self.repository}/actions/runs/{self.run_id}"

    def job_url(self, job_id: int) -> str:
        return f"{self.server_url.rstrip('/')}/{self.repository}/runs/{job_id}"
