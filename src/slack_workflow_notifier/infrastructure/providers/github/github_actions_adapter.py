import httpx

from slack_workflow_notifier.core.application.exceptions import ProviderError
from slack_workflow_notifier.core.application.ports import CiJobsPort
from slack_workflow_notifier.core.domain.workflow import JobRecord
from slack_workflow_notifier.infrastructure.observability import get_logger
from slack_workflow_notifier.infrastructure.providers.github.clients.github_http_client import (
    GitHubHttpClient,
)
from slack_workflow_notifier.infrastructure.providers.github.mappers.github_jobs_mapper import (
    GitHubJobsMapper,
)

logger = get_logger(__name__)

PROVIDER = "GitHub"
PAGE_SIZE = 100


class GitHubActionsAdapter(CiJobsPort):
    """Reads the jobs of a workflow run from the GitHub REST API."""

    def __init__(self, client: GitHubHttpClient, mapper: GitHubJobsMapper | None = None) -> None:
        self._client = client
        self._mapper = mapper or GitHubJobsMapper()

    async def list_run_jobs(self, owner: str, repo: str, run_id: int) -> list[JobRecord]:
        url: str | None = self._client.url_for(f"repos/{owner}/{repo}/actions/runs/{run_id}/jobs")
        params: dict[str, int] | None = {"per_page": PAGE_SIZE}
        jobs: list[JobRecord] = []

        while url:
            response = await self._get_page(url, params)
            jobs.extend(self._parse_page(response, run_id))
            # The "next" link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

        logger.info("Fetched workflow jobs", run_id=run_id, jobs_count=len(jobs))
        return jobs

    async def _get_page(self, url: str, params: dict[str, int] | None) -> httpx.Response:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                PROVIDER,
                f"API returned HTTP {exc.response.status_code} when fetching jobs",
                context={"url": url},
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                PROVIDER, f"Failed to reach API when fetching jobs: {exc}", context={"url": url}
            ) from exc
        return response

    def _parse_page(self, response: httpx.Response, run_id: int) -> list[JobRecord]:
        try:
            return self._mapper.to_jobs(response.json())
        except (ValueError, KeyError, TypeError) as exc:
            raise ProviderError(
                PROVIDER, f"Unexpected jobs payload: {exc}", context={"run_id": run_id}
            ) from exc
