"""Unit tests — GitHubActionsAdapter (httpx.MockTransport, zero network)."""

import httpx
import pytest
from pydantic import SecretStr

from slack_workflow_notifier.core.application.exceptions import ProviderError
from slack_workflow_notifier.infrastructure.providers.github import (
    GitHubActionsAdapter,
    GitHubHttpClient,
)

JOBS_URL = "https://api.github.com/repos/acme/rocket/actions/runs/4242/jobs"


def _job(job_id: int, name: str, conclusion: str | None = "success") -> dict:
    return {
        "id": job_id,
        "name": name,
        "status": "completed",
        "conclusion": conclusion,
        "html_url": f"https://github.com/acme/rocket/actions/runs/4242/job/{job_id}",
        "steps": [{"name": "Run tests", "status": "completed", "conclusion": conclusion}],
    }


def _adapter(handler) -> GitHubActionsAdapter:
    client = GitHubHttpClient(SecretStr("ghs_test"), transport=httpx.MockTransport(handler))
    return GitHubActionsAdapter(client)


class TestListRunJobs:
    async def test_requests_jobs_with_auth_headers(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"total_count": 1, "jobs": [_job(1, "build")]})

        jobs = await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

        assert [job.name for job in jobs] == ["build"]
        request = seen[0]
        assert str(request.url) == f"{JOBS_URL}?per_page=100"
        assert request.headers["Authorization"] == "Bearer ghs_test"
        assert request.headers["Accept"] == "application/vnd.github+json"

    async def test_maps_steps_and_conclusions(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"jobs": [_job(7, "test", "failure")]})

        [job] = await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

        assert job.id == 7
        assert job.conclusion == "failure"
        assert job.is_completed()
        assert job.steps[0].name == "Run tests"
        assert job.steps[0].conclusion == "failure"

    async def test_follows_next_links_in_order(self) -> None:
        page_2 = f"{JOBS_URL}?per_page=100&page=2"

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("page") == "2":
                return httpx.Response(200, json={"jobs": [_job(2, "second")]})
            return httpx.Response(
                200,
                json={"jobs": [_job(1, "first")]},
                headers={"Link": f'<{page_2}>; rel="next", <{page_2}>; rel="last"'},
            )

        jobs = await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

        assert [job.name for job in jobs] == ["first", "second"]

    async def test_http_error_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(ProviderError, match="HTTP 404"):
            await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

    async def test_transport_error_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError, match="Failed to reach API"):
            await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

    async def test_unexpected_payload_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"message": "nope"})

        with pytest.raises(ProviderError, match="Unexpected jobs payload"):
            await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

    async def test_invalid_json_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(ProviderError):
            await _adapter(handler).list_run_jobs("acme", "rocket", 4242)

    async def test_non_object_body_raises_provider_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"id": 1}])

        with pytest.raises(ProviderError, match="Unexpected jobs payload"):
            await _adapter(handler).list_run_jobs("acme", "rocket", 4242)
