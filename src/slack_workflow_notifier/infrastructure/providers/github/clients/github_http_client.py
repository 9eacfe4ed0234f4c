from typing import Any

import httpx
from pydantic import SecretStr

API_VERSION = "2022-11-28"
USER_AGENT = "slack-workflow-notifier"


class GitHubHttpClient:
    def __init__(
        self,
        token: SecretStr,
        base_url: str = "https://api.github.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token.get_secret_value()}",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": USER_AGENT,
        }

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """GET an absolute URL; use url_for() to build one from an API path."""
        async with httpx.AsyncClient(transport=self._transport) as client:
            return await client.get(url, headers=self._get_headers(), params=params)
