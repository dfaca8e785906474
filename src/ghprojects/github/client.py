"""One-shot GitHub GraphQL/REST request helper."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from ghprojects.contracts.exceptions import GitHubAPIError, ProviderError, RateLimitError
from ghprojects.github import queries

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RETRY_AFTER = 60
MAX_PAGE_SIZE = 100
USER_AGENT = "ghprojects"


def clamp_page_size(first: int | None, *, default: int = 20) -> int:
    """Return the page size to send to GitHub, capped at :data:`MAX_PAGE_SIZE`."""
    if not first:
        return default
    return min(first, MAX_PAGE_SIZE)


class GitHubClient:
    """Thin async wrapper that sends exactly one HTTP request per call.

    No retries, caching, batching or pagination are performed. Use as an
    async context manager unless an ``http_client`` is injected, in which
    case the caller owns its lifecycle.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def graphql_url(self) -> str:
        return f"{self._api_url}/graphql"

    async def __aenter__(self) -> GitHubClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(30.0))
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query or mutation and return its ``data`` payload.

        ``None``-valued variables are dropped so optional arguments stay unset.

        Raises:
            RateLimitError: GitHub answered 429.
            GitHubAPIError: Non-2xx status, GraphQL ``errors``, or missing ``data``.
        """
        body = {
            "query": query,
            "variables": {key: value for key, value in (variables or {}).items() if value is not None},
        }
        response = await self._send("POST", self.graphql_url, headers=self._headers(), json=body)
        self._raise_for_status(response, "GitHub API request failed")

        payload = self._parse_json(response)
        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            messages = ", ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors
            )
            raise GitHubAPIError(f"GraphQL errors: {messages}")

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise GitHubAPIError("GraphQL response missing data")
        return data

    async def rest(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute a REST request and return the parsed JSON body (``{}`` for 204)."""
        url = endpoint if endpoint.startswith("http") else f"{self._api_url}{endpoint}"
        headers = {
            **self._headers(),
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        response = await self._send(method, url, headers=headers, json=json, params=params)
        self._raise_for_status(response, "GitHub REST API request failed")
        if response.status_code == 204:
            return {}
        return self._parse_json(response)

    async def get_repository_node_id(self, owner: str, repo: str) -> str:
        data = await self.graphql(queries.GET_REPOSITORY_ID, {"owner": owner, "repo": repo})
        repository = data.get("repository")
        if not isinstance(repository, dict) or not isinstance(repository.get("id"), str):
            raise GitHubAPIError(f"Repository not found: {owner}/{repo}")
        return repository["id"]

    async def get_issue_node_id(self, owner: str, repo: str, issue_number: int) -> str:
        data = await self.graphql(
            queries.GET_ISSUE_ID,
            {"owner": owner, "repo": repo, "issueNumber": issue_number},
        )
        repository = data.get("repository")
        if not isinstance(repository, dict):
            raise GitHubAPIError(f"Repository not found: {owner}/{repo}")
        issue = repository.get("issue")
        if not isinstance(issue, dict) or not isinstance(issue.get("id"), str):
            raise GitHubAPIError(f"Issue not found: {owner}/{repo}#{issue_number}")
        return issue["id"]

    async def get_organization_node_id(self, login: str) -> str:
        data = await self.graphql(queries.GET_ORGANIZATION_ID, {"login": login})
        organization = data.get("organization")
        if not isinstance(organization, dict) or not isinstance(organization.get("id"), str):
            raise GitHubAPIError(f"Organization not found: {login}")
        return organization["id"]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is None:
            raise ProviderError("GitHubClient is not open. Use 'async with'.")
        logger.debug("GitHub %s %s", method, url)
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise GitHubAPIError(f"GitHub request failed: {exc}") from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, prefix: str) -> None:
        if response.status_code == 429:
            retry_after = GitHubClient._parse_retry_after(response)
            logger.warning("GitHub rate limit hit; retry after %d seconds", retry_after)
            raise RateLimitError(retry_after)
        if response.is_success:
            return

        message = f"{prefix}: {response.status_code} {response.reason_phrase}"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = f"{message} - {body['message']}"
        raise GitHubAPIError(message, status_code=response.status_code)

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> int:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return DEFAULT_RETRY_AFTER
        try:
            return max(0, int(float(raw)))
        except ValueError:
            return DEFAULT_RETRY_AFTER

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise GitHubAPIError("GitHub returned a non-JSON response", status_code=response.status_code) from exc
