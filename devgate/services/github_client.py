"""
GitHub Client - Single-shot calls against the GitHub REST API.

Handles:
- Listing repositories visible to the configured token
- Reading repository contents at a path/ref
- Creating or updating a file (base64 content, optional prior sha)
- Opening pull requests

Every operation is exactly one HTTP request. Failures are not retried; the
remote error message is surfaced as-is.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import httpx

from devgate.core.exceptions import ExternalFailureError
from devgate.models.schemas import ChangeRequestRef, ContentBlob, RepositorySummary


logger = logging.getLogger(__name__)


@dataclass
class GitHubClientConfig:
    """Configuration for the GitHub client."""
    token: Optional[str] = None
    api_url: str = "https://api.github.com"
    timeout_seconds: float = 30


class GitHubClient:
    """
    GitHub REST client authorized by one bearer token.

    The token is fixed at construction. ``transport`` lets tests plug in
    an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: Optional[GitHubClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or GitHubClientConfig()
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers with authentication."""
        if not self.config.token:
            raise ExternalFailureError("GITHUB_TOKEN not set in environment variables")
        return {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": "application/vnd.github.v3+json",
        }

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Make one request and return the decoded JSON body."""
        headers = self._get_headers()
        logger.debug("GitHub %s %s", method, endpoint)

        try:
            async with httpx.AsyncClient(
                base_url=self.config.api_url,
                headers=headers,
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, endpoint, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise ExternalFailureError(_remote_message(e.response) or str(e))
        except httpx.HTTPError as e:
            raise ExternalFailureError(str(e) or type(e).__name__)

    async def list_repositories(self) -> List[RepositorySummary]:
        """List repositories accessible to the token (first page only)."""
        data = await self._request("GET", "/user/repos")
        return [
            RepositorySummary(
                name=repo["name"],
                full_name=repo["full_name"],
                description=repo.get("description"),
                url=repo["html_url"],
                default_branch=repo.get("default_branch"),
            )
            for repo in data
        ]

    async def get_content(
        self,
        owner: str,
        repo: str,
        path: str = "",
        ref: Optional[str] = None,
    ) -> Union[ContentBlob, List[ContentBlob]]:
        """Fetch a file or directory listing at ``path`` (optionally at ``ref``)."""
        params = {"ref": ref} if ref else {}
        data = await self._request(
            "GET", f"/repos/{owner}/{repo}/contents/{path}", params=params
        )
        if isinstance(data, list):
            return [ContentBlob.model_validate(item) for item in data]
        return ContentBlob.model_validate(data)

    async def put_content(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: Optional[str] = None,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create or update a file.

        Supplying ``sha`` (the blob sha of the current file) makes this an
        update; omitting it creates a new file.
        """
        payload: Dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if branch:
            payload["branch"] = branch
        if sha:
            payload["sha"] = sha

        logger.info(
            "%s %s/%s:%s", "Updating" if sha else "Creating", owner, repo, path
        )
        return await self._request(
            "PUT", f"/repos/{owner}/{repo}/contents/{path}", json=payload
        )

    async def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str,
        body: str = "",
    ) -> ChangeRequestRef:
        """Open a pull request from ``head`` into ``base``."""
        data = await self._request(
            "POST",
            f"/repos/{owner}/{repo}/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        )
        return ChangeRequestRef(
            number=data["number"],
            title=data["title"],
            url=data["html_url"],
        )


def _remote_message(response: httpx.Response) -> Optional[str]:
    """Extract GitHub's ``message`` field from an error response."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        return data.get("message")
    return None
