"""Minimal GitHub REST client for the validations that query the hosting service."""
from typing import Any, Dict, List, Optional

import httpx

from ..config import ConfigValidationError, GithubConfig
from .snapshot import Comment


class GithubClient:
    """Async client scoped to one repository.

    Attributes:
        config (GithubConfig): The repository and organization to query
        client (httpx.AsyncClient): Underlying HTTP client
    """

    def __init__(
        self,
        config: GithubConfig,
        token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        headers = {"Accept": "application/vnd.github+json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.client = client or httpx.AsyncClient(
            base_url=config.api_url, headers=headers, timeout=10.0
        )

    async def __aenter__(self) -> 'GithubClient':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.client.aclose()

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.config.owner}/{self.config.name}"

    async def _get_all_pages(self, path: str) -> List[Dict[str, Any]]:
        """Collect every page of a list endpoint by following ``Link: rel="next"``."""
        items: List[Dict[str, Any]] = []
        url: Optional[str] = path
        params: Optional[Dict[str, Any]] = {"per_page": 100}
        while url:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            items.extend(response.json())
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None
        return items

    async def fetch_pull_request_comments(self, number: int) -> List[Comment]:
        items = await self._get_all_pages(f"{self._repo_path}/issues/{number}/comments")
        return [
            Comment(
                author=(item.get("user") or {}).get("login", ""),
                author_association=item.get("author_association", "NONE"),
                body=item.get("body") or "",
            )
            for item in items
        ]

    async def fetch_pull_request_files(self, number: int) -> List[str]:
        items = await self._get_all_pages(f"{self._repo_path}/pulls/{number}/files")
        return [item["filename"] for item in items]

    async def is_org_member(self, login: str) -> bool:
        """Whether ``login`` belongs to the configured organization."""
        org = self.config.org or self.config.owner
        response = await self.client.get(f"/orgs/{org}/members/{login}")
        if response.status_code == 204:
            return True
        if response.status_code in (302, 404):
            return False
        response.raise_for_status()
        return False


def require_github_client(github: Optional[GithubClient]) -> GithubClient:
    """Return ``github``, or raise if no ``[github]`` section made a client available."""
    if github is None:
        raise ConfigValidationError('No configuration defined for "github"')
    return github
