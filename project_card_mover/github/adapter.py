"""GitHub client adapter for the githubkit library."""

from typing import Any, Self

import structlog
from githubkit import Response
from githubkit.versions.latest.models import Issue

from .abc import ProjectBoardClientBase
from .client import GitHubClient, get_github_pat_client

logger = structlog.get_logger(__name__)


class GitHubKitAdapter(ProjectBoardClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, github_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_token: Personal access token sent as a bearer token
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.debug("Creating client for GitHub instance", github_api_url=github_api_url)
        client = await get_github_pat_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client)

    async def execute_query(self, query: str) -> dict[str, Any]:
        """Send a GraphQL query document and return the parsed JSON body.

        The body is returned as-is, including any `errors` member; callers
        decide what a missing field means. Transport errors and non-2xx
        statuses raise githubkit exceptions, an unparseable body raises
        ValueError.
        """
        response: Response[Any] = await self.client.arequest(
            "POST",
            "/graphql",
            json={"query": query},
        )
        body = response.json()
        if not isinstance(body, dict):
            raise ValueError(f"Unexpected GraphQL response body of type {type(body).__name__}")
        return body

    async def close_issue(self, owner: str, repo_name: str, issue_number: int) -> Issue:
        """Close an issue for a repository."""
        response: Response[Issue] = await self.client.rest.issues.async_update(
            owner=owner,
            repo=repo_name,
            issue_number=issue_number,
            state="closed",
        )
        return response.parsed_data
