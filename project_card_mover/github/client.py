# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from collections.abc import Generator
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

import httpx
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

if TYPE_CHECKING:
    from githubkit import GitHubCore

USER_AGENT = "ProjectCardMover"


class BearerTokenAuth(httpx.Auth):
    """Sends the token as `Authorization: Bearer <token>`."""

    def __init__(self, token: str) -> None:
        """Initialize the auth hook with the token to send."""
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Set the bearer Authorization header on the outgoing request."""
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


@dataclass
class BearerTokenAuthStrategy(TokenAuthStrategy):
    """Personal access token authentication using the Bearer scheme."""

    def get_auth_flow(self, github: "GitHubCore") -> httpx.Auth:
        """Return the bearer auth hook for this token."""
        return BearerTokenAuth(self.token)


GitHubClient: TypeAlias = GitHub[BearerTokenAuthStrategy]


async def get_github_pat_client(github_token: str, github_api_url: str) -> GitHubClient:
    """Returns an authenticated GitHub client using a personal access token.

    Every request made through the client carries `Authorization: Bearer <token>`
    and the ProjectCardMover User-Agent.
    """
    if not github_token:
        raise RuntimeError("GitHub token authentication requires github_token in config.")
    # Disable HTTP caching and automatic retries
    return GitHub(
        auth=BearerTokenAuthStrategy(github_token),
        base_url=github_api_url,
        user_agent=USER_AGENT,
        http_cache=False,
        auto_retry=False,
    )
