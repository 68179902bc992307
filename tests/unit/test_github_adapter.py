"""Unit tests for the GitHubKitAdapter class and related GitHub operations."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from githubkit.exception import GitHubException

from project_card_mover.github.adapter import GitHubKitAdapter


class DummyResponse:
    """A dummy response object to mock GitHub API responses."""

    def __init__(self, body: object = None, status_code: int = 200) -> None:
        """Initialize the dummy response with a JSON body and status code."""
        self.status_code: int = status_code
        self._body = body
        self.parsed_data = MagicMock()
        self.parsed_data.state = "closed"

    def json(self) -> object:
        """Return the decoded JSON body."""
        return self._body


@pytest.mark.asyncio
async def test_execute_query_posts_query_document() -> None:
    """Test that the query is posted to the GraphQL endpoint wrapped in a query object."""
    adapter = GitHubKitAdapter(MagicMock())
    body = {"data": {"node": {"number": 42}}}
    adapter.client.arequest = AsyncMock(return_value=DummyResponse(body))

    result = await adapter.execute_query("query { viewer { login } }")

    assert result == body
    adapter.client.arequest.assert_awaited_once_with("POST", "/graphql", json={"query": "query { viewer { login } }"})


@pytest.mark.asyncio
async def test_execute_query_returns_errors_untouched() -> None:
    """Test that GraphQL errors are handed back to the caller rather than raised."""
    adapter = GitHubKitAdapter(MagicMock())
    body = {"data": {"node": None}, "errors": [{"message": "Could not resolve to a node"}]}
    adapter.client.arequest = AsyncMock(return_value=DummyResponse(body))
    assert await adapter.execute_query("query {}") == body


@pytest.mark.asyncio
async def test_execute_query_non_object_body() -> None:
    """Test that a body which is not a JSON object raises ValueError."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.arequest = AsyncMock(return_value=DummyResponse(["unexpected"]))
    with pytest.raises(ValueError, match="Unexpected GraphQL response body"):
        await adapter.execute_query("query {}")


@pytest.mark.asyncio
async def test_execute_query_transport_error_propagates() -> None:
    """Test that transport errors reach the caller."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.arequest = AsyncMock(side_effect=GitHubException("Connection refused"))
    with pytest.raises(GitHubException):
        await adapter.execute_query("query {}")


@pytest.mark.asyncio
async def test_close_issue_sets_state_closed() -> None:
    """Test that closing an issue updates its state through the REST API."""
    adapter = GitHubKitAdapter(MagicMock())
    response = DummyResponse()
    adapter.client.rest.issues.async_update = AsyncMock(return_value=response)

    result = await adapter.close_issue("octocat", "Hello-World", 42)

    assert result is response.parsed_data
    adapter.client.rest.issues.async_update.assert_awaited_once_with(
        owner="octocat",
        repo="Hello-World",
        issue_number=42,
        state="closed",
    )


@pytest.mark.asyncio
async def test_close_issue_error_propagates() -> None:
    """Test that a failed close reaches the caller."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.issues.async_update = AsyncMock(side_effect=GitHubException("Not Found"))
    with pytest.raises(GitHubException):
        await adapter.close_issue("octocat", "Hello-World", 42)


@pytest.mark.asyncio
async def test_create_builds_token_client() -> None:
    """Test that create wires a token-authenticated client into the adapter."""
    client = MagicMock()
    with patch("project_card_mover.github.adapter.get_github_pat_client", new=AsyncMock(return_value=client)) as mock_get_client:
        adapter = await GitHubKitAdapter.create(github_token="token", github_api_url="https://ghe.example.com/api/v3")
    mock_get_client.assert_awaited_once_with(github_token="token", github_api_url="https://ghe.example.com/api/v3")
    assert adapter.client is client
