"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class ProjectBoardClientBase(ABC):
    """Base ABC for clients used by the webhook pipeline."""

    # GraphQL
    @abstractmethod
    async def execute_query(self, query: str) -> dict[str, Any]:
        """Execute a GraphQL query document and return the parsed response body."""
        pass

    # Issue mutation
    @abstractmethod
    async def close_issue(self, owner: str, repo_name: str, issue_number: int) -> Any:
        """Close an issue in the given repository."""
        pass
