"""Builders for GraphQL responses used across unit tests."""

from typing import Any


def build_field_values_response(
    status: str | None = "Done",
    content_id: str | None = "I_kwDOAbc123",
    repository_name: str | None = "Hello-World",
    repository_owner: str | None = "octocat",
) -> dict[str, Any]:
    """Build a field-values query response resembling GitHub's."""
    field_value_nodes: list[dict[str, Any]] = [
        {"text": "Write the docs", "field": {"name": "Title"}},
        {"date": "2024-05-01", "field": {"name": "Due"}},
        {},
    ]
    if status is not None:
        field_value_nodes.append({"name": status, "field": {"name": "Status"}})

    content: dict[str, Any] = {
        "title": "Write the docs",
        "assignees": {"nodes": [{"login": "octocat"}, {"login": "hubot"}]},
    }
    if content_id is not None:
        content["id"] = content_id
    repository: dict[str, Any] = {}
    if repository_name is not None:
        repository["name"] = repository_name
    if repository_owner is not None:
        repository["owner"] = {"login": repository_owner}
    content["repository"] = repository

    return {
        "data": {
            "node": {
                "id": "PVTI_lADOAbc123",
                "fieldValues": {"nodes": field_value_nodes},
                "content": content,
            }
        }
    }


def build_issue_number_response(number: Any = 42) -> dict[str, Any]:
    """Build an issue-number query response resembling GitHub's."""
    return {"data": {"node": {"number": number}}}
