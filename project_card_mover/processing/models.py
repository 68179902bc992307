"""Typed views over the GraphQL responses consumed by the pipeline."""

from dataclasses import dataclass, field
from typing import Any

from project_card_mover.utils.helpers import get_nested_value

STATUS_FIELD_NAME = "Status"
DONE_STATUS_VALUE = "Done"


@dataclass
class FieldValue:
    """A single project item field value.

    Exactly one of `text`, `date` or `name` is expected to be set, depending
    on whether the field is a text, date or single-select field.
    """

    field_name: str | None
    text: str | None = None
    date: str | None = None
    name: str | None = None

    @classmethod
    def from_node(cls, node: Any) -> "FieldValue":
        """Build a field value from a `fieldValues.nodes[]` entry."""
        return cls(
            field_name=get_nested_value(node, "field", "name", expected_type=str),
            text=get_nested_value(node, "text", expected_type=str),
            date=get_nested_value(node, "date", expected_type=str),
            name=get_nested_value(node, "name", expected_type=str),
        )

    @property
    def value(self) -> str | None:
        """The value of whichever variant is set."""
        for candidate in (self.name, self.text, self.date):
            if candidate is not None:
                return candidate
        return None


@dataclass
class ProjectItemDetails:
    """Project item field values and linked content from the field-values query."""

    item_id: str | None
    field_values: list[FieldValue] = field(default_factory=list)
    content_id: str | None = None
    content_title: str | None = None
    repository_name: str | None = None
    repository_owner: str | None = None
    assignees: list[str] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: Any) -> "ProjectItemDetails":
        """Build project item details from a decoded field-values query response."""
        node = get_nested_value(response, "data", "node", expected_type=dict)
        field_value_nodes = get_nested_value(node, "fieldValues", "nodes", expected_type=list) or []
        assignee_nodes = get_nested_value(node, "content", "assignees", "nodes", expected_type=list) or []
        assignees = [login for login in (get_nested_value(a, "login", expected_type=str) for a in assignee_nodes) if login is not None]
        return cls(
            item_id=get_nested_value(node, "id", expected_type=str),
            field_values=[FieldValue.from_node(n) for n in field_value_nodes],
            content_id=get_nested_value(node, "content", "id", expected_type=str),
            content_title=get_nested_value(node, "content", "title", expected_type=str),
            repository_name=get_nested_value(node, "content", "repository", "name", expected_type=str),
            repository_owner=get_nested_value(node, "content", "repository", "owner", "login", expected_type=str),
            assignees=assignees,
        )

    def get_field_value(self, field_name: str) -> str | None:
        """Return the value of the first field value belonging to `field_name`."""
        for field_value in self.field_values:
            if field_value.field_name == field_name:
                return field_value.value
        return None

    def find_status_done(self) -> FieldValue | None:
        """Return the first field value whose field is "Status" with the single-select value "Done"."""
        for field_value in self.field_values:
            if field_value.field_name == STATUS_FIELD_NAME and field_value.name == DONE_STATUS_VALUE:
                return field_value
        return None

    @property
    def is_done(self) -> bool:
        """Whether the item's Status field is Done."""
        return self.find_status_done() is not None


def parse_issue_number(response: Any) -> int | None:
    """Read the repository-scoped issue number from an issue-number query response."""
    number = get_nested_value(response, "data", "node", "number", expected_type=int)
    if number is None or number < 0:
        return None
    return number
