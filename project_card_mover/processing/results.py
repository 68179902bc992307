"""Contains results of webhook processing."""

from enum import Enum


class WebhookOutcome(str, Enum):
    """How processing of a single webhook delivery ended."""

    ACTION_MISSING = "action_missing"
    IGNORED_ACTION = "ignored_action"
    NODE_ID_MISSING = "node_id_missing"
    FIELD_VALUES_QUERY_FAILED = "field_values_query_failed"
    NOT_DONE = "not_done"
    CONTENT_ID_MISSING = "content_id_missing"
    ISSUE_NUMBER_QUERY_FAILED = "issue_number_query_failed"
    ISSUE_NUMBER_MISSING = "issue_number_missing"
    REPOSITORY_MISSING = "repository_missing"
    CLOSE_FAILED = "close_failed"
    ISSUE_CLOSED = "issue_closed"


class WebhookProcessingResult:
    """Contains the result of processing a single webhook delivery."""

    def __init__(
        self,
        outcome: WebhookOutcome,
        node_id: str | None = None,
        owner: str | None = None,
        repo_name: str | None = None,
        issue_number: int | None = None,
        error: str | None = None,
    ) -> None:
        """Initialize the result with the outcome and whatever was resolved before it."""
        self.outcome = outcome
        self.node_id = node_id
        self.owner = owner
        self.repo_name = repo_name
        self.issue_number = issue_number
        self.error = error

    @property
    def issue_closed(self) -> bool:
        """Whether the linked issue was closed."""
        return self.outcome == WebhookOutcome.ISSUE_CLOSED
