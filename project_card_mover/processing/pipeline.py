"""Decides whether a project board webhook should close the linked issue."""

from typing import Any

import structlog
from githubkit.exception import GitHubException

from project_card_mover.github.abc import ProjectBoardClientBase
from project_card_mover.github.queries import prepare_graphql_query, prepare_issue_number_query
from project_card_mover.processing.models import STATUS_FIELD_NAME, ProjectItemDetails, parse_issue_number
from project_card_mover.processing.results import WebhookOutcome, WebhookProcessingResult
from project_card_mover.utils.helpers import get_nested_value

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

REORDERED_ACTION = "reordered"


async def handle_webhook_payload(payload: Any, github_adapter: ProjectBoardClientBase) -> WebhookProcessingResult:
    """Run the webhook decision pipeline for a single delivery.

    Only `reordered` events carrying a `projects_v2_item.node_id` are acted
    upon. Everything else is logged and ignored. No exception escapes for
    remote failures; the result describes where processing stopped.
    """
    if not isinstance(payload, dict) or "action" not in payload:
        logger.info("Action field not found in payload")
        return WebhookProcessingResult(WebhookOutcome.ACTION_MISSING)

    action = payload["action"]
    if action != REORDERED_ACTION:
        logger.info("Not a reordered event, ignoring", action=action)
        return WebhookProcessingResult(WebhookOutcome.IGNORED_ACTION)

    logger.info("Received a reordered event")
    node_id = get_nested_value(payload, "projects_v2_item", "node_id", expected_type=str)
    if node_id is None:
        logger.info("Node ID not found in payload")
        return WebhookProcessingResult(WebhookOutcome.NODE_ID_MISSING)

    return await close_issue_if_done(node_id, github_adapter)


async def close_issue_if_done(node_id: str, github_adapter: ProjectBoardClientBase) -> WebhookProcessingResult:
    """Close the issue linked to a project item when its Status field is Done."""
    try:
        response = await github_adapter.execute_query(prepare_graphql_query(node_id))
    except (GitHubException, ValueError) as exc:
        logger.error(
            "Failed to query project item field values",
            node_id=node_id,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return WebhookProcessingResult(WebhookOutcome.FIELD_VALUES_QUERY_FAILED, node_id=node_id, error=str(exc))

    logger.debug("Received field values response", node_id=node_id, response=response)
    item = ProjectItemDetails.from_response(response)

    if not item.is_done:
        logger.info("Status is not Done, ignoring", node_id=node_id, item_id=item.item_id, status=item.get_field_value(STATUS_FIELD_NAME))
        return WebhookProcessingResult(WebhookOutcome.NOT_DONE, node_id=node_id)

    logger.info("Status is Done", node_id=node_id, item_id=item.item_id, title=item.content_title, assignees=item.assignees)

    if item.content_id is None:
        logger.info("Issue ID not found in the field values response", node_id=node_id)
        return WebhookProcessingResult(WebhookOutcome.CONTENT_ID_MISSING, node_id=node_id)

    try:
        issue_response = await github_adapter.execute_query(prepare_issue_number_query(item.content_id))
    except (GitHubException, ValueError) as exc:
        logger.error(
            "Failed to query issue number",
            node_id=node_id,
            issue_id=item.content_id,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return WebhookProcessingResult(WebhookOutcome.ISSUE_NUMBER_QUERY_FAILED, node_id=node_id, error=str(exc))

    issue_number = parse_issue_number(issue_response)
    if issue_number is None:
        logger.info("Issue number not found in the issue number response", node_id=node_id, issue_id=item.content_id)
        return WebhookProcessingResult(WebhookOutcome.ISSUE_NUMBER_MISSING, node_id=node_id)

    logger.info("Resolved the issue this card represents", node_id=node_id, issue_number=issue_number)

    # Repository details come from the field values response, not the issue number one.
    if item.repository_name is None or item.repository_owner is None:
        logger.info(
            "Repository information not found",
            node_id=node_id,
            repo_name=item.repository_name,
            owner=item.repository_owner,
        )
        return WebhookProcessingResult(WebhookOutcome.REPOSITORY_MISSING, node_id=node_id, issue_number=issue_number)

    owner, repo_name = item.repository_owner, item.repository_name
    logger.info("Closing issue", repository=f"{owner}/{repo_name}", issue_number=issue_number)
    try:
        await github_adapter.close_issue(owner, repo_name, issue_number)
    except (GitHubException, ValueError) as exc:
        logger.error(
            "Failed to close issue",
            repository=f"{owner}/{repo_name}",
            issue_number=issue_number,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return WebhookProcessingResult(
            WebhookOutcome.CLOSE_FAILED,
            node_id=node_id,
            owner=owner,
            repo_name=repo_name,
            issue_number=issue_number,
            error=str(exc),
        )

    logger.info("Closed issue", repository=f"{owner}/{repo_name}", issue_number=issue_number)
    return WebhookProcessingResult(
        WebhookOutcome.ISSUE_CLOSED,
        node_id=node_id,
        owner=owner,
        repo_name=repo_name,
        issue_number=issue_number,
    )
