"""FastAPI application receiving GitHub project board webhooks.

Endpoints:
- POST /webhook - Receive `projects_v2_item` events

The sender is always answered with 200 and a fixed acknowledgement, whatever
happened while processing. Failures are reported through logs only.
"""

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.responses import PlainTextResponse

from project_card_mover.configuration.models import ServerConfig
from project_card_mover.github.adapter import GitHubKitAdapter
from project_card_mover.processing.pipeline import handle_webhook_payload

logger = structlog.get_logger(__name__)

WEBHOOK_ACKNOWLEDGEMENT = "Webhook received"

router = APIRouter()


@router.post("/webhook", response_class=PlainTextResponse)
async def receive_webhook(request: Request, payload: Annotated[Any, Body()]) -> str:
    """Handle a webhook delivery and acknowledge it."""
    config: ServerConfig = request.app.state.config
    logger.info("Received a webhook call", payload=payload)
    try:
        # Each delivery gets its own client so requests share no state.
        github_adapter = await GitHubKitAdapter.create(
            github_token=config.github_token,
            github_api_url=config.github_api_url,
        )
        result = await handle_webhook_payload(payload, github_adapter)
        logger.info("Finished processing webhook", outcome=result.outcome.value)
    except Exception as exc:
        logger.exception("Unexpected error while processing webhook", error=str(exc))
    return WEBHOOK_ACKNOWLEDGEMENT


def create_app(config: ServerConfig) -> FastAPI:
    """Create the webhook application bound to an immutable configuration."""
    app = FastAPI(title="Project Card Mover")
    app.state.config = config
    app.include_router(router)
    return app
