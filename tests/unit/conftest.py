"""Fixtures for unit tests."""

from typing import Any, Generator
from unittest.mock import AsyncMock

import pytest
import structlog

from project_card_mover.github.abc import ProjectBoardClientBase
from tests.unit.utils import build_field_values_response, build_issue_number_response


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def field_values_response() -> dict[str, Any]:
    """A field-values response for an issue whose Status is Done."""
    return build_field_values_response()


@pytest.fixture
def mock_adapter() -> AsyncMock:
    """A project board client answering both queries for a Done issue."""
    adapter = AsyncMock(spec=ProjectBoardClientBase)
    adapter.execute_query.side_effect = [build_field_values_response(), build_issue_number_response()]
    return adapter
