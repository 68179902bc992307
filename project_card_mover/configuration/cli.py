"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import structlog
import typer
import uvicorn
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from project_card_mover.configuration.exceptions import RequiredConfigurationElementError
from project_card_mover.configuration.reconcile import reconcile_server_configuration
from project_card_mover.utils.logging import configure_logging
from project_card_mover.webhook.app import create_app

load_dotenv()

logger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main_callback() -> None:
    """Close GitHub issues whose project board card is moved to Done."""


@typer_app.command(name="serve")
def serve_cli(
    host: Annotated[str | None, Option(envvar="HOST", help="Address to listen on.")] = None,
    port: Annotated[int | None, Option(envvar="PORT", help="Port to listen on.")] = None,
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token used for all API calls.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Run the webhook server."""
    try:
        config = asyncio.run(
            reconcile_server_configuration(
                cli_debug=debug or None,
                cli_host=host,
                cli_port=port,
                cli_github_api_url=github_api_url,
                cli_github_token=github_token,
            )
        )
    except RequiredConfigurationElementError as e:
        typer.echo(
            f"{e} (command line option --{e.cli_name.replace('_', '-')}, environment variable {e.env_name})",
            err=True,
        )
        raise typer.Exit(1) from e

    configure_logging(debug=config.debug)
    logger.info("Starting server", host=config.host, port=config.port, github_api_url=config.github_api_url)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level="debug" if config.debug else "info")


if __name__ == "__main__":
    typer_app()
