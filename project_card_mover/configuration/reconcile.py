"""Reconciles configuration between CLI arguments and environment variables."""

from project_card_mover.configuration.env import Settings
from project_card_mover.configuration.exceptions import RequiredConfigurationElementError
from project_card_mover.configuration.models import ServerConfig


async def reconcile_server_configuration(
    cli_debug: bool | None = None,
    cli_host: str | None = None,
    cli_port: int | None = None,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    settings: Settings | None = None,
) -> ServerConfig:
    """Reconciles the webhook server configuration.

    Values given on the command line take precedence over values read from
    the environment (or a `.env` file).

    Args:
        cli_debug (bool | None): Debug flag from the CLI.
        cli_host (str | None): Listen address from the CLI.
        cli_port (int | None): Listen port from the CLI.
        cli_github_api_url (str | None): GitHub API URL from the CLI.
        cli_github_token (str | None): GitHub token from the CLI.
        settings (Settings | None): Environment settings, loaded when omitted.

    Raises:
        RequiredConfigurationElementError: If no GitHub token is configured.

    Returns:
        ServerConfig: The reconciled configuration.
    """
    if settings is None:
        settings = Settings()

    github_token = cli_github_token or settings.GITHUB_TOKEN
    if not github_token:
        raise RequiredConfigurationElementError(
            name="GitHub token",
            cli_name="github_token",
            env_name="GITHUB_TOKEN",
        )

    return ServerConfig(
        debug=cli_debug if cli_debug is not None else settings.DEBUG,
        host=cli_host or settings.HOST,
        port=cli_port if cli_port is not None else settings.PORT,
        github_api_url=(cli_github_api_url or settings.GITHUB_API_URL).rstrip("/"),
        github_token=github_token,
    )
