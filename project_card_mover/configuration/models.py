"""Configuration models shared between the CLI and the webhook server."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for the webhook server.

    Built once at startup and shared read-only by every request.
    """

    debug: bool
    host: str
    port: int
    github_api_url: str
    github_token: str
