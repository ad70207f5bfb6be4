"""Factory functions to create clients from configuration."""

import httpx

from textapi.client import TextAPIClient
from textapi.config.models import AuthConfig, TextAPIConfig, TransportConfig
from textapi.transport import Auth, HTTPTransport


def create_auth(config: AuthConfig) -> Auth:
    return Auth(application_id=config.application_id, application_key=config.application_key)


def create_transport(
    config: TransportConfig,
    auth: Auth,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> HTTPTransport:
    """Create an HTTP transport from config."""
    return HTTPTransport(
        auth,
        use_https=config.use_https,
        host=config.host,
        timeout=config.timeout,
        http_client=http_client,
    )


def create_client(
    config: TextAPIConfig,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> TextAPIClient:
    """Create a client from root config.

    Args:
        config: Root configuration.
        http_client: Optional caller-owned client for the transport.

    Raises:
        ValueError: If the credentials are missing.
    """
    auth = create_auth(config.auth)
    transport = create_transport(config.transport, auth, http_client=http_client)
    return TextAPIClient(transport)
