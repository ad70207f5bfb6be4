"""Configuration module for the Text API client."""

from textapi.config.factory import create_auth, create_client, create_transport
from textapi.config.loader import get_default_config_path, load_config
from textapi.config.models import AuthConfig, LoggingConfig, TextAPIConfig, TransportConfig

__all__ = [
    "AuthConfig",
    "LoggingConfig",
    "TextAPIConfig",
    "TransportConfig",
    "create_auth",
    "create_client",
    "create_transport",
    "get_default_config_path",
    "load_config",
]
