"""Pydantic configuration models for the Text API client."""

import os
from typing import Literal

from pydantic import BaseModel, Field

from textapi.transport.http import DEFAULT_HOST, DEFAULT_TIMEOUT

# ============================================================
# Auth Config
# ============================================================


class AuthConfig(BaseModel):
    """Application credentials.

    Omitted values fall back to the TEXTAPI_APP_ID and TEXTAPI_APP_KEY env vars.
    """

    application_id: str = Field(default_factory=lambda: os.environ.get("TEXTAPI_APP_ID", ""))
    application_key: str = Field(default_factory=lambda: os.environ.get("TEXTAPI_APP_KEY", ""))

    model_config = {"frozen": True}


# ============================================================
# Transport Config
# ============================================================


class TransportConfig(BaseModel):
    """Configuration for HTTPTransport."""

    use_https: bool = True
    host: str = DEFAULT_HOST
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for library and CLI logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TextAPIConfig(BaseModel):
    """Root configuration for the Text API client."""

    auth: AuthConfig = Field(default_factory=AuthConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
