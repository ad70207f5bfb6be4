"""Text API: async client for entity, sentiment and article analysis."""

from textapi.client import TextAPIClient, new_client, new_client_in_context
from textapi.config import TextAPIConfig, create_client, load_config
from textapi.data import (
    UNSET_TIMESTAMP,
    Aspect,
    AspectBasedSentimentParams,
    AspectBasedSentimentResponse,
    AspectSentence,
    ElsaParams,
    ElsaResponse,
    Entity,
    ExtractParams,
    ExtractResponse,
    Link,
    Mention,
    Sentiment,
    SentimentParams,
    SentimentResponse,
    Timestamp,
)
from textapi.errors import (
    MissingRequiredFieldError,
    MissingSourceError,
    TextAPIError,
    ValidationError,
)
from textapi.transport import Auth, HTTPTransport, Transport

__all__ = [
    # Models
    "Aspect",
    "AspectBasedSentimentParams",
    "AspectBasedSentimentResponse",
    "AspectSentence",
    "ElsaParams",
    "ElsaResponse",
    "Entity",
    "ExtractParams",
    "ExtractResponse",
    "Link",
    "Mention",
    "Sentiment",
    "SentimentParams",
    "SentimentResponse",
    "Timestamp",
    "UNSET_TIMESTAMP",
    # Errors
    "MissingRequiredFieldError",
    "MissingSourceError",
    "TextAPIError",
    "ValidationError",
    # Transport
    "Auth",
    "HTTPTransport",
    "Transport",
    # Client
    "TextAPIClient",
    "new_client",
    "new_client_in_context",
    # Config
    "TextAPIConfig",
    "create_client",
    "load_config",
]
