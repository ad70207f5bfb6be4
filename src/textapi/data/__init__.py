"""Data models for the Text API."""

from textapi.data.models import (
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
    parse_rfc3339,
)

__all__ = [
    "UNSET_TIMESTAMP",
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
    "parse_rfc3339",
]
