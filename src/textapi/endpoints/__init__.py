"""Endpoint handlers, one per analysis operation."""

from textapi.endpoints.base import encode_bool, require_field, select_source
from textapi.endpoints.elsa import ELSA_PATH, build_elsa_form, elsa
from textapi.endpoints.extract import EXTRACT_PATH, build_extract_form, extract
from textapi.endpoints.sentiment import (
    ABSA_PATH_PREFIX,
    SENTIMENT_PATH,
    absa_path,
    aspect_based_sentiment,
    build_aspect_based_sentiment_form,
    build_sentiment_form,
    sentiment,
)

__all__ = [
    "ABSA_PATH_PREFIX",
    "ELSA_PATH",
    "EXTRACT_PATH",
    "SENTIMENT_PATH",
    "absa_path",
    "aspect_based_sentiment",
    "build_aspect_based_sentiment_form",
    "build_elsa_form",
    "build_extract_form",
    "build_sentiment_form",
    "elsa",
    "encode_bool",
    "extract",
    "require_field",
    "select_source",
    "sentiment",
]
