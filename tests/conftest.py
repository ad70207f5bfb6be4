"""Shared fixtures for Text API tests."""

from collections.abc import Mapping
from typing import Any

import pytest


class RecordingTransport:
    """Transport double that records calls and replays a canned response."""

    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self.response = response if response is not None else {}
        self.calls: list[tuple[str, dict[str, str]]] = []

    async def call(self, path: str, form: Mapping[str, str]) -> dict[str, Any]:
        self.calls.append((path, dict(form)))
        return self.response


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def sentiment_data() -> dict[str, Any]:
    """Sample /sentiment response."""
    return {
        "text": "I love this",
        "polarity": "positive",
        "polarity_confidence": 0.97,
        "subjectivity": "subjective",
        "subjectivity_confidence": 0.88,
    }


@pytest.fixture
def elsa_data() -> dict[str, Any]:
    """Sample /elsa response."""
    return {
        "text": "Apple is doing great, but Samsung is not.",
        "entities": [
            {
                "mentions": [
                    {
                        "offset": 0,
                        "confidence": 1.0,
                        "text": "Apple",
                        "sentiment": {"polarity": "positive", "confidence": 0.71},
                    }
                ],
                "overall_sentiment": {"polarity": "positive", "confidence": 0.71},
                "type": "Organization",
                "links": [
                    {
                        "uri": "http://dbpedia.org/resource/Apple_Inc.",
                        "provider": "dbpedia",
                        "types": [
                            "http://dbpedia.org/ontology/Company",
                            "http://dbpedia.org/ontology/Organisation",
                        ],
                        "confidence": 0.93,
                    }
                ],
            },
            {
                "mentions": [
                    {
                        "offset": 26,
                        "confidence": 0.98,
                        "text": "Samsung",
                        "sentiment": {"polarity": "negative", "confidence": 0.64},
                    }
                ],
                "overall_sentiment": {"polarity": "negative", "confidence": 0.64},
                "type": "Organization",
                "links": [],
            },
        ],
    }


@pytest.fixture
def extract_data() -> dict[str, Any]:
    """Sample /extract response."""
    return {
        "title": "Budget talks stall",
        "article": "Negotiators failed to reach a deal on Tuesday.",
        "image": "https://example.com/lead.jpg",
        "author": "Jane Reporter",
        "publishDate": "2017-03-14T09:12:00+00:00",
        "videos": ["https://example.com/clip.mp4"],
        "feeds": ["https://example.com/rss"],
        "keywords": ["budget", "deal"],
    }


@pytest.fixture
def absa_data() -> dict[str, Any]:
    """Sample /absa/restaurants response."""
    return {
        "text": "Great food. The waiter was rude.",
        "domain": "restaurants",
        "aspects": [
            {
                "aspect": "food-quality",
                "aspect_confidence": 0.91,
                "polarity": "positive",
                "polarity_confidence": 0.95,
            },
            {
                "aspect": "staff",
                "aspect_confidence": 0.87,
                "polarity": "negative",
                "polarity_confidence": 0.9,
            },
        ],
        "sentences": [
            {
                "text": "Great food.",
                "polarity": "positive",
                "polarity_confidence": 0.95,
                "aspects": [
                    {
                        "aspect": "food-quality",
                        "aspect_confidence": 0.91,
                        "polarity": "positive",
                        "polarity_confidence": 0.95,
                    }
                ],
            },
            {
                "text": "The waiter was rude.",
                "polarity": "negative",
                "polarity_confidence": 0.9,
                "aspects": [
                    {
                        "aspect": "staff",
                        "aspect_confidence": 0.87,
                        "polarity": "negative",
                        "polarity_confidence": 0.9,
                    }
                ],
            },
        ],
    }
