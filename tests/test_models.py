"""Tests for request/response models and JSON decoding."""

from datetime import UTC, datetime, timedelta, timezone
from typing import Any

import pytest

from textapi.data import (
    UNSET_TIMESTAMP,
    AspectBasedSentimentParams,
    AspectBasedSentimentResponse,
    ElsaResponse,
    ExtractParams,
    ExtractResponse,
    Sentiment,
    SentimentParams,
    SentimentResponse,
    Timestamp,
    parse_rfc3339,
)

# -- Params --


def test_params_default_to_empty() -> None:
    params = SentimentParams()
    assert params.text == ""
    assert params.url == ""
    assert params.mode == ""


def test_extract_params_best_image_defaults_false() -> None:
    assert ExtractParams(url="https://example.com").best_image is False


def test_params_are_frozen() -> None:
    params = AspectBasedSentimentParams(text="Nice", domain="hotels")
    with pytest.raises(AttributeError):
        params.domain = "cars"  # type: ignore[misc]


# -- Response decoding --


def test_sentiment_response_from_fixture(sentiment_data: dict[str, Any]) -> None:
    response = SentimentResponse.from_dict(sentiment_data)
    assert response.text == "I love this"
    assert response.polarity == "positive"
    assert response.polarity_confidence == 0.97
    assert response.subjectivity == "subjective"
    assert response.subjectivity_confidence == 0.88


def test_elsa_response_from_fixture(elsa_data: dict[str, Any]) -> None:
    response = ElsaResponse.from_dict(elsa_data)
    assert response.text == elsa_data["text"]
    assert len(response.entities) == 2

    apple = response.entities[0]
    assert apple.type == "Organization"
    assert apple.overall_sentiment == Sentiment(polarity="positive", confidence=0.71)
    assert len(apple.mentions) == 1
    mention = apple.mentions[0]
    assert mention.offset == 0
    assert mention.confidence == 1.0
    assert mention.text == "Apple"
    assert mention.sentiment.polarity == "positive"
    link = apple.links[0]
    assert link.uri == "http://dbpedia.org/resource/Apple_Inc."
    assert link.provider == "dbpedia"
    assert link.types == (
        "http://dbpedia.org/ontology/Company",
        "http://dbpedia.org/ontology/Organisation",
    )
    assert link.confidence == 0.93

    samsung = response.entities[1]
    assert samsung.mentions[0].offset == 26
    assert samsung.links == ()


def test_extract_response_from_fixture(extract_data: dict[str, Any]) -> None:
    response = ExtractResponse.from_dict(extract_data)
    assert response.title == "Budget talks stall"
    assert response.article == "Negotiators failed to reach a deal on Tuesday."
    assert response.image == "https://example.com/lead.jpg"
    assert response.author == "Jane Reporter"
    assert response.publish_date.value == datetime(2017, 3, 14, 9, 12, tzinfo=UTC)
    assert response.videos == ("https://example.com/clip.mp4",)
    assert response.feeds == ("https://example.com/rss",)
    assert response.keywords == ("budget", "deal")


def test_absa_response_from_fixture(absa_data: dict[str, Any]) -> None:
    response = AspectBasedSentimentResponse.from_dict(absa_data)
    assert response.domain == "restaurants"
    assert [a.aspect for a in response.aspects] == ["food-quality", "staff"]
    assert response.aspects[1].polarity == "negative"
    assert response.aspects[1].aspect_confidence == 0.87
    assert len(response.sentences) == 2
    sentence = response.sentences[1]
    assert sentence.text == "The waiter was rude."
    assert sentence.polarity_confidence == 0.9
    assert sentence.aspects[0].aspect == "staff"


def test_absent_fields_take_zero_values() -> None:
    response = ExtractResponse.from_dict({})
    assert response.title == ""
    assert response.author == ""
    assert response.videos == ()
    assert response.keywords == ()
    assert response.publish_date == UNSET_TIMESTAMP
    assert response.publish_date.is_zero()


def test_null_fields_take_zero_values() -> None:
    response = SentimentResponse.from_dict({"polarity": None, "polarity_confidence": None})
    assert response.polarity == ""
    assert response.polarity_confidence == 0.0


def test_unknown_fields_are_ignored() -> None:
    response = SentimentResponse.from_dict({"polarity": "neutral", "language": "en"})
    assert response.polarity == "neutral"


def test_nested_absent_fields_take_zero_values() -> None:
    response = ElsaResponse.from_dict({"entities": [{"mentions": [{}]}]})
    entity = response.entities[0]
    assert entity.type == ""
    assert entity.overall_sentiment == Sentiment()
    assert entity.mentions[0].offset == 0
    assert entity.mentions[0].sentiment == Sentiment()
    assert entity.links == ()


def test_integer_confidence_decodes_as_float() -> None:
    response = SentimentResponse.from_dict({"polarity_confidence": 1})
    assert response.polarity_confidence == 1.0
    assert isinstance(response.polarity_confidence, float)


@pytest.mark.parametrize(
    "data",
    [
        {"polarity": 3},
        {"polarity_confidence": "high"},
        {"polarity_confidence": True},
    ],
)
def test_wrong_typed_fields_fail_decoding(data: dict[str, Any]) -> None:
    with pytest.raises(ValueError):
        SentimentResponse.from_dict(data)


def test_non_object_response_fails_decoding() -> None:
    with pytest.raises(ValueError, match="expected a JSON object"):
        ElsaResponse.from_dict(["not", "an", "object"])


def test_wrong_typed_list_item_fails_decoding() -> None:
    with pytest.raises(ValueError, match="keywords"):
        ExtractResponse.from_dict({"keywords": ["ok", 7]})


# -- Timestamps --


def test_parse_rfc3339_utc() -> None:
    assert parse_rfc3339("2017-03-14T09:12:00Z") == datetime(2017, 3, 14, 9, 12, tzinfo=UTC)


def test_parse_rfc3339_offset_and_fraction() -> None:
    parsed = parse_rfc3339("2017-03-14T09:12:00.123456789-05:30")
    assert parsed.microsecond == 123456
    assert parsed.utcoffset() == -timedelta(hours=5, minutes=30)
    assert parsed.tzinfo == timezone(-timedelta(hours=5, minutes=30))


@pytest.mark.parametrize(
    "text",
    [
        "",
        "yesterday",
        "2017-03-14",
        "2017-03-14 09:12:00Z",
        "2017-03-14T09:12:00",
        "2017-13-14T09:12:00Z",
        "2017-03-14T09:12:00Z\n",
    ],
)
def test_parse_rfc3339_rejects_invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_rfc3339(text)


def test_timestamp_valid_value() -> None:
    ts = Timestamp.from_json("2017-03-14T09:12:00Z")
    assert ts.value == datetime(2017, 3, 14, 9, 12, tzinfo=UTC)
    assert ts.raw == "2017-03-14T09:12:00Z"
    assert not ts.is_zero()
    assert not ts.is_malformed


def test_timestamp_malformed_value_is_unset() -> None:
    ts = Timestamp.from_json("14/03/2017")
    assert ts.is_zero()
    assert ts.value is None
    assert ts.is_malformed
    assert ts.raw == "14/03/2017"


def test_timestamp_absent_value_is_unset() -> None:
    ts = Timestamp.from_json(None)
    assert ts.is_zero()
    assert not ts.is_malformed
    assert ts == UNSET_TIMESTAMP


def test_timestamp_non_string_value_is_unset() -> None:
    ts = Timestamp.from_json(1489482720)
    assert ts.is_zero()
    assert ts.is_malformed


def test_extract_response_malformed_publish_date_does_not_fail(
    extract_data: dict[str, Any],
) -> None:
    extract_data["publishDate"] = "not a date"
    response = ExtractResponse.from_dict(extract_data)
    assert response.title == "Budget talks stall"
    assert response.publish_date.is_zero()
    assert response.publish_date.is_malformed
