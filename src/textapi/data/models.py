"""Request and response models for the Text API endpoints."""

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, timezone
from typing import Any, Self

# RFC 3339, e.g. ``2017-03-14T09:12:00Z`` or ``2017-03-14T09:12:00.123+01:00``
_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


# ============================================================
# Decoding helpers
# ============================================================


def _object(data: Any, name: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{name}: expected a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{key}: expected a string, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{key}: expected a number, got {type(value).__name__}"
        raise ValueError(msg)
    return float(value)


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{key}: expected an integer, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{key}: expected a list, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _strings(data: dict[str, Any], key: str) -> tuple[str, ...]:
    items = _list(data, key)
    for item in items:
        if not isinstance(item, str):
            msg = f"{key}: expected a list of strings, got {type(item).__name__}"
            raise ValueError(msg)
    return tuple(items)


# ============================================================
# Timestamps
# ============================================================


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Fractional seconds beyond microsecond precision are truncated.

    Raises:
        ValueError: If ``text`` is not a valid RFC 3339 timestamp.
    """
    match = _RFC3339_RE.fullmatch(text)
    if not match:
        msg = f"not an RFC 3339 timestamp: {text!r}"
        raise ValueError(msg)

    year, month, day, hour, minute, second, frac, offset = match.groups()
    micros = int((frac or "0")[:6].ljust(6, "0"))
    if offset == "Z":
        tz = UTC
    else:
        sign = -1 if offset[0] == "-" else 1
        delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
        tz = timezone(sign * delta)

    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        micros,
        tzinfo=tz,
    )


@dataclass(frozen=True)
class Timestamp:
    """A leniently decoded timestamp.

    Decoding never fails: a value that is not valid RFC 3339 yields a
    timestamp whose ``value`` is None. Check ``is_zero()`` before using
    ``value``; ``is_malformed`` tells an unparseable value apart from an
    absent one.

    Attributes:
        value: The parsed instant, or None when unset.
        raw: The text received from the service, or None when absent.
    """

    value: datetime | None = None
    raw: str | None = None

    @classmethod
    def from_json(cls, raw: Any) -> Self:
        if raw is None:
            return cls()
        text = raw if isinstance(raw, str) else str(raw)
        try:
            return cls(value=parse_rfc3339(text), raw=text)
        except ValueError:
            return cls(value=None, raw=text)

    def is_zero(self) -> bool:
        """Whether the timestamp is unset (absent or unparseable)."""
        return self.value is None

    @property
    def is_malformed(self) -> bool:
        """Whether a value was received but could not be parsed."""
        return self.raw is not None and self.value is None


UNSET_TIMESTAMP = Timestamp()


# ============================================================
# Entity level sentiment analysis (ELSA)
# ============================================================


@dataclass(frozen=True)
class ElsaParams:
    """A document whose entities and their sentiment should be extracted.

    Either ``text`` or ``url`` is required; ``text`` wins when both are set.
    """

    text: str = ""
    url: str = ""


@dataclass(frozen=True)
class Sentiment:
    """A polarity label with its confidence."""

    polarity: str = ""
    confidence: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "sentiment")
        return cls(polarity=_str(data, "polarity"), confidence=_float(data, "confidence"))


@dataclass(frozen=True)
class Mention:
    """One occurrence of an entity in the analyzed text."""

    offset: int = 0
    confidence: float = 0.0
    text: str = ""
    sentiment: Sentiment = field(default_factory=Sentiment)

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "mention")
        return cls(
            offset=_int(data, "offset"),
            confidence=_float(data, "confidence"),
            text=_str(data, "text"),
            sentiment=Sentiment.from_dict(data.get("sentiment")),
        )


@dataclass(frozen=True)
class Link:
    """A link from an entity to a knowledge base resource (e.g. DBpedia)."""

    uri: str = ""
    provider: str = ""
    types: tuple[str, ...] = ()
    confidence: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "link")
        return cls(
            uri=_str(data, "uri"),
            provider=_str(data, "provider"),
            types=_strings(data, "types"),
            confidence=_float(data, "confidence"),
        )


@dataclass(frozen=True)
class Entity:
    """A named entity with its mentions, links and overall sentiment."""

    mentions: tuple[Mention, ...] = ()
    overall_sentiment: Sentiment = field(default_factory=Sentiment)
    type: str = ""
    links: tuple[Link, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "entity")
        return cls(
            mentions=tuple(Mention.from_dict(m) for m in _list(data, "mentions")),
            overall_sentiment=Sentiment.from_dict(data.get("overall_sentiment")),
            type=_str(data, "type"),
            links=tuple(Link.from_dict(link) for link in _list(data, "links")),
        )


@dataclass(frozen=True)
class ElsaResponse:
    """Entities found in a document, each with its sentiment."""

    text: str = ""
    entities: tuple[Entity, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "elsa response")
        return cls(
            text=_str(data, "text"),
            entities=tuple(Entity.from_dict(e) for e in _list(data, "entities")),
        )


# ============================================================
# Article extraction
# ============================================================


@dataclass(frozen=True)
class ExtractParams:
    """A web page whose article should be extracted.

    Either ``html`` (raw markup of the page) or ``url`` is required;
    ``html`` wins when both are set.
    """

    url: str = ""
    html: str = ""
    best_image: bool = False


@dataclass(frozen=True)
class ExtractResponse:
    """The main article of a web page and its metadata."""

    title: str = ""
    article: str = ""
    image: str = ""
    author: str = ""
    publish_date: Timestamp = UNSET_TIMESTAMP
    videos: tuple[str, ...] = ()
    feeds: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "extract response")
        return cls(
            title=_str(data, "title"),
            article=_str(data, "article"),
            image=_str(data, "image"),
            author=_str(data, "author"),
            publish_date=Timestamp.from_json(data.get("publishDate")),
            videos=_strings(data, "videos"),
            feeds=_strings(data, "feeds"),
            keywords=_strings(data, "keywords"),
        )


# ============================================================
# Sentiment analysis
# ============================================================


@dataclass(frozen=True)
class SentimentParams:
    """A document whose sentiment should be analyzed.

    Either ``text`` or ``url`` is required. ``mode`` is ``tweet`` (the
    service default, suited to short text) or ``document``.
    """

    text: str = ""
    url: str = ""
    mode: str = ""


@dataclass(frozen=True)
class SentimentResponse:
    """Polarity (positive, negative, neutral) and subjectivity of a document."""

    text: str = ""
    polarity: str = ""
    polarity_confidence: float = 0.0
    subjectivity: str = ""
    subjectivity_confidence: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "sentiment response")
        return cls(
            text=_str(data, "text"),
            polarity=_str(data, "polarity"),
            polarity_confidence=_float(data, "polarity_confidence"),
            subjectivity=_str(data, "subjectivity"),
            subjectivity_confidence=_float(data, "subjectivity_confidence"),
        )


# ============================================================
# Aspect-based sentiment analysis (ABSA)
# ============================================================


@dataclass(frozen=True)
class AspectBasedSentimentParams:
    """A review whose sentiment towards each aspect should be analyzed.

    Either ``text`` or ``url`` is required, and ``domain`` (e.g.
    ``airlines``, ``cars``, ``hotels``, ``restaurants``) always is.
    """

    text: str = ""
    url: str = ""
    domain: str = ""


@dataclass(frozen=True)
class Aspect:
    """Sentiment towards one aspect of a product or service."""

    aspect: str = ""
    aspect_confidence: float = 0.0
    polarity: str = ""
    polarity_confidence: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "aspect")
        return cls(
            aspect=_str(data, "aspect"),
            aspect_confidence=_float(data, "aspect_confidence"),
            polarity=_str(data, "polarity"),
            polarity_confidence=_float(data, "polarity_confidence"),
        )


@dataclass(frozen=True)
class AspectSentence:
    """Per-sentence breakdown of an aspect-based sentiment analysis."""

    text: str = ""
    polarity: str = ""
    polarity_confidence: float = 0.0
    aspects: tuple[Aspect, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "sentence")
        return cls(
            text=_str(data, "text"),
            polarity=_str(data, "polarity"),
            polarity_confidence=_float(data, "polarity_confidence"),
            aspects=tuple(Aspect.from_dict(a) for a in _list(data, "aspects")),
        )


@dataclass(frozen=True)
class AspectBasedSentimentResponse:
    """Aspects found in a review, overall and per sentence."""

    text: str = ""
    domain: str = ""
    aspects: tuple[Aspect, ...] = ()
    sentences: tuple[AspectSentence, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _object(data, "absa response")
        return cls(
            text=_str(data, "text"),
            domain=_str(data, "domain"),
            aspects=tuple(Aspect.from_dict(a) for a in _list(data, "aspects")),
            sentences=tuple(AspectSentence.from_dict(s) for s in _list(data, "sentences")),
        )
