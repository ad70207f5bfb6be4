"""Document level and aspect-based sentiment analysis."""

from textapi.data import (
    AspectBasedSentimentParams,
    AspectBasedSentimentResponse,
    SentimentParams,
    SentimentResponse,
)
from textapi.endpoints.base import require_field, select_source
from textapi.transport.base import Transport

SENTIMENT_PATH = "/sentiment"
ABSA_PATH_PREFIX = "/absa/"


def build_sentiment_form(params: SentimentParams) -> dict[str, str]:
    form = select_source(params, "text", "url")
    if params.mode:
        form["mode"] = params.mode
    return form


async def sentiment(transport: Transport, params: SentimentParams) -> SentimentResponse:
    """Detect the sentiment of a document.

    Sentiment is reported in terms of polarity (positive, negative or
    neutral) and subjectivity (subjective or objective).
    """
    form = build_sentiment_form(params)
    data = await transport.call(SENTIMENT_PATH, form)
    return SentimentResponse.from_dict(data)


def absa_path(domain: str) -> str:
    return f"{ABSA_PATH_PREFIX}{domain}"


def build_aspect_based_sentiment_form(params: AspectBasedSentimentParams) -> dict[str, str]:
    require_field(params, "domain")
    return select_source(params, "text", "url")


async def aspect_based_sentiment(
    transport: Transport,
    params: AspectBasedSentimentParams,
) -> AspectBasedSentimentResponse:
    """Analyze the sentiment of a review towards each aspect it mentions.

    Args:
        transport: Transport used to reach the service.
        params: The review and the domain it belongs to.

    Raises:
        MissingRequiredFieldError: If ``params.domain`` is empty.
        MissingSourceError: If neither ``text`` nor ``url`` is set.
    """
    form = build_aspect_based_sentiment_form(params)
    data = await transport.call(absa_path(params.domain), form)
    return AspectBasedSentimentResponse.from_dict(data)
