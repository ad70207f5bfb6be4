"""Public client for the Text API."""

import httpx

from textapi.data import (
    AspectBasedSentimentParams,
    AspectBasedSentimentResponse,
    ElsaParams,
    ElsaResponse,
    ExtractParams,
    ExtractResponse,
    SentimentParams,
    SentimentResponse,
)
from textapi.endpoints import aspect_based_sentiment, elsa, extract, sentiment
from textapi.transport import Auth, HTTPTransport, Transport

# Deadline applied to caller-supplied clients in hosted runtimes
CONTEXT_TIMEOUT = 60.0


class TextAPIClient:
    """Client exposing one coroutine per Text API operation.

    Each call validates its params, sends exactly one request through the
    transport and returns the decoded response. Validation failures raise
    before anything is sent; transport failures propagate unchanged.

    Args:
        transport: Transport used for every request.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    async def elsa(self, params: ElsaParams) -> ElsaResponse:
        """Extract entities from a document and the sentiment towards each."""
        return await elsa(self._transport, params)

    async def extract(self, params: ExtractParams) -> ExtractResponse:
        """Extract the main article of a web page."""
        return await extract(self._transport, params)

    async def sentiment(self, params: SentimentParams) -> SentimentResponse:
        """Detect the polarity and subjectivity of a document."""
        return await sentiment(self._transport, params)

    async def aspect_based_sentiment(
        self, params: AspectBasedSentimentParams
    ) -> AspectBasedSentimentResponse:
        """Analyze the sentiment of a review towards each of its aspects."""
        return await aspect_based_sentiment(self._transport, params)


def new_client(auth: Auth, use_https: bool = True) -> TextAPIClient:
    """Create a client using the default HTTP transport."""
    return TextAPIClient(HTTPTransport(auth, use_https=use_https))


def new_client_in_context(
    auth: Auth,
    use_https: bool = True,
    http_client: httpx.AsyncClient | None = None,
    *,
    timeout: float = CONTEXT_TIMEOUT,
) -> TextAPIClient:
    """Create a client bound to a caller-supplied HTTP client.

    Meant for managed runtimes that require a specific network client. The
    ``timeout`` deadline is sent with every request; the client's own
    settings are left untouched. Without ``http_client`` this is equivalent
    to ``new_client``.
    """
    if http_client is None:
        return new_client(auth, use_https)
    transport = HTTPTransport(auth, use_https=use_https, timeout=timeout, http_client=http_client)
    return TextAPIClient(transport)
