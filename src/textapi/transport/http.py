"""Default transport: form-encoded POSTs over ``httpx``."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

DEFAULT_HOST = "api.aylien.com/api/v1"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "textapi-python/0.1.0"

APP_ID_HEADER = "X-AYLIEN-TextAPI-Application-ID"
APP_KEY_HEADER = "X-AYLIEN-TextAPI-Application-Key"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Auth:
    """Application credentials for the Text API."""

    application_id: str
    application_key: str


class HTTPTransport:
    """Submit requests to the Text API over HTTP(S).

    Without ``http_client`` a short-lived ``httpx.AsyncClient`` is opened
    per call. Pass a client to control its lifetime and connection policy;
    the transport never closes or reconfigures a client it was given.

    Args:
        auth: Application credentials.
        use_https: Use HTTPS instead of plain HTTP (default True).
        host: Host and base path of the API.
        timeout: Deadline in seconds, sent with every request.
        http_client: Caller-owned client to send requests with.
        user_agent: Value of the User-Agent header.
    """

    def __init__(
        self,
        auth: Auth,
        *,
        use_https: bool = True,
        host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
        user_agent: str = USER_AGENT,
    ) -> None:
        if not auth.application_id or not auth.application_key:
            raise ValueError(
                "Text API credentials required. "
                "Pass application_id and application_key or set "
                "TEXTAPI_APP_ID and TEXTAPI_APP_KEY env vars."
            )
        scheme = "https" if use_https else "http"
        self._base_url = f"{scheme}://{host.strip('/')}"
        self._timeout = timeout
        self._http_client = http_client
        self._headers = {
            APP_ID_HEADER: auth.application_id,
            APP_KEY_HEADER: auth.application_key,
            "Accept": "application/json",
            "User-Agent": user_agent,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        """A copy of the headers sent with every request."""
        return dict(self._headers)

    async def call(self, path: str, form: Mapping[str, str]) -> dict[str, Any]:
        """POST ``form`` to ``path`` and return the decoded JSON object.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
            httpx.HTTPError: On connection or timeout failures.
            ValueError: If the body is not a JSON object.
        """
        url = f"{self._base_url}{path}"
        logger.debug("POST %s fields=%s", url, sorted(form))

        if self._http_client is not None:
            response = await self._post(self._http_client, url, form)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await self._post(client, url, form)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError:
            logger.warning(
                "Text API request to %s failed with status %s: %s",
                path,
                response.status_code,
                _error_message(response),
            )
            raise

        data = response.json()
        if not isinstance(data, dict):
            msg = f"expected a JSON object from {path}, got {type(data).__name__}"
            raise ValueError(msg)
        return data

    async def _post(
        self,
        client: httpx.AsyncClient,
        url: str,
        form: Mapping[str, str],
    ) -> httpx.Response:
        # httpx encodes ``data`` as application/x-www-form-urlencoded
        return await client.post(
            url, data=dict(form), headers=self._headers, timeout=self._timeout
        )


def _error_message(response: httpx.Response) -> str:
    """Best-effort extraction of the service's error message."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return response.text
