from collections.abc import Mapping
from typing import Any, Protocol


class Transport(Protocol):
    """Interface for submitting a request to the Text API.

    Implementations handle authentication, HTTP, status checking and JSON
    decoding. They must not mutate shared state during a call, so that one
    transport can serve concurrent requests.
    """

    async def call(self, path: str, form: Mapping[str, str]) -> dict[str, Any]:
        """Submit a form-encoded request to an endpoint.

        Args:
            path: Endpoint path, e.g. "/sentiment".
            form: Form fields to send.

        Returns:
            The decoded JSON object.
        """
        ...
