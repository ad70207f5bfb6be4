"""Request validation shared by all endpoint handlers."""

from typing import Any

from textapi.errors import MissingRequiredFieldError, MissingSourceError


def select_source(params: Any, *fields: str) -> dict[str, str]:
    """Pick the single source field to send for a request.

    Fields are tried in order; the first non-empty one is returned as a
    one-entry form body keyed by the field name.

    Args:
        params: The request, read by attribute.
        *fields: Alternative source fields, highest precedence first.

    Returns:
        Form body holding the selected source.

    Raises:
        MissingSourceError: If every field is empty.
    """
    for name in fields:
        value = getattr(params, name)
        if value:
            return {name: value}
    raise MissingSourceError(fields)


def require_field(params: Any, name: str) -> str:
    """Return a required field's value, failing when it is empty."""
    value = getattr(params, name)
    if not value:
        raise MissingRequiredFieldError(name)
    return value


def encode_bool(value: bool) -> str:
    """Encode a flag the way the service expects it: always explicit."""
    return "true" if value else "false"
