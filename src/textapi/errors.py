"""Error types raised by the Text API client.

Only local validation failures are defined here. Failures from the
transport (``httpx`` errors, malformed JSON bodies) reach the caller
unchanged.
"""


class TextAPIError(Exception):
    """Base class for errors raised by this library."""


class ValidationError(TextAPIError, ValueError):
    """A request failed local validation; nothing was sent."""


class MissingSourceError(ValidationError):
    """None of the alternative source fields of a request was supplied."""

    def __init__(self, fields: tuple[str, ...]) -> None:
        self.fields = fields
        super().__init__(f"you must either provide {' or '.join(reversed(fields))}")


class MissingRequiredFieldError(ValidationError):
    """A required request field is empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"you must specify the {field}")
