"""Article extraction from web pages."""

from textapi.data import ExtractParams, ExtractResponse
from textapi.endpoints.base import encode_bool, select_source
from textapi.transport.base import Transport

EXTRACT_PATH = "/extract"


def build_extract_form(params: ExtractParams) -> dict[str, str]:
    """Build the form body for an extraction request.

    Raw ``html`` takes precedence over ``url``. ``best_image`` is always
    sent, as ``"true"`` or ``"false"``.
    """
    form = select_source(params, "html", "url")
    form["best_image"] = encode_bool(params.best_image)
    return form


async def extract(transport: Transport, params: ExtractParams) -> ExtractResponse:
    """Extract the main article and its metadata from a web page.

    An unparseable ``publishDate`` does not fail the call; check
    ``response.publish_date.is_zero()`` before using it.
    """
    form = build_extract_form(params)
    data = await transport.call(EXTRACT_PATH, form)
    return ExtractResponse.from_dict(data)
