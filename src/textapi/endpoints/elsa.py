"""Entity level sentiment analysis.

Extracts mentions of named entities (person, organization, location),
links them to DBpedia where possible and evaluates the sentiment towards
each of them.
"""

from textapi.data import ElsaParams, ElsaResponse
from textapi.endpoints.base import select_source
from textapi.transport.base import Transport

ELSA_PATH = "/elsa"


def build_elsa_form(params: ElsaParams) -> dict[str, str]:
    return select_source(params, "text", "url")


async def elsa(transport: Transport, params: ElsaParams) -> ElsaResponse:
    """Extract entities mentioned in a document along with their sentiment."""
    form = build_elsa_form(params)
    data = await transport.call(ELSA_PATH, form)
    return ElsaResponse.from_dict(data)
