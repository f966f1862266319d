"""Echo Schemas — the single response contract of GET /api/sample.

Invariants:
    - EchoResponse serializes to exactly one key, receivedQuery
    - Values go through JSON serialization, never string interpolation,
      so quotes, backslashes and control characters are always escaped
"""

from pydantic import BaseModel, ConfigDict, Field


REQUEST_QUERY_PARAM = "requestQuery"


class EchoResponse(BaseModel):
    """Echoed query parameter value, as decoded by the server."""
    model_config = ConfigDict(populate_by_name=True)

    received_query: str = Field(alias="receivedQuery")
