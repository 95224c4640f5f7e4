"""Prepared (serialized) request model definition."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PreparedRequest(BaseModel):
    """
    Transport-ready form of a validated request.

    Holds the HTTP method, the endpoint path relative to the API base URL and
    the query parameters. The HTTP layer adds the base URL, authentication and
    performs the call.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = Field("GET", description="HTTP method")
    path: str = Field(..., description="Endpoint path relative to the API base URL", min_length=1)
    params: dict[str, str] = Field(default_factory=dict, description="Query string parameters")
