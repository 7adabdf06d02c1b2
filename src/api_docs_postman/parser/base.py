"""Data models for extracted endpoint documentation.

The extraction pipeline hands us endpoints in its own camelCase wire format;
these models accept that format (and snake_case field names) and are the
only input the collection writer reads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_GROUP = "Endpoints"


class Parameter(BaseModel):
    """A documented URL, query or body parameter with its example value."""

    value: Any = None
    type: str = "string"  # may end with "[]" for arrays
    required: bool = False
    description: str | None = ""


class EndpointMetadata(BaseModel):
    """A single documented HTTP operation."""

    model_config = ConfigDict(populate_by_name=True)

    uri: str  # users/{id}
    methods: list[str]
    title: str | None = ""
    description: str | None = None
    authenticated: bool = False
    group_name: str = Field(default=DEFAULT_GROUP, alias="groupName")
    group_description: str | None = Field(default="", alias="groupDescription")
    headers: dict[str, str] = {}
    url_parameters: dict[str, Parameter] = Field(default={}, alias="urlParameters")
    query_parameters: dict[str, Parameter] = Field(default={}, alias="queryParameters")
    body_parameters: dict[str, Any] = Field(default={}, alias="bodyParameters")
    clean_body_parameters: dict[str, Any] | None = Field(default=None, alias="cleanBodyParameters")
    file_parameters: dict[str, Any] = Field(default={}, alias="fileParameters")

    @field_validator("headers", mode="before")
    @classmethod
    def _stringify_headers(cls, value: Any) -> Any:
        # YAML reads "X-Version: 2" as an int
        if isinstance(value, dict):
            return {key: "" if v is None else str(v) for key, v in value.items()}
        return value

    @model_validator(mode="after")
    def _default_clean_body(self) -> "EndpointMetadata":
        if self.clean_body_parameters is None:
            self.clean_body_parameters = dict(self.body_parameters)
        return self


Grouping = dict[str, list[EndpointMetadata]]


def content_type(endpoint: EndpointMetadata) -> str | None:
    """Return the endpoint's Content-Type header value, matched case-insensitively."""
    for key, value in endpoint.headers.items():
        if key.lower() == "content-type":
            return value
    return None
