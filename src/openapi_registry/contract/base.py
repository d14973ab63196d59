"""Route contract models.

A contract declares what a route accepts and what it may return,
independently of the handler that implements it. Schemas are pydantic
models or any type a ``TypeAdapter`` understands.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DescribedResponse(BaseModel):
    """A response entry wrapped with its own description and name."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    schema_: Any = Field(default=None, alias="schema")
    description: str | None = None
    name: str | None = None


def _coerce_content(content: Any) -> Any:
    """Stringify status-code keys and wrap dict entries as DescribedResponse."""
    if not isinstance(content, dict):
        return content
    result = {}
    for status_code, entry in content.items():
        if isinstance(entry, dict):
            entry = DescribedResponse.model_validate(entry)
        result[str(status_code)] = entry
    return result


class RequestContract(BaseModel):
    """Input side of a route: parameter schemas and an optional body."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    query: Any = None
    params: Any = None
    headers: Any = None
    body: Any = None
    content_type: list[str] | None = Field(default=None, alias="contentType")

    @field_validator("content_type", mode="before")
    @classmethod
    def _listify_content_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class ResponseContract(BaseModel):
    """Output side of a route, keyed by HTTP status code."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    content_type: str | None = Field(default=None, alias="contentType")
    content: dict[str, Any] = {}

    @field_validator("content", mode="before")
    @classmethod
    def _normalize_content(cls, value: Any) -> Any:
        return _coerce_content(value)


class RouteContract(BaseModel):
    """Everything documented about one route."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    request: RequestContract | None = None
    response: ResponseContract | None = None


class ErrorContract(BaseModel):
    """Error responses a framework-level error handler can produce."""

    model_config = ConfigDict(populate_by_name=True)

    errors: ResponseContract
