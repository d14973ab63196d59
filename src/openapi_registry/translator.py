"""Translate a route contract into an OpenAPI operation object."""

from typing import Any, Callable

from openapi_registry.contract.base import DescribedResponse, ResponseContract, RouteContract
from openapi_registry.document import DEFAULT_CONTENT_TYPE
from openapi_registry.schema import is_schema

BODY_METHODS = ("post", "put", "patch")

RESPONSE_DESCRIPTIONS = {
    "200": "Successful response",
    "201": "Created successfully",
    "204": "No content",
    "400": "Bad request",
    "401": "Unauthorized",
    "403": "Forbidden",
    "404": "Not found",
    "422": "Validation error",
    "500": "Internal server error",
}

Compile = Callable[[Any], dict]


def response_description(status_code: str) -> str:
    return RESPONSE_DESCRIPTIONS.get(str(status_code), "Response")


def split_response_spec(entry: Any) -> tuple[Any, str | None, str | None]:
    """Return ``(schema, description, name)`` for one response entry.

    A bare schema carries neither description nor name; anything that is
    neither a schema nor a DescribedResponse has no schema at all.
    """
    if isinstance(entry, DescribedResponse):
        return entry.schema_, entry.description, entry.name
    if is_schema(entry):
        return entry, None, None
    return None, None, None


def build_parameters(location: str, schema: Any, compile_schema: Compile) -> list[dict]:
    compiled = compile_schema(schema)
    if compiled.get("type") != "object" or not compiled.get("properties"):
        return []

    required = compiled.get("required", [])
    return [
        {
            "name": name,
            "in": location,
            "required": location == "path" or name in required,
            "schema": prop,
        }
        for name, prop in compiled["properties"].items()
    ]


def build_request_body(
    schema: Any, compile_schema: Compile, content_types: list[str] | None = None
) -> dict:
    compiled = compile_schema(schema)
    return {
        "required": True,
        "content": {ct: {"schema": compiled} for ct in (content_types or [DEFAULT_CONTENT_TYPE])},
    }


def build_responses(response: ResponseContract | None, compile_schema: Compile) -> dict:
    if response is None:
        return {
            "200": {
                "description": response_description("200"),
                "content": {DEFAULT_CONTENT_TYPE: {"schema": {"type": "object"}}},
            }
        }

    content_type = response.content_type or DEFAULT_CONTENT_TYPE
    responses = {}
    for status_code, entry in response.content.items():
        schema, description, _ = split_response_spec(entry)
        result: dict = {"description": description or response_description(status_code)}
        if schema is not None:
            result["content"] = {content_type: {"schema": compile_schema(schema)}}
        responses[status_code] = result
    return responses


def translate_operation(
    method: str,
    contract: RouteContract,
    security: list[dict[str, list[str]]],
    compile_schema: Compile,
) -> dict:
    """Build the operation object for ``method`` from ``contract``."""
    operation: dict = {}

    if contract.operation_id:
        operation["operationId"] = contract.operation_id
    if contract.summary:
        operation["summary"] = contract.summary
    if contract.description:
        operation["description"] = contract.description
    if contract.tags:
        operation["tags"] = list(contract.tags)

    # absent means "no auth"; an empty list would render differently in UIs
    if security:
        operation["security"] = security

    request = contract.request
    parameters: list[dict] = []
    if request is not None:
        for location, schema in (
            ("query", request.query),
            ("path", request.params),
            ("header", request.headers),
        ):
            if schema is not None:
                parameters.extend(build_parameters(location, schema, compile_schema))
    operation["parameters"] = parameters

    if method.lower() in BODY_METHODS and request is not None and request.body is not None:
        operation["requestBody"] = build_request_body(
            request.body, compile_schema, request.content_type
        )

    operation["responses"] = build_responses(contract.response, compile_schema)
    return operation
