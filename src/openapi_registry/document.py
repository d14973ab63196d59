"""In-memory OpenAPI document, built up one operation at a time."""

import re

from openapi_registry.config import OpenApiRegistryConfig

OPENAPI_VERSION = "3.0.3"
DEFAULT_TITLE = "API Documentation"
DEFAULT_VERSION = "1.0.0"
DEFAULT_DESCRIPTION = "Generated API documentation"
DEFAULT_SERVER = {"url": "http://localhost:3030"}
DEFAULT_CONTENT_TYPE = "application/json"

_PATH_PARAM = re.compile(r"/:([^/]+)")


def to_openapi_path(path: str) -> str:
    """Convert ``/users/:id`` to ``/users/{id}``."""
    return _PATH_PARAM.sub(r"/{\1}", path)


class DocumentBuilder:
    """Owns the live document and the only operations allowed to mutate it."""

    def __init__(self, config: OpenApiRegistryConfig | None = None):
        config = config or OpenApiRegistryConfig()

        info: dict = {
            "title": config.title or DEFAULT_TITLE,
            "version": config.version or DEFAULT_VERSION,
            "description": config.description or DEFAULT_DESCRIPTION,
        }
        if config.contact:
            info["contact"] = config.contact.model_dump(exclude_none=True)
        if config.license:
            info["license"] = config.license.model_dump(exclude_none=True)

        if config.servers:
            servers = [s.model_dump(exclude_none=True) for s in config.servers]
        else:
            servers = [dict(DEFAULT_SERVER)]

        self.document: dict = {
            "openapi": OPENAPI_VERSION,
            "info": info,
            "servers": servers,
            "paths": {},
            "components": {"schemas": {}, "securitySchemes": {}},
        }

    def register_operation(self, method: str, path: str, operation: dict) -> None:
        path_item = self.document["paths"].setdefault(to_openapi_path(path), {})
        path_item[method.lower()] = operation

    def register_security_scheme(self, name: str, scheme: dict) -> None:
        self.document["components"]["securitySchemes"][name] = scheme

    def register_schemas(self, schemas: dict[str, dict]) -> None:
        self.document["components"]["schemas"].update(schemas)

    def register_error_schema(
        self,
        status_code: str,
        schema: dict,
        description: str | None = None,
        name: str | None = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> None:
        """Store an error body schema and a reusable response pointing at it."""
        key = name or f"Error{status_code}"
        components = self.document["components"]
        components["schemas"][key] = schema

        response: dict = {
            "content": {content_type: {"schema": {"$ref": f"#/components/schemas/{key}"}}},
        }
        if description:
            response = {"description": description, **response}
        components.setdefault("responses", {})[key] = response

    def reset(self) -> None:
        """Drop paths, schemas and security schemes. Info, servers and error responses stay."""
        self.document["paths"] = {}
        self.document["components"]["schemas"] = {}
        self.document["components"]["securitySchemes"] = {}

    def get_document(self) -> dict:
        return self.document
