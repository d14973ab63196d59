"""OpenAPI registry: walks a route table and documents every route it can.

Routes that cannot be documented (malformed keys, non-HTTP methods,
handlers without a contract) are skipped, never rejected; they keep
working at the HTTP layer.
"""

import logging
from typing import Any

from openapi_registry.config import OpenApiRegistryConfig
from openapi_registry.contract.registry import ContractRegistry, default_registry
from openapi_registry.document import DEFAULT_CONTENT_TYPE, DocumentBuilder
from openapi_registry.mount import docs_mount_handler
from openapi_registry.routes import (
    HTTP_METHODS,
    RegistryContext,
    RouteDescription,
    as_description,
    parse_route_key,
    resolve_auth,
)
from openapi_registry.schema import SchemaCompiler
from openapi_registry.security import SecuritySchemeTable, default_table
from openapi_registry.translator import response_description, split_response_spec, translate_operation

logger = logging.getLogger(__name__)


class OpenApiRegistry:
    """Owns one document and fills it from route tables."""

    def __init__(
        self,
        config: OpenApiRegistryConfig | None = None,
        contracts: ContractRegistry | None = None,
        security_schemes: SecuritySchemeTable | None = None,
    ):
        self.config = config or OpenApiRegistryConfig()
        self.contracts = contracts or default_registry
        self.security_schemes = security_schemes or default_table
        self.builder = DocumentBuilder(self.config)
        self.compiler = SchemaCompiler()

    def get_openapi_schema(self) -> dict:
        return self.builder.get_document()

    def register_security_scheme(self, name: str, scheme: Any) -> None:
        if hasattr(scheme, "to_openapi"):
            scheme = scheme.to_openapi()
        self.builder.register_security_scheme(name, scheme)

    def reset(self) -> None:
        self.builder.reset()
        self.compiler.drain()

    def register_route(
        self,
        method: str,
        path: str,
        handler: Any,
        auth_handler: Any = None,
    ) -> bool:
        """Document one route. Returns False when the handler has no contract.

        The auth handler's scheme is published even when the route itself
        ends up undocumented.
        """
        security = []
        if auth_handler is not None:
            definition = self.security_schemes.lookup(auth_handler)
            if definition is not None:
                self.register_security_scheme(definition.name, definition.scheme)
                security.append({definition.name: list(definition.scopes or [])})

        contract = self.contracts.get_contract(handler)
        if contract is None:
            return False

        operation = translate_operation(method, contract, security, self.compiler.compile)
        self.builder.register_operation(method, path, operation)
        self.builder.register_schemas(self.compiler.drain())
        return True

    def register_error_handler(self, handler: Any) -> None:
        """Publish the error responses declared on a framework error handler."""
        error_contract = self.contracts.get_error_contract(handler)
        if error_contract is None:
            return

        errors = error_contract.errors
        content_type = errors.content_type or DEFAULT_CONTENT_TYPE
        for status_code, entry in errors.content.items():
            schema, description, name = split_response_spec(entry)
            if schema is None:
                continue
            self.builder.register_error_schema(
                status_code,
                self.compiler.compile(schema),
                description=description or response_description(status_code),
                name=name,
                content_type=content_type,
            )
        self.builder.register_schemas(self.compiler.drain())

    def register_routes(
        self, routes: dict[str, Any], context: RegistryContext | None = None
    ) -> dict[str, Any]:
        """Document ``routes`` and return them with the docs mount appended."""
        if not self.config.enabled:
            logger.info("OpenAPI documentation disabled; routes left as-is")
            return dict(routes)

        documented = 0
        for key, entry in routes.items():
            parsed = parse_route_key(key)
            if parsed is None:
                logger.debug("Skipping malformed route key %r", key)
                continue

            method, path = parsed[0].lower(), parsed[1]
            if method not in HTTP_METHODS:
                logger.debug("Skipping %r: %s is not an HTTP method", key, parsed[0])
                continue

            description = as_description(entry)
            _, auth_handler = resolve_auth(description, context)
            if self.register_route(method, path, description.handler, auth_handler):
                documented += 1
            else:
                logger.debug("Skipping %r: handler has no contract", key)

        logger.info("OpenAPI: documented %d of %d routes", documented, len(routes))

        mount = docs_mount_handler(
            self.get_openapi_schema,
            options=self.config.swagger_ui,
            swagger_json_path=self.config.swagger_json_path,
        )
        return {**routes, f"MOUNT {self.config.path}": RouteDescription(handler=mount)}


def create_openapi_registry(config: OpenApiRegistryConfig | dict | None = None, **kwargs) -> OpenApiRegistry:
    if isinstance(config, dict):
        config = OpenApiRegistryConfig.model_validate(config)
    return OpenApiRegistry(config, **kwargs)
