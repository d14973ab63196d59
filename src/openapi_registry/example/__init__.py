"""Demo service: a few user and item routes, documented at /api/docs."""

from openapi_registry.app import create_app
from openapi_registry.config import OpenApiRegistryConfig, SwaggerUiOptions
from openapi_registry.example.handlers import error_handler
from openapi_registry.example.routes import routes
from openapi_registry.registry import create_openapi_registry


def build_example_app(swagger_json_path: str | None = None):
    """Return ``(app, registry)`` for the demo routes."""
    registry = create_openapi_registry(
        OpenApiRegistryConfig(
            title="Super API",
            swagger_ui=SwaggerUiOptions(swagger_ui_parameters={"syntaxHighlight.theme": "monokai"}),
            swagger_json_path=swagger_json_path,
        )
    )
    documented = registry.register_routes(routes)
    registry.register_error_handler(error_handler)
    return create_app(documented, error_handler=error_handler), registry
