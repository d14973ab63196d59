from openapi_registry.config import OpenApiRegistryConfig, SwaggerUiOptions
from openapi_registry.contract import (
    DescribedResponse,
    ErrorContract,
    RouteContract,
    get_contract,
    get_error_contract,
    with_contract,
    with_error_contract,
)
from openapi_registry.registry import OpenApiRegistry, create_openapi_registry
from openapi_registry.routes import AuthPolicy, RegistryContext, RouteDescription
from openapi_registry.security import (
    api_key_auth,
    basic_auth,
    bearer_auth,
    oauth2_auth,
    oidc_auth,
    with_security_scheme,
)

__all__ = [
    "AuthPolicy",
    "DescribedResponse",
    "ErrorContract",
    "OpenApiRegistry",
    "OpenApiRegistryConfig",
    "RegistryContext",
    "RouteContract",
    "RouteDescription",
    "SwaggerUiOptions",
    "api_key_auth",
    "basic_auth",
    "bearer_auth",
    "create_openapi_registry",
    "get_contract",
    "get_error_contract",
    "oauth2_auth",
    "oidc_auth",
    "with_contract",
    "with_error_contract",
    "with_security_scheme",
]
