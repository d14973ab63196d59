"""Route table types and per-route auth resolution.

A route table maps ``"METHOD /path"`` keys to either a bare handler or a
``RouteDescription``. Keys whose method is not an HTTP verb (``MOUNT``)
are framework directives and carry no documentation.
"""

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "head", "options")


class AuthPolicy(str, Enum):
    DISABLED = "disabled"
    OPTIONAL = "optional"
    REQUIRED = "required"


class RouteDescription(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="forbid")

    handler: Callable[..., Any]
    auth_handler: Callable[..., Any] | None = Field(default=None, alias="authHandler")
    auth_policy: AuthPolicy | None = Field(default=None, alias="authPolicy")


class RegistryContext(BaseModel):
    """Process-wide auth defaults applied to routes that set none."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="forbid")

    app_auth_handler: Callable[..., Any] | None = Field(default=None, alias="appAuthHandler")
    app_auth_policy: AuthPolicy | None = Field(default=None, alias="appAuthPolicy")


def parse_route_key(key: str) -> tuple[str, str] | None:
    """Split ``"GET /users/:id"`` into ``("GET", "/users/:id")``.

    Whitespace runs inside the path collapse to a single space.
    """
    parts = key.split()
    if len(parts) < 2:
        return None
    return parts[0], " ".join(parts[1:])


def as_description(entry: Any) -> RouteDescription:
    if isinstance(entry, RouteDescription):
        return entry
    if isinstance(entry, dict):
        return RouteDescription.model_validate(entry)
    return RouteDescription(handler=entry)


def resolve_auth(
    description: RouteDescription, context: RegistryContext | None = None
) -> tuple[AuthPolicy, Callable[..., Any] | None]:
    """Pick the effective policy and auth handler for one route.

    The route's own setting wins over the process default; a disabled
    policy always means no handler.
    """
    context = context or RegistryContext()
    policy = description.auth_policy or context.app_auth_policy or AuthPolicy.DISABLED
    if policy == AuthPolicy.DISABLED:
        return policy, None
    return policy, description.auth_handler or context.app_auth_handler
