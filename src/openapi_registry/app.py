"""Build a Starlette application from a route table."""

import inspect
import logging
from typing import Any, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.routing import BaseRoute, Mount, Route, Router

from openapi_registry.document import to_openapi_path
from openapi_registry.routes import (
    HTTP_METHODS,
    AuthPolicy,
    RegistryContext,
    as_description,
    parse_route_key,
    resolve_auth,
)

logger = logging.getLogger(__name__)


async def _call(func: Callable[..., Any], request: Request) -> Any:
    result = func(request)
    if inspect.isawaitable(result):
        result = await result
    return result


def guard(handler: Callable[..., Any], policy: AuthPolicy, auth_handler: Callable[..., Any] | None):
    """Wrap ``handler`` so ``auth_handler`` runs first.

    An auth handler returns ``None`` to let the request through or a
    response to reject it. Rejections are ignored under the optional policy.
    """
    if auth_handler is None:
        return handler

    async def guarded(request: Request):
        rejection = await _call(auth_handler, request)
        if rejection is not None and policy == AuthPolicy.REQUIRED:
            return rejection
        return await _call(handler, request)

    return guarded


def build_routes(routes: dict[str, Any], context: RegistryContext | None = None) -> list[BaseRoute]:
    result: list[BaseRoute] = []
    for key, entry in routes.items():
        parsed = parse_route_key(key)
        if parsed is None:
            logger.warning("Ignoring malformed route key %r", key)
            continue

        verb, path = parsed
        description = as_description(entry)
        if verb.upper() == "MOUNT":
            router = Router()
            description.handler(router)
            result.append(Mount(path, app=router))
        elif verb.lower() in HTTP_METHODS:
            policy, auth_handler = resolve_auth(description, context)
            endpoint = guard(description.handler, policy, auth_handler)
            result.append(Route(to_openapi_path(path), endpoint, methods=[verb.upper()]))
        else:
            logger.warning("Ignoring route %r: unknown verb %s", key, verb)
    return result


def create_app(
    routes: dict[str, Any],
    context: RegistryContext | None = None,
    error_handler: Callable[..., Any] | None = None,
    debug: bool = False,
) -> Starlette:
    exception_handlers = {Exception: error_handler} if error_handler is not None else None
    return Starlette(debug=debug, routes=build_routes(routes, context), exception_handlers=exception_handlers)
