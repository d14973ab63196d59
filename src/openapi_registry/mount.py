"""Serve the generated document through Swagger UI."""

import json
from typing import Callable

from fastapi.openapi.docs import get_swagger_ui_html
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Router

from openapi_registry.config import SwaggerUiOptions

_SPEC_PLACEHOLDER = "__openapi_registry_spec__"


def _embed(document: dict) -> str:
    """Serialize ``document`` for a <script> block; "</" cannot close it."""
    return json.dumps(document).replace("</", "<\\/")


def _page_kwargs(options: SwaggerUiOptions | None, title: str) -> dict:
    options = options or SwaggerUiOptions()
    kwargs = options.model_dump(exclude_none=True)
    kwargs["title"] = kwargs.get("title") or title
    return kwargs


def docs_mount_handler(
    get_document: Callable[[], dict],
    options: SwaggerUiOptions | None = None,
    swagger_json_path: str | None = None,
) -> Callable[[Router], None]:
    """Build the handler that populates the router mounted at the docs path.

    With ``swagger_json_path`` the raw document is served there and the UI
    fetches it; otherwise the document is embedded into the page.
    """

    def mount(router: Router) -> None:
        if swagger_json_path:
            json_path = "/" + swagger_json_path.lstrip("/")

            async def openapi_json(request: Request) -> JSONResponse:
                return JSONResponse(get_document())

            router.add_route(json_path, openapi_json, methods=["GET"])

        async def swagger_ui(request: Request) -> HTMLResponse:
            kwargs = _page_kwargs(options, get_document()["info"]["title"])
            if swagger_json_path:
                # relative, so it resolves under whatever prefix the router is mounted at
                return get_swagger_ui_html(openapi_url=swagger_json_path.lstrip("/"), **kwargs)
            parameters = {**kwargs.pop("swagger_ui_parameters", {}), "spec": _SPEC_PLACEHOLDER}
            page = get_swagger_ui_html(openapi_url="", swagger_ui_parameters=parameters, **kwargs)
            html = page.body.decode("utf-8").replace(json.dumps(_SPEC_PLACEHOLDER), _embed(get_document()), 1)
            return HTMLResponse(html)

        router.add_route("/", swagger_ui, methods=["GET"])

    return mount
