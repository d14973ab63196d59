"""Demo authentication handlers.

Each returns ``None`` to let the request through, or a 401 response.
"""

import hmac

from starlette.requests import Request
from starlette.responses import JSONResponse

from openapi_registry.security import api_key_auth, bearer_auth

VALID_TOKEN = "valid_token"
VALID_API_KEY = "valid_api_key"


def _unauthorized(message: str) -> JSONResponse:
    return JSONResponse({"error": f"Unauthorized: {message}"}, status_code=401)


@bearer_auth("jwtAuth", ["read:users", "write:users"])
async def jwt_auth_handler(request: Request) -> JSONResponse | None:
    header = request.headers.get("authorization", "")
    if not header.startswith("Bearer "):
        return _unauthorized("Missing or invalid token")

    token = header.split(" ", 1)[1]
    # A real service would verify the JWT here.
    if not token or not hmac.compare_digest(token, VALID_TOKEN):
        return _unauthorized("Invalid token")
    return None


@api_key_auth("apiKeyAuth", "header", "X-API-Key", ["read:items"])
async def api_key_handler(request: Request) -> JSONResponse | None:
    api_key = request.headers.get("x-api-key")
    if not api_key:
        return _unauthorized("Missing API key")
    if not hmac.compare_digest(api_key, VALID_API_KEY):
        return _unauthorized("Invalid API key")
    return None
