from openapi_registry.example.auth import api_key_handler, jwt_auth_handler
from openapi_registry.example.handlers import (
    create_item_handler,
    delete_item_handler,
    get_items_handler,
    get_user_handler,
    health_handler,
    update_user_email_handler,
)
from openapi_registry.routes import AuthPolicy, RouteDescription

routes = {
    "GET /users/:userId": RouteDescription(
        handler=get_user_handler,
        auth_handler=jwt_auth_handler,
        auth_policy=AuthPolicy.REQUIRED,
    ),
    "POST /items": RouteDescription(
        handler=create_item_handler,
        auth_handler=api_key_handler,
        auth_policy=AuthPolicy.REQUIRED,
    ),
    "PUT /users/:userId/email": RouteDescription(
        handler=update_user_email_handler,
        auth_handler=jwt_auth_handler,
        auth_policy=AuthPolicy.REQUIRED,
    ),
    "DELETE /items/:itemId": RouteDescription(
        handler=delete_item_handler,
        auth_handler=api_key_handler,
        auth_policy=AuthPolicy.REQUIRED,
    ),
    "GET /items": get_items_handler,
    # no contract: served, but left out of the docs
    "GET /health": health_handler,
}
