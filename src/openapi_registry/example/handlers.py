"""Demo route handlers with attached contracts."""

import uuid

from pydantic import BaseModel, Field, ValidationError, model_validator
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from openapi_registry.contract import DescribedResponse, with_contract, with_error_contract
from openapi_registry.example.schemas import Error, ExtendedItem, Item, SuccessMessage, User

MISSING_USER_ID = uuid.UUID(int=0)


class UserParams(BaseModel):
    user_id: uuid.UUID = Field(alias="userId")


class ItemParams(BaseModel):
    item_id: uuid.UUID = Field(alias="itemId")


class ItemsQuery(BaseModel):
    limit: int = Field(default=10, ge=1, le=10)
    include_details: bool = Field(default=False, alias="includeDetails")


class CreateItemBody(BaseModel):
    item_name: str = Field(alias="itemName", min_length=3)
    quantity: int = Field(gt=0)
    tags: list[str] = []


class UpdateEmailBody(BaseModel):
    email: str
    confirm_email: str = Field(alias="confirmEmail")

    @model_validator(mode="after")
    def _emails_match(self):
        if self.email != self.confirm_email:
            raise ValueError("Emails do not match")
        return self


def _bad_request(e: ValidationError) -> JSONResponse:
    issues = [{"message": err["msg"], "path": list(err["loc"])} for err in e.errors()]
    return JSONResponse({"error": "Invalid request", "issues": issues}, status_code=400)


@with_contract({
    "operationId": "getUserById",
    "summary": "Get a user by their ID",
    "tags": ["Users"],
    "request": {"params": UserParams},
    "response": {
        "content": {
            200: {"schema": User, "description": "User found successfully."},
            404: {"schema": Error, "description": "User not found."},
            400: {"schema": Error, "description": "Invalid request parameters."},
        },
    },
})
async def get_user_handler(request: Request) -> JSONResponse:
    try:
        params = UserParams.model_validate(request.path_params)
    except ValidationError as e:
        return _bad_request(e)

    if params.user_id == MISSING_USER_ID:
        return JSONResponse({"error": "User not found", "code": "USER_NOT_FOUND"}, status_code=404)

    user = User(id=params.user_id, name="John Doe", email="john.doe@example.com")
    return JSONResponse(user.model_dump(mode="json"))


@with_contract({
    "operationId": "createItem",
    "summary": "Create a new item",
    "tags": ["Items"],
    "request": {"body": CreateItemBody},
    "response": {
        "content": {
            201: {"schema": Item, "description": "Item created successfully."},
            400: {"schema": Error, "description": "Invalid item data provided."},
            422: {"schema": Error, "description": "Item could not be processed due to business rules."},
        },
    },
})
async def create_item_handler(request: Request) -> JSONResponse:
    try:
        body = CreateItemBody.model_validate(await request.json())
    except ValidationError as e:
        return _bad_request(e)

    if body.item_name == "forbidden_item":
        return JSONResponse(
            {"error": "This item name is not allowed.", "code": "ITEM_FORBIDDEN"},
            status_code=422,
        )

    item = Item(item_id=uuid.uuid4(), item_name=body.item_name, quantity=body.quantity)
    return JSONResponse(item.model_dump(mode="json", by_alias=True), status_code=201)


@with_contract({
    "operationId": "updateUserEmail",
    "summary": "Update a user's email address",
    "tags": ["Users"],
    "request": {"params": UserParams, "body": UpdateEmailBody},
    "response": {
        "content": {
            200: {"schema": SuccessMessage, "description": "Email updated successfully."},
            400: {"schema": Error, "description": "Validation failed or emails did not match."},
        },
    },
})
async def update_user_email_handler(request: Request) -> JSONResponse:
    try:
        params = UserParams.model_validate(request.path_params)
        body = UpdateEmailBody.model_validate(await request.json())
    except ValidationError as e:
        return _bad_request(e)

    message = SuccessMessage(
        message="Email updated successfully",
        details=f"User {params.user_id} email changed to {body.email}",
    )
    return JSONResponse(message.model_dump(mode="json"))


@with_contract({
    "operationId": "deleteItem",
    "summary": "Delete an item by ID",
    "tags": ["Items"],
    "request": {"params": ItemParams},
    "response": {
        "content": {
            204: DescribedResponse(description="Item deleted successfully, no content returned."),
            404: {"schema": Error, "description": "Item not found."},
        },
    },
})
async def delete_item_handler(request: Request) -> Response:
    try:
        ItemParams.model_validate(request.path_params)
    except ValidationError as e:
        return _bad_request(e)
    return Response(status_code=204)


@with_contract({
    "operationId": "getItems",
    "summary": "Get a list of items with nested details",
    "tags": ["Items"],
    "request": {"query": ItemsQuery},
    "response": {
        "content": {
            200: {"schema": list[ExtendedItem], "description": "A list of items retrieved successfully."},
            400: {"schema": Error, "description": "Invalid query parameters."},
        },
    },
})
async def get_items_handler(request: Request) -> JSONResponse:
    try:
        query = ItemsQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        return _bad_request(e)

    items = [
        ExtendedItem(
            item_id=uuid.uuid4(),
            item_name=f"Item {i + 1}",
            quantity=(i + 1) * 2,
            description=f"This is detailed description for item {i + 1}." if query.include_details else None,
            details=[{"property": "Color", "value": "Red" if i % 2 == 0 else "Blue"}] if query.include_details else [],
        )
        for i in range(min(query.limit, 5))
    ]
    return JSONResponse([item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items])


async def health_handler(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@with_error_contract({
    "errors": {
        "content": {
            500: {"schema": Error, "description": "Unexpected server failure.", "name": "InternalError"},
        },
    },
})
async def error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": "Internal server error"}, status_code=500)
