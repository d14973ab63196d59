from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    id: UUID
    name: str
    email: str


class Item(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: UUID = Field(alias="itemId")
    item_name: str = Field(alias="itemName")
    quantity: float = Field(gt=0)


class ItemDetail(BaseModel):
    property: str
    value: str


class ExtendedItem(Item):
    description: str | None = None
    details: list[ItemDetail]
    related_item_ids: list[UUID] | None = Field(default=None, alias="relatedItemIds")


class SuccessMessage(BaseModel):
    message: str
    details: str | None = None


class Issue(BaseModel):
    message: str
    path: list[str | int]


class Error(BaseModel):
    error: str
    code: str | None = None
    issues: list[Issue] | None = None
