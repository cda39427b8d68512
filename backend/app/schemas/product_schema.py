# backend/app/schemas/product_schema.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    slug: str
    description: str
    price: float
    category: str
    inventory: int
    last_updated: datetime = Field(serialization_alias="lastUpdated")
    created_at: datetime = Field(serialization_alias="createdAt")


def product_to_dict(product) -> dict:
    return ProductOut.model_validate(product).model_dump(mode="json", by_alias=True)


def envelope(data=None, message=None, count=None) -> dict:
    """Success envelope shared by every catalog response."""
    body = {"success": True}
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    if data is not None:
        body["data"] = data
    return body
