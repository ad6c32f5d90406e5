"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from .partial_update import PartialUpdate


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Espresso cup"])
    price: float = Field(..., ge=0, examples=[4.5])


class ProductUpdate(PartialUpdate):
    """Schema for partially updating a product — only supplied fields are applied."""

    name: str | None = Field(None, min_length=1, max_length=255)
    price: float | None = Field(None, ge=0)


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    price: float
    created_at: datetime
    updated_at: datetime | None

    model_config = {"from_attributes": True}
