# catalog/schemas/product.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, FiniteFloat, field_validator
from sqlmodel import SQLModel, Field

# Largest count the store can hold in an integer column
MAX_QUANTITY = 2**63 - 1


class ProductCreate(SQLModel):
    """
    Payload for creating a product.

    - `name` and `price` are required.
    - `quantity` defaults to 0.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    price: FiniteFloat = Field(ge=0)
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY)
    category: str | None = Field(default=None, max_length=100)
    description: str | None = None
    image: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    name: str
    price: float
    quantity: int
    category: str | None = None
    description: str | None = None
    image: str | None = None
    created_at: datetime


class ProductUpdate(SQLModel):
    """
    Partial update payload for products.
    All fields are optional; only the ones sent are changed.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    price: FiniteFloat | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0, le=MAX_QUANTITY)
    category: str | None = Field(default=None, max_length=100)
    description: str | None = None
    image: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v
