# catalog/models/product.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product document in the catalog store.

    The store assigns `id` at creation time; it never changes afterwards.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=255,
        index=True,
        description="Display name of the product",
    )

    price: float = Field(
        ge=0,
        description="Unit price",
    )

    quantity: int = Field(
        default=0,
        ge=0,
        description="How many units are in stock",
    )

    category: str | None = Field(
        default=None,
        max_length=100,
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    image: str | None = Field(
        default=None,
        description="Image URL",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
