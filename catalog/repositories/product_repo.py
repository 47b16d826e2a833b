# catalog/repositories/product_repo.py
import uuid
from typing import Any

from sqlmodel import Session, select

from catalog.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure store operations (CRUD).
    - No FastAPI, no business logic.
    - No transactions spanning calls: concurrent writes to the same
      product are last-write-wins.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def list(self, session: Session) -> list[Product]:
        # Store-native order
        return list(session.exec(select(Product)).all())

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def update(
        self,
        session: Session,
        product_id: uuid.UUID,
        fields: dict[str, Any],
    ) -> Product | None:
        """
        Merge `fields` into the stored product.

        Returns None if no product has this id.
        """
        product = self.get_by_id(session, product_id)
        if product is None:
            return None

        for key, value in fields.items():
            setattr(product, key, value)

        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def delete(self, session: Session, product_id: uuid.UUID) -> bool:
        """
        Remove the product. Returns False if no product has this id.
        """
        product = self.get_by_id(session, product_id)
        if product is None:
            return False

        session.delete(product)
        session.commit()
        return True
