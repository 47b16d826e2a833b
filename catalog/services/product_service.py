# catalog/services/product_service.py
import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from catalog.models.product import Product
from catalog.repositories.product_repo import ProductRepository
from catalog.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by sending null in an update
REQUIRED_FIELDS = ("name", "price", "quantity")


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - translate "no such id" into 404
      - turn validated payloads into store writes
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    @staticmethod
    def _not_found() -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list(session)

    def get_product(self, session: Session, product_id: uuid.UUID) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise self._not_found()
        return product

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        product = Product(**payload.model_dump())
        created = self.repo.create(session, product)
        logger.info("Created product %s (%s)", created.id, created.name)
        return created

    def update_product(
        self,
        session: Session,
        product_id: uuid.UUID,
        payload: ProductUpdate,
    ) -> Product:
        """
        Partial update of a product.

        - Only fields present in the payload are touched.
        - null for name/price/quantity is ignored; null for the optional
          fields clears them.
        """
        fields = payload.model_dump(exclude_unset=True)
        for key in REQUIRED_FIELDS:
            if key in fields and fields[key] is None:
                del fields[key]

        product = self.repo.update(session, product_id, fields)
        if product is None:
            raise self._not_found()
        logger.info("Updated product %s: %s", product_id, sorted(fields))
        return product

    def delete_product(self, session: Session, product_id: uuid.UUID) -> None:
        if not self.repo.delete(session, product_id):
            raise self._not_found()
        logger.info("Deleted product %s", product_id)
