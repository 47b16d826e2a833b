# catalog/routers/products.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from catalog.database import get_session
from catalog.repositories.product_repo import ProductRepository
from catalog.schemas.product import ProductCreate, ProductRead, ProductUpdate
from catalog.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    List all products in store order.
    """
    return service.list_products(session)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.
    """
    return service.get_product(session, product_id)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product. The store assigns its id.

    - Accepts JSON, or a form submission (see FormBodyMiddleware).
    """
    return service.create_product(session, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: uuid.UUID,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Update the fields sent in the body; everything else is left as is.
    """
    return service.update_product(session, product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_200_OK)
def delete_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
) -> dict[str, str]:
    """
    Delete a product.
    """
    service.delete_product(session, product_id)
    return {"message": "Product deleted successfully", "id": str(product_id)}
