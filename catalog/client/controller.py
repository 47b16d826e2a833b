# catalog/client/controller.py
import logging
from typing import Any, Callable

import httpx
from rich.console import Group, RenderableType

from catalog.client import views
from catalog.client.api import ProductApi
from catalog.client.state import (
    CatalogItem,
    ShowingDetail,
    ShowingEdit,
    ShowingForm,
    ShowingList,
    View,
)

logger = logging.getLogger(__name__)

# Failures the storefront logs and moves on from
REQUEST_ERRORS = (httpx.HTTPError, ValueError)


class ProductControl:
    """
    Stateful storefront controller.

    Holds the cached product list and the active view, and issues API
    calls. Failed calls are logged only; the UI keeps its last state and
    local changes made before the call are not rolled back.
    """

    def __init__(self, api: ProductApi):
        self.api = api
        self.products: list[CatalogItem] = []
        self.view: View = ShowingList()

    # ----- Loading -----

    def mount(self) -> None:
        try:
            records = self.api.list_products()
        except REQUEST_ERRORS as e:
            logger.error("Error fetching products: %s", e)
            return
        logger.debug("Fetched %d products", len(records))
        self.products = [CatalogItem.from_record(r) for r in records]

    def reload(self) -> None:
        """Start over as if the page had been opened fresh."""
        self.products = []
        self.view = ShowingList()
        self.mount()

    # ----- Navigation -----

    def press_toggle(self) -> None:
        view = self.view
        if isinstance(view, ShowingEdit):
            self.view = ShowingDetail(view.product)
        elif isinstance(view, (ShowingDetail, ShowingForm)):
            self.view = ShowingList()
        else:
            self.view = ShowingForm()

    def select_product(self, product_id: str) -> None:
        # Looked up in the cached list, no request
        product = self._find(product_id)
        if product is None:
            logger.debug("No cached product %s", product_id)
            return
        self.view = ShowingDetail(product)

    def start_editing(self) -> None:
        if isinstance(self.view, ShowingDetail):
            self.view = ShowingEdit(self.view.product)

    def buy(self) -> None:
        """
        Take one unit off the shown product's displayed stock.

        Only the local copy changes; nothing is sent to the API.
        """
        if not isinstance(self.view, ShowingDetail):
            return
        bought = self.view.product.bought_one()
        self.products = [bought if p.id == bought.id else p for p in self.products]
        self.view = ShowingDetail(bought)

    # ----- Writes -----

    def add_product(self, fields: dict[str, Any]) -> None:
        # The form closes right away; the new product shows up on next reload
        try:
            created = self.api.create_product(fields)
            logger.debug("Created product: %s", created)
        except REQUEST_ERRORS as e:
            logger.error("Error adding product: %s", e)
        self.view = ShowingList()

    def delete_product(self, product_id: str) -> None:
        try:
            deleted = self.api.delete_product(product_id)
            logger.debug("Deleted product: %s", deleted)
        except REQUEST_ERRORS as e:
            logger.error("Error deleting product: %s", e)
        self.products = [p for p in self.products if p.id != product_id]
        self.view = ShowingList()

    def edit_product(self, fields: dict[str, Any]) -> None:
        if not isinstance(self.view, (ShowingEdit, ShowingDetail)):
            return
        product_id = self.view.product.id
        try:
            updated = self.api.update_product(product_id, fields)
            logger.debug("Updated product: %s", updated)
        except REQUEST_ERRORS as e:
            logger.error("Error updating product: %s", e)
        self.reload()

    # ----- Rendering -----

    @property
    def button_text(self) -> str:
        if isinstance(self.view, ShowingEdit):
            return "Back to Product Detail"
        if isinstance(self.view, (ShowingDetail, ShowingForm)):
            return "Back to product list"
        return "Add a product"

    def form(self, ask: Callable[..., str] | None = None) -> views.ProductForm | None:
        """The form for the active view, wired to the matching handler."""
        kwargs = {"ask": ask} if ask else {}
        if isinstance(self.view, ShowingEdit):
            return views.ProductForm(self.edit_product, product=self.view.product, **kwargs)
        if isinstance(self.view, ShowingForm):
            return views.ProductForm(self.add_product, **kwargs)
        return None

    def render(self) -> RenderableType:
        view = self.view
        if isinstance(view, (ShowingEdit, ShowingForm)):
            body = self.form().render()
        elif isinstance(view, ShowingDetail):
            body = views.product_detail(view.product)
        else:
            body = views.product_list(self.products)
        return Group(views.toggle_button(self.button_text), body)

    def _find(self, product_id: str) -> CatalogItem | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None
