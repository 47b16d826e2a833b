# catalog/client/state.py
"""
Client-side state for the storefront.

The storefront shows exactly one of four views. Each view is its own
type and carries only the data it needs, so "which view is active" is
never derived from several flags.

Displayed stock is also its own type: a product shows either a count or
"Product is not Available" once it has been bought out locally. The
stored record is never touched by that.
"""

from dataclasses import dataclass, replace
from typing import Any, Union

UNAVAILABLE_TEXT = "Product is not Available"


# ----- Displayed quantity -----


@dataclass(frozen=True)
class Available:
    count: int

    def __str__(self) -> str:
        return str(self.count)


@dataclass(frozen=True)
class Unavailable:
    def __str__(self) -> str:
        return UNAVAILABLE_TEXT


DisplayedQuantity = Union[Available, Unavailable]


def displayed_quantity(count: int) -> DisplayedQuantity:
    if count <= 0:
        return Unavailable()
    return Available(count)


@dataclass
class CatalogItem:
    """
    A product as cached by the storefront.
    """

    id: str
    name: str
    price: float | None
    quantity: DisplayedQuantity
    category: str | None = None
    description: str | None = None
    image: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "CatalogItem":
        return cls(
            id=str(record["id"]),
            name=record["name"],
            price=record.get("price"),
            # Stock as loaded from the store is shown as-is, even 0
            quantity=Available(int(record.get("quantity") or 0)),
            category=record.get("category"),
            description=record.get("description"),
            image=record.get("image"),
        )

    def bought_one(self) -> "CatalogItem":
        """
        The same item with one unit taken off the displayed stock.
        """
        if isinstance(self.quantity, Unavailable):
            return self
        return replace(self, quantity=displayed_quantity(self.quantity.count - 1))


# ----- Views -----


@dataclass(frozen=True)
class ShowingList:
    pass


@dataclass(frozen=True)
class ShowingForm:
    pass


@dataclass(frozen=True)
class ShowingDetail:
    product: CatalogItem


@dataclass(frozen=True)
class ShowingEdit:
    product: CatalogItem


View = Union[ShowingList, ShowingForm, ShowingDetail, ShowingEdit]


def view_from_flags(
    form_visible: bool,
    selected: CatalogItem | None,
    editing: bool,
) -> View:
    """
    Resolve the three-flag view description into a single view.

    The storefront itself only ever holds a View; this is for callers
    that still describe the screen as form-visible, selected-product and
    editing flags.

    Precedence is editing, then a selected product, then the form.
    Editing without a selected product has nothing to edit and falls
    through to the next rule.
    """
    if editing and selected is not None:
        return ShowingEdit(selected)
    if selected is not None:
        return ShowingDetail(selected)
    if form_visible:
        return ShowingForm()
    return ShowingList()
