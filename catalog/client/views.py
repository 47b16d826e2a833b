# catalog/client/views.py
"""
Renderers for the storefront views.

Everything here draws from its arguments only. User intent goes back to
the controller through the callbacks it hands in.
"""

import math
from typing import Any, Callable

from rich.console import Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from catalog.client.state import Available, CatalogItem

# (field, label, converter) in the order the forms ask for them
FORM_FIELDS: list[tuple[str, str, Callable[[str], Any]]] = [
    ("name", "Name", str),
    ("price", "Price", float),
    ("quantity", "Quantity", int),
    ("category", "Category", str),
    ("description", "Description", str),
    ("image", "Image URL", str),
]


def price_text(price: float | None) -> str:
    if isinstance(price, (int, float)) and math.isfinite(price):
        return f"{price:.2f}"
    return "n/a"


def toggle_button(text: str) -> Text:
    return Text(f"[ {text} ]", style="bold cyan")


def product_list(products: list[CatalogItem]) -> Table:
    table = Table(title="Products")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Price", justify="right")
    table.add_column("Quantity", style="yellow", justify="right")

    for row, product in enumerate(products, start=1):
        table.add_row(str(row), product.name, price_text(product.price), str(product.quantity))

    if not products:
        table.caption = "No products yet"
    return table


def product_detail(product: CatalogItem) -> Panel:
    style = "yellow" if isinstance(product.quantity, Available) else "red"
    lines = [
        Text.assemble(("Price: ", "bold"), price_text(product.price)),
        Text.assemble(("Quantity: ", "bold"), (str(product.quantity), style)),
    ]
    if product.category:
        lines.append(Text.assemble(("Category: ", "bold"), product.category))
    if product.description:
        lines.append(Text(product.description))
    if product.image:
        lines.append(Text.assemble(("Image: ", "bold"), (product.image, "blue underline")))
    lines.append(Text("\nbuy · edit · delete", style="dim"))

    return Panel(Group(*lines), title=product.name, subtitle=product.id)


def _convert(raw: str, converter: Callable[[str], Any]) -> Any:
    try:
        return converter(raw)
    except ValueError:
        # Sent as typed; the API rejects it
        return raw


class ProductForm:
    """
    Form for a new product, or for editing an existing one.

    `fill` asks for every field and hands a plain record to `on_submit`.
    Blank answers are left out. When editing, each prompt starts from the
    current value and only changed fields are submitted.
    """

    def __init__(
        self,
        on_submit: Callable[[dict[str, Any]], None],
        product: CatalogItem | None = None,
        ask: Callable[..., str] = Prompt.ask,
    ):
        self.on_submit = on_submit
        self.product = product
        self.ask = ask

    @property
    def title(self) -> str:
        return "Edit product" if self.product else "New product"

    def _current(self, name: str) -> str:
        if self.product is None:
            return ""
        value = getattr(self.product, name)
        if name == "quantity":
            return str(value.count) if isinstance(value, Available) else ""
        return "" if value is None else str(value)

    def render(self) -> Panel:
        labels = "\n".join(
            f"{label}: {self._current(name)}" if self.product else f"{label}:"
            for name, label, _ in FORM_FIELDS
        )
        return Panel(labels, title=self.title, subtitle="fill · back")

    def fill(self) -> dict[str, Any]:
        record: dict[str, Any] = {}
        for name, label, converter in FORM_FIELDS:
            current = self._current(name)
            raw = self.ask(label, default=current).strip()
            if not raw or raw == current:
                continue
            record[name] = _convert(raw, converter)

        self.on_submit(record)
        return record
