"""
==============================================================================
Storefront Views and Shell Tests
==============================================================================

Rendering, form packaging and typed commands.

==============================================================================
"""

from typing import Any

import pytest
from rich.console import Console

from catalog.client import views
from catalog.client.controller import ProductControl
from catalog.client.shell import handle_command, run_shell
from catalog.client.state import CatalogItem, ShowingDetail, ShowingEdit, ShowingForm, ShowingList, Unavailable


def render_text(renderable) -> str:
    console = Console(record=True, width=100)
    console.print(renderable)
    return console.export_text()


def scripted(answers: dict[str, str]):
    """A prompt that answers by label and keeps the default otherwise."""
    def ask(label: str, default: str = "") -> str:
        return answers.get(label, default)
    return ask


def lamp() -> CatalogItem:
    return CatalogItem.from_record(
        {"id": "lamp-1", "name": "Lamp", "price": 20.0, "quantity": 1, "category": "home"}
    )


class TestRenderers:
    def test_product_list(self):
        text = render_text(views.product_list([lamp()]))
        assert "Lamp" in text
        assert "20.00" in text

    def test_empty_list(self):
        assert "No products yet" in render_text(views.product_list([]))

    def test_record_without_usable_price(self):
        product = CatalogItem.from_record(
            {"id": "odd-1", "name": "Odd", "price": None, "quantity": None}
        )
        text = render_text(views.product_list([product]))
        assert "Odd" in text
        assert "n/a" in text
        assert "n/a" in render_text(views.product_detail(product))

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price_text(self, price: float):
        assert views.price_text(price) == "n/a"

    def test_price_text(self):
        assert views.price_text(3) == "3.00"

    def test_detail_shows_unavailable(self):
        product = lamp().bought_one()
        assert product.quantity == Unavailable()
        text = render_text(views.product_detail(product))
        assert "Product is not Available" in text
        assert "home" in text


class TestProductForm:
    def test_new_form_packages_typed_values(self):
        submitted: list[dict[str, Any]] = []
        form = views.ProductForm(
            submitted.append,
            ask=scripted({"Name": "Widget", "Price": "9.99", "Quantity": "3"}),
        )
        record = form.fill()
        assert record == {"name": "Widget", "price": 9.99, "quantity": 3}
        assert submitted == [record]
        assert form.title == "New product"

    def test_unparseable_number_is_sent_as_typed(self):
        form = views.ProductForm(lambda record: None, ask=scripted({"Name": "W", "Price": "cheap"}))
        assert form.fill()["price"] == "cheap"

    def test_edit_form_sends_only_changes(self):
        form = views.ProductForm(lambda record: None, product=lamp(), ask=scripted({"Price": "25"}))
        assert form.fill() == {"price": 25.0}
        assert form.title == "Edit product"

    def test_edit_form_never_sends_unavailable(self):
        product = lamp().bought_one()
        form = views.ProductForm(lambda record: None, product=product, ask=scripted({}))
        assert form.fill() == {}


class TestShell:
    def test_list_to_detail_and_buy(self, control: ProductControl, widget: dict):
        control.mount()
        assert handle_command(control, "1")
        assert isinstance(control.view, ShowingDetail)

        handle_command(control, "buy")
        assert str(control.view.product.quantity) == "2"

        handle_command(control, "edit")
        assert isinstance(control.view, ShowingEdit)

        handle_command(control, "b")
        handle_command(control, "b")
        assert control.view == ShowingList()

    def test_row_out_of_range(self, control: ProductControl, widget: dict):
        control.mount()
        handle_command(control, "7")
        assert control.view == ShowingList()

    def test_fill_new_product(self, control: ProductControl, client):
        handle_command(control, "b")
        assert control.view == ShowingForm()

        ask = scripted({"Name": "Gadget", "Price": "1.5", "Quantity": "2"})
        handle_command(control, "fill", ask=ask)
        assert control.view == ShowingList()
        assert [p["name"] for p in client.get("/api/products").json()] == ["Gadget"]

    def test_delete_from_detail(self, control: ProductControl, client, widget: dict):
        control.mount()
        handle_command(control, "1")
        handle_command(control, "delete")
        assert control.products == []
        assert client.get("/api/products").json() == []

    @pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
    def test_run_shell_stops_on_end_of_input(self, control: ProductControl, error):
        console = Console(record=True, width=100)

        def ask(*args, **kwargs):
            raise error

        run_shell(control, console=console, ask=ask)
        assert "Add a product" in console.export_text()

    def test_run_shell_stops_on_end_of_input_in_form(self, control: ProductControl, client):
        answers = iter(["b", "fill"])

        def ask(*args, **kwargs):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        run_shell(control, console=Console(record=True), ask=ask)
        assert control.view == ShowingForm()
        assert client.get("/api/products").json() == []

    def test_quit(self, control: ProductControl):
        assert handle_command(control, "q") is False

    def test_run_shell_renders_until_quit(self, control: ProductControl, widget: dict):
        console = Console(record=True, width=100)
        commands = iter(["1", "buy", "q"])
        run_shell(control, console=console, ask=lambda *args, **kwargs: next(commands))

        text = console.export_text()
        assert "Add a product" in text
        assert "Back to product list" in text
        assert "Widget" in text
