# catalog/client/shell.py
from typing import Callable

from rich.console import Console
from rich.prompt import Prompt

from catalog.client.controller import ProductControl
from catalog.client.state import ShowingDetail, ShowingList

HELP = {
    "list": "b add a product · <row number> open · q quit",
    "detail": "b back · buy · edit · delete · q quit",
    "form": "b back · fill · q quit",
}


def _help_for(control: ProductControl) -> str:
    if isinstance(control.view, ShowingList):
        return HELP["list"]
    if isinstance(control.view, ShowingDetail):
        return HELP["detail"]
    return HELP["form"]


def handle_command(
    control: ProductControl,
    command: str,
    ask: Callable[..., str] = Prompt.ask,
) -> bool:
    """
    Apply one typed command to the controller.

    Returns False when the user asked to quit.
    """
    command = command.strip().lower()
    view = control.view

    if command in ("q", "quit"):
        return False
    if command == "b":
        control.press_toggle()
    elif isinstance(view, ShowingList) and command.isdigit():
        row = int(command)
        if 1 <= row <= len(control.products):
            control.select_product(control.products[row - 1].id)
    elif isinstance(view, ShowingDetail):
        if command == "buy":
            control.buy()
        elif command == "edit":
            control.start_editing()
        elif command == "delete":
            control.delete_product(view.product.id)
    elif command == "fill":
        form = control.form(ask=ask)
        if form is not None:
            form.fill()
    return True


def run_shell(
    control: ProductControl,
    console: Console | None = None,
    ask: Callable[..., str] = Prompt.ask,
) -> None:
    console = console or Console()
    control.mount()

    while True:
        console.print(control.render())
        console.print(_help_for(control), style="dim")
        try:
            if not handle_command(control, ask(">"), ask=ask):
                break
        except (EOFError, KeyboardInterrupt):
            # Ctrl-D or Ctrl-C at any prompt quits
            break
