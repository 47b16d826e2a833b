# catalog/cli.py
"""Command line entry points: run the API, or open the storefront."""

import typer
import uvicorn
from rich.console import Console

from catalog.client.api import ProductApi
from catalog.client.controller import ProductControl
from catalog.client.shell import run_shell
from catalog.core.config import get_settings
from catalog.main import configure_logging

console = Console()

app = typer.Typer(help="Product catalog API and storefront")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind (default: HOST setting)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on (default: PORT setting)"),
) -> None:
    """Run the products API."""
    settings = get_settings()
    configure_logging(settings)

    port = port or settings.PORT
    console.print(f"[green]Server listening on port {port}[/green]")
    # A failed store connection aborts startup and uvicorn exits non-zero
    uvicorn.run(
        "catalog.main:app",
        host=host or settings.HOST,
        port=port,
        lifespan="on",
        log_level=settings.LOG_LEVEL.lower(),
    )


@app.command("shop")
def shop(
    base_url: str | None = typer.Option(None, "--base-url", "-u", help="API base URL (default: API_BASE_URL setting)"),
) -> None:
    """Open the interactive storefront."""
    settings = get_settings()
    configure_logging(settings)

    api = ProductApi(base_url or settings.API_BASE_URL)
    try:
        run_shell(ProductControl(api), console=console)
    finally:
        api.close()


if __name__ == "__main__":
    app()
