# catalog/client/api.py
"""Thin HTTP client for the products API."""

from typing import Any

import httpx

PRODUCTS_PATH = "/api/products"


class ProductApi:
    """
    Talks to /api/products.

    Every call raises httpx.HTTPError on transport failure or a non-2xx
    status; callers decide what to do with it.
    """

    def __init__(self, base_url: str | None = None, client: httpx.Client | None = None):
        if client is None:
            if not base_url:
                raise ValueError("Either base_url or client is required")
            client = httpx.Client(base_url=base_url.rstrip("/"))
        self._client = client

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        response = self._client.request(method, path, json=json)
        response.raise_for_status()
        return response.json()

    def list_products(self) -> list[dict[str, Any]]:
        return self._send("GET", PRODUCTS_PATH)

    def create_product(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self._send("POST", PRODUCTS_PATH, json=fields)

    def update_product(self, product_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        return self._send("PUT", f"{PRODUCTS_PATH}/{product_id}", json=fields)

    def delete_product(self, product_id: str) -> dict[str, Any]:
        return self._send("DELETE", f"{PRODUCTS_PATH}/{product_id}")
