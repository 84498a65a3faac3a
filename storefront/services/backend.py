from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from storefront.constants import (
    MSG_LOAD_FAILED,
    MSG_ORDER_FAILED,
    ORDERS_PATH,
    PRODUCTS_PATH,
    SEED_PATH,
)
from storefront.models import OrderPayload, OrderReceipt, Product

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Any failed backend call. The message is meant to be shown to the user as is."""


class BackendClient:
    """
    Thin async client for the shop backend.

    One short-lived httpx.AsyncClient per call; nothing is cached or retried.
    Every httpx error, non-2xx status or unreadable body comes out as BackendError.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, transport=self._transport)

    async def fetch_products(self) -> List[Product]:
        try:
            async with self._client() as client:
                response = await client.get(PRODUCTS_PATH)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("GET %s -> %s", PRODUCTS_PATH, e.response.status_code)
            raise BackendError(MSG_LOAD_FAILED) from e
        except httpx.HTTPError as e:
            raise BackendError(str(e) or MSG_LOAD_FAILED) from e
        except ValueError as e:
            raise BackendError(MSG_LOAD_FAILED) from e

        if not isinstance(data, list):
            raise BackendError(MSG_LOAD_FAILED)
        try:
            return [Product.from_dict(raw) for raw in data]
        except ValueError as e:
            logger.warning("Bad product record: %s", e)
            raise BackendError(MSG_LOAD_FAILED) from e

    async def submit_order(self, payload: OrderPayload) -> OrderReceipt:
        try:
            async with self._client() as client:
                response = await client.post(ORDERS_PATH, json=payload.to_dict())
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("POST %s -> %s", ORDERS_PATH, e.response.status_code)
            raise BackendError(MSG_ORDER_FAILED) from e
        except httpx.HTTPError as e:
            raise BackendError(str(e) or MSG_ORDER_FAILED) from e
        except ValueError as e:
            raise BackendError(MSG_ORDER_FAILED) from e

        if not isinstance(data, dict) or data.get("id") is None:
            raise BackendError(MSG_ORDER_FAILED)
        return OrderReceipt(order_id=data["id"], raw=data)

    async def seed_products(self) -> Any:
        """Ask the backend to (re)create its demo products. Returns the reported status."""
        try:
            async with self._client() as client:
                response = await client.post(SEED_PATH)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise BackendError(f"Seeding failed: {e}") from e
        except ValueError as e:
            raise BackendError(f"Seeding failed: {e}") from e

        if not isinstance(data, dict):
            raise BackendError("Seeding failed: unexpected response")
        return data.get("status")
