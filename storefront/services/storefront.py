from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from storefront.constants import MSG_CART_EMPTY
from storefront.models import CartItem, OrderPayload, Product
from storefront.services.backend import BackendClient, BackendError
from storefront.services.cart import Cart

logger = logging.getLogger(__name__)


class Storefront:
    """
    State of one shopper's storefront: the catalog with its loading/error flags, and the cart.

    Views read the attributes directly and call the methods below; every method
    reports its outcome through its return value, views re-render after each call.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend
        self.products: List[Product] = []
        self.cart = Cart()
        self.loading = False
        self.error = ""
        self._opened = False

    # ---------------- catalog ----------------

    async def open(self) -> None:
        # first show of the storefront loads the catalog, later shows don't
        if self._opened:
            return
        self._opened = True
        await self.load_catalog()

    async def load_catalog(self) -> bool:
        self.loading = True
        try:
            products = await self.backend.fetch_products()
        except BackendError as e:
            self.error = str(e)
            logger.warning("Catalog load failed: %s", e)
            return False
        finally:
            self.loading = False

        self.products = products
        self.error = ""
        logger.info("Catalog loaded: %d products", len(products))
        return True

    async def reseed_catalog(self) -> Optional[str]:
        """
        Seed demo products on the backend, then reload the catalog.
        Returns the line to show the user, or None when seeding failed (only logged).
        """
        try:
            status = await self.backend.seed_products()
        except BackendError:
            logger.exception("Seeding products failed")
            return None

        await self.load_catalog()
        logger.info("Seed: %s", status)
        return f"Seed: {status}"

    def find_product(self, product_id: Any) -> Optional[Product]:
        key = str(product_id).strip()
        for p in self.products:
            if str(p.id) == key:
                return p
        return None

    # ---------------- cart ----------------

    def add_to_cart(self, product: Product) -> CartItem:
        return self.cart.add(product)

    def remove_from_cart(self, product_id: Any) -> bool:
        item = self.cart.get(product_id)
        if item is None:
            # ids coming from forms and commands are strings
            key = str(product_id).strip()
            item = next((it for it in self.cart if str(it.id) == key), None)
        if item is None:
            return False
        return self.cart.remove(item.id)

    def total(self) -> float:
        return self.cart.total()

    async def place_order(self) -> Tuple[bool, str]:
        if self.cart.is_empty:
            return False, MSG_CART_EMPTY

        payload = OrderPayload.from_cart(list(self.cart), self.total())
        try:
            receipt = await self.backend.submit_order(payload)
        except BackendError as e:
            logger.warning("Order failed: %s", e)
            return False, str(e)

        logger.info("Order %s placed: %d items, total=%s", receipt.order_id, len(payload.items), payload.total)
        self.cart.clear()
        return True, f"Order placed! ID: {receipt.order_id}"
