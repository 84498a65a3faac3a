from __future__ import annotations

from typing import Any, Iterator, List, Optional

from storefront.models import CartItem, Product


class Cart:
    """
    In-memory cart: one CartItem per product id, in the order products were first added.
    Nothing here is persisted; a new Cart starts empty.
    """

    def __init__(self) -> None:
        self.items: List[CartItem] = []

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def get(self, product_id: Any) -> Optional[CartItem]:
        for it in self.items:
            if it.id == product_id:
                return it
        return None

    def add(self, product: Product) -> CartItem:
        item = self.get(product.id)
        if item is not None:
            item.qty += 1
            return item
        item = CartItem(product=product, qty=1)
        self.items.append(item)
        return item

    def remove(self, product_id: Any) -> bool:
        before = len(self.items)
        self.items = [it for it in self.items if it.id != product_id]
        return len(self.items) != before

    def total(self) -> float:
        return sum(it.line_total for it in self.items)

    def clear(self) -> None:
        self.items.clear()
