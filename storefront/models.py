from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from storefront.constants import GUEST_CUSTOMER, ORDER_STATUS_PENDING
from storefront.utils.validators import require_non_negative_number, require_positive_number


@dataclass(frozen=True)
class Product:
    id: Any
    title: str
    description: str
    price: float
    image: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Product":
        """
        Build a Product from one backend record.
        Unknown keys are ignored; a record without id or with a bad price raises ValueError.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"product record must be an object, got {type(raw).__name__}")
        if raw.get("id") is None:
            raise ValueError("product record has no id")

        price = raw.get("price", 0)
        if isinstance(price, str):
            try:
                price = float(price.strip())
            except ValueError:
                raise ValueError(f"product {raw['id']} has a non-numeric price: {price!r}") from None
        if isinstance(price, bool) or not isinstance(price, (int, float)) or not math.isfinite(price):
            raise ValueError(f"product {raw['id']} has a non-numeric price: {price!r}")
        require_non_negative_number(price, "price")

        return cls(
            id=raw["id"],
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            price=price,
            image=raw.get("image") or None,
        )


@dataclass
class CartItem:
    product: Product
    qty: int = 1

    def __post_init__(self) -> None:
        require_positive_number(self.qty, "qty")

    @property
    def id(self) -> Any:
        return self.product.id

    @property
    def title(self) -> str:
        return self.product.title

    @property
    def price(self) -> float:
        return self.product.price

    @property
    def line_total(self) -> float:
        return self.product.price * self.qty


@dataclass(frozen=True)
class OrderItem:
    product_id: Any
    quantity: int


@dataclass(frozen=True)
class OrderPayload:
    items: List[OrderItem]
    total: float
    customer_name: str = GUEST_CUSTOMER["customer_name"]
    customer_email: str = GUEST_CUSTOMER["customer_email"]
    customer_address: str = GUEST_CUSTOMER["customer_address"]
    status: str = ORDER_STATUS_PENDING

    @classmethod
    def from_cart(cls, items: List[CartItem], total: float) -> "OrderPayload":
        return cls(
            items=[OrderItem(product_id=it.id, quantity=it.qty) for it in items],
            total=total,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "customer_address": self.customer_address,
            "items": [asdict(it) for it in self.items],
            "total": self.total,
            "status": self.status,
        }


@dataclass
class OrderReceipt:
    order_id: Any
    raw: Dict[str, Any] = field(default_factory=dict)
