from html import escape

from storefront.config import settings
from storefront.constants import MSG_CART_EMPTY, MSG_NO_PRODUCTS


def money(v: float) -> str:
    return f"{settings.currency}{v:.{settings.decimals}f}"


def products_text(storefront) -> str:
    if storefront.loading:
        return "Loading..."
    lines = []
    if storefront.error:
        lines.append(f"❌ {escape(storefront.error)}")
    if not storefront.products:
        lines.append(MSG_NO_PRODUCTS)
        return "\n".join(lines)
    lines.append("<b>Products:</b>")
    for p in storefront.products:
        lines.append(f"• [{escape(str(p.id))}] {escape(p.title)} — {money(p.price)}")
    return "\n".join(lines)


def cart_text(storefront) -> str:
    cart = storefront.cart
    if cart.is_empty:
        return MSG_CART_EMPTY
    lines = [f"<b>Cart ({cart.count}):</b>"]
    for it in cart:
        lines.append(f"• [{escape(str(it.id))}] {escape(it.title)} × {it.qty} — {money(it.line_total)}")
    lines.append(f"\n<b>Total:</b> {money(storefront.total())}")
    return "\n".join(lines)
