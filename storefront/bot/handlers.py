from html import escape
from typing import Dict

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from storefront.bot.keyboards import main_kb
from storefront.config import settings
from storefront.services.backend import BackendClient
from storefront.services.storefront import Storefront
from storefront.utils.formatters import cart_text, money, products_text

router = Router()

backend = BackendClient(settings.backend_url)
# chat_id -> storefront; dropped once the chat places its order
STOREFRONTS: Dict[int, Storefront] = {}


def _storefront(message: Message) -> Storefront:
    chat_id = message.chat.id
    sf = STOREFRONTS.get(chat_id)
    if sf is None:
        sf = Storefront(backend)
        STOREFRONTS[chat_id] = sf
    return sf


def _arg(message: Message) -> str:
    parts = (message.text or "").split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


@router.message(Command("start"))
async def cmd_start(message: Message):
    sf = _storefront(message)
    await sf.open()
    await message.answer("🛍 Welcome to MyShop", reply_markup=main_kb())
    await message.answer(products_text(sf))


@router.message(Command("help"))
async def cmd_help(message: Message):
    text = (
        "<b>MyShop — commands</b>\n\n"
        "<b>Catalog</b>\n"
        "/products — list products\n"
        "/reload — reload products\n"
        "/seed — seed sample products\n\n"
        "<b>Cart</b>\n"
        "/add ID — add one item\n"
        "/remove ID — remove the item\n"
        "/cart — show cart\n"
        "/order — place order\n"
    )
    await message.answer(text)


@router.message(Command("products"))
async def cmd_products(message: Message):
    sf = _storefront(message)
    await sf.open()
    await message.answer(products_text(sf))


@router.message(Command("reload"))
async def cmd_reload(message: Message):
    sf = _storefront(message)
    await sf.load_catalog()
    await message.answer(products_text(sf))


@router.message(Command("seed"))
async def cmd_seed(message: Message):
    sf = _storefront(message)
    status = await sf.reseed_catalog()
    if status:
        await message.answer(f"✅ {status}")
    await message.answer(products_text(sf))


@router.message(Command("add"))
async def cmd_add(message: Message):
    product_id = _arg(message)
    if not product_id:
        await message.answer("Format: /add ID")
        return

    sf = _storefront(message)
    await sf.open()
    product = sf.find_product(product_id)
    if product is None:
        await message.answer(f"❌ Product not found: {escape(product_id)}")
        return

    item = sf.add_to_cart(product)
    await message.answer(
        f"✅ Added: {escape(item.title)} × {item.qty}\n"
        f"Cart ({sf.cart.count}), total {money(sf.total())}"
    )


@router.message(Command("remove"))
async def cmd_remove(message: Message):
    product_id = _arg(message)
    if not product_id:
        await message.answer("Format: /remove ID")
        return

    sf = _storefront(message)
    if sf.remove_from_cart(product_id):
        await message.answer(f"✅ Removed: {escape(product_id)}")
    else:
        await message.answer(f"Not in cart: {escape(product_id)}")


@router.message(Command("cart"))
async def cmd_cart(message: Message):
    await message.answer(cart_text(_storefront(message)))


@router.message(Command("order"))
async def cmd_order(message: Message):
    ok, msg = await _storefront(message).place_order()
    if ok:
        STOREFRONTS.pop(message.chat.id, None)
    await message.answer(f"✅ {escape(msg)}" if ok else f"❌ {escape(msg)}")
