from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import quote
from uuid import uuid4

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from storefront.config import settings, setup_logging
from storefront.services.backend import BackendClient
from storefront.services.storefront import Storefront
from storefront.utils.formatters import money


BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

setup_logging()

app = FastAPI(title="MyShop")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = money

SESSION_COOKIE = "storefront_sid"

app.state.backend = BackendClient(settings.backend_url)
# session id -> storefront; a session's entry is dropped once it places its order
app.state.storefronts = {}


@app.middleware("http")
async def shopper_session(request: Request, call_next):
    sid = request.cookies.get(SESSION_COOKIE)
    is_new = not sid
    if is_new:
        sid = uuid4().hex
    request.state.sid = sid
    response = await call_next(request)
    if is_new:
        response.set_cookie(SESSION_COOKIE, sid, httponly=True, samesite="lax")
    return response


def _storefront(request: Request) -> Storefront:
    storefronts = request.app.state.storefronts
    sf = storefronts.get(request.state.sid)
    if sf is None:
        sf = Storefront(request.app.state.backend)
        storefronts[request.state.sid] = sf
    return sf


def _back(msg: str = "") -> RedirectResponse:
    url = f"/?msg={quote(msg)}" if msg else "/"
    return RedirectResponse(url=url, status_code=303)


def _render(request: Request, name: str, ctx: dict[str, Any]) -> HTMLResponse:
    sf = _storefront(request)
    base = {
        "request": request,
        "products": sf.products,
        "cart": sf.cart,
        "total": sf.total(),
        "loading": sf.loading,
        "error": sf.error,
    }
    base.update(ctx)
    return templates.TemplateResponse(request, name, base)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, msg: str = ""):
    await _storefront(request).open()
    return _render(request, "index.html", {"message": msg})


@app.post("/reload")
async def reload_products(request: Request):
    ok = await _storefront(request).load_catalog()
    return _back("" if ok else _storefront(request).error)


@app.post("/seed")
async def seed(request: Request):
    status = await _storefront(request).reseed_catalog()
    return _back(status or "")


# ---------------- cart ----------------

@app.post("/cart/add")
async def cart_add(request: Request, product_id: str = Form(...)):
    sf = _storefront(request)
    await sf.open()
    product = sf.find_product(product_id)
    if product is None:
        return _back(f"Product not found: {product_id}")
    sf.add_to_cart(product)
    return _back()


@app.post("/cart/remove")
async def cart_remove(request: Request, product_id: str = Form(...)):
    _storefront(request).remove_from_cart(product_id)
    return _back()


@app.post("/order")
async def place_order(request: Request):
    ok, msg = await _storefront(request).place_order()
    if ok:
        request.app.state.storefronts.pop(request.state.sid, None)
    return _back(msg)
