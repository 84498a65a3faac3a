import json

import httpx
import pytest

from storefront.models import Product
from storefront.services.backend import BackendClient
from storefront.services.storefront import Storefront


class FakeBackend:
    """Shop backend behind httpx.MockTransport; records every request it gets."""

    def __init__(self):
        self.products = []
        self.products_status = 200
        self.order_status = 200
        self.order_body = {"id": "ord-1", "status": "pending"}
        self.seed_status = 200
        self.seed_body = {"status": "seeded"}
        self.error = None  # transport error to raise instead of answering
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        path = request.url.path
        if request.method == "GET" and path == "/api/products":
            return httpx.Response(self.products_status, json=self.products)
        if request.method == "POST" and path == "/api/orders":
            return httpx.Response(self.order_status, json=self.order_body)
        if request.method == "POST" and path == "/api/seed-products":
            return httpx.Response(self.seed_status, json=self.seed_body)
        return httpx.Response(404, json={"detail": "Not Found"})

    def client(self) -> BackendClient:
        return BackendClient("http://shop.test/", transport=httpx.MockTransport(self.handler))

    def calls(self, method: str, path: str):
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def orders(self):
        return [json.loads(r.content) for r in self.calls("POST", "/api/orders")]


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def storefront(fake_backend):
    return Storefront(fake_backend.client())


def make_product(id=1, title="A", price=10, **extra):
    return Product.from_dict({"id": id, "title": title, "price": price, **extra})
