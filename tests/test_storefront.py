import logging

import httpx

from conftest import make_product
from storefront.services.backend import BackendError


class TestLoadCatalog:
    async def test_success_replaces_products(self, storefront, fake_backend):
        fake_backend.products = [{"id": 1, "title": "A", "price": 10}]
        assert await storefront.load_catalog() is True
        assert [p.title for p in storefront.products] == ["A"]
        assert storefront.loading is False
        assert storefront.error == ""

    async def test_string_prices_are_accepted(self, storefront, fake_backend):
        fake_backend.products = [{"id": 1, "title": "A", "price": "10.00"}]
        assert await storefront.load_catalog() is True
        storefront.add_to_cart(storefront.find_product(1))
        storefront.add_to_cart(storefront.find_product(1))
        assert storefront.total() == 20

    async def test_failure_keeps_products_and_sets_error(self, storefront, fake_backend):
        fake_backend.products = [{"id": 1, "title": "A", "price": 10}]
        await storefront.load_catalog()

        fake_backend.products_status = 500
        assert await storefront.load_catalog() is False
        assert [p.title for p in storefront.products] == ["A"]
        assert storefront.error == "Failed to load products"
        assert storefront.loading is False

    async def test_network_error(self, storefront, fake_backend):
        fake_backend.error = httpx.ConnectError("connection refused")
        await storefront.load_catalog()
        assert storefront.error == "connection refused"
        assert storefront.products == []
        assert storefront.loading is False

    async def test_success_clears_previous_error(self, storefront, fake_backend):
        fake_backend.products_status = 500
        await storefront.load_catalog()
        fake_backend.products_status = 200
        await storefront.load_catalog()
        assert storefront.error == ""

    async def test_loading_is_true_while_request_is_in_flight(self, storefront):
        seen = []

        async def fetch_products():
            seen.append(storefront.loading)
            return []

        storefront.backend.fetch_products = fetch_products
        await storefront.load_catalog()
        assert seen == [True]
        assert storefront.loading is False

    async def test_open_loads_only_once(self, storefront, fake_backend):
        await storefront.open()
        await storefront.open()
        assert len(fake_backend.calls("GET", "/api/products")) == 1


class TestReseed:
    async def test_seeds_then_reloads(self, storefront, fake_backend):
        fake_backend.products = [{"id": 1, "title": "A", "price": 10}]
        status = await storefront.reseed_catalog()

        assert status == "Seed: seeded"
        assert [r.url.path for r in fake_backend.requests] == ["/api/seed-products", "/api/products"]
        assert len(storefront.products) == 1

    async def test_failure_is_logged_not_surfaced(self, storefront, fake_backend, caplog):
        fake_backend.seed_status = 500
        with caplog.at_level(logging.ERROR):
            status = await storefront.reseed_catalog()

        assert status is None
        assert storefront.error == ""
        assert "Seeding products failed" in caplog.text
        assert fake_backend.calls("GET", "/api/products") == []


class TestCart:
    def test_find_product_matches_string_ids(self, storefront):
        storefront.products = [make_product(1), make_product("x7")]
        assert storefront.find_product("1").id == 1
        assert storefront.find_product(" x7 ").id == "x7"
        assert storefront.find_product("2") is None

    def test_remove_by_string_id(self, storefront):
        storefront.add_to_cart(make_product(1))
        assert storefront.remove_from_cart("1") is True
        assert storefront.cart.is_empty

    def test_remove_missing_is_noop(self, storefront):
        storefront.add_to_cart(make_product(1))
        assert storefront.remove_from_cart(5) is False
        assert storefront.cart.count == 1


class TestPlaceOrder:
    async def test_empty_cart_makes_no_request(self, storefront, fake_backend):
        ok, msg = await storefront.place_order()
        assert (ok, msg) == (False, "Cart is empty")
        assert fake_backend.requests == []
        assert storefront.cart.is_empty

    async def test_success_empties_cart(self, storefront, fake_backend):
        storefront.add_to_cart(make_product(1, price=10))
        storefront.add_to_cart(make_product(2, price=5))

        ok, msg = await storefront.place_order()

        assert ok is True
        assert msg == "Order placed! ID: ord-1"
        assert storefront.cart.is_empty
        order = fake_backend.orders()[0]
        assert order["items"] == [{"product_id": 1, "quantity": 1}, {"product_id": 2, "quantity": 1}]
        assert order["total"] == 15

    async def test_failure_keeps_cart(self, storefront, fake_backend):
        p = make_product(1, price=10)
        storefront.add_to_cart(p)
        storefront.add_to_cart(p)
        fake_backend.order_status = 500

        ok, msg = await storefront.place_order()

        assert (ok, msg) == (False, "Order failed")
        assert [(it.id, it.qty) for it in storefront.cart] == [(1, 2)]

    async def test_backend_error_message_is_returned(self, storefront):
        async def submit_order(payload):
            raise BackendError("backend down")

        storefront.backend.submit_order = submit_order
        storefront.add_to_cart(make_product(1))
        assert await storefront.place_order() == (False, "backend down")
        assert storefront.cart.count == 1


async def test_shopping_scenario(storefront, fake_backend):
    fake_backend.products = [{"id": 1, "title": "A", "price": 10}]
    await storefront.open()
    assert len(storefront.products) == 1

    product = storefront.find_product(1)
    storefront.add_to_cart(product)
    storefront.add_to_cart(product)
    assert [(it.id, it.qty) for it in storefront.cart] == [(1, 2)]
    assert storefront.total() == 20

    ok, _ = await storefront.place_order()
    assert ok
    assert list(storefront.cart) == []
