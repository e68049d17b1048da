"""Integration tests for HttpProductCatalog against a local aiohttp server."""

from decimal import Decimal

import pytest
from aiohttp import test_utils, web

from models import Transaction, Purchase
from binary_mlm.services.commission_service import CommissionService
from binary_mlm.storage.product_catalog import HttpProductCatalog, PRODUCTS_PATH


def catalog_app(handler):
    app = web.Application()
    app.router.add_get(PRODUCTS_PATH, handler)
    return app


class TestHttpCatalog:

    @pytest.mark.asyncio
    async def test_fetches_and_skips_malformed_items(self):
        async def products(request):
            return web.json_response([
                {"id": "p1", "name": "Herbal Tea", "price": "1000", "commissionRate": 10},
                {"name": "No id"},
                {"id": "p2", "price": "not a number"},
                "garbage",
                {"id": 3, "name": "Aloe Juice", "price": 499.5},
            ])

        async with test_utils.TestServer(catalog_app(products)) as server:
            catalog = HttpProductCatalog(str(server.make_url("/")))

            fetched = await catalog.getProductCatalog()
            found = await catalog.findProduct("3")

        assert [p.productID for p in fetched] == ["p1", "3"]
        assert fetched[0].price == Decimal("1000")
        assert found.name == "Aloe Juice"

    @pytest.mark.asyncio
    async def test_server_error_fails_the_purchase(self, storage, session, add_user, add_structure):
        async def unavailable(request):
            return web.Response(status=503, text="maintenance")

        add_structure()
        add_user("s")
        buyer = add_user("b", sponsor="s")

        async with test_utils.TestServer(catalog_app(unavailable)) as server:
            service = CommissionService(storage, HttpProductCatalog(str(server.make_url("/"))))

            assert await service.recordProductPurchase(buyer, "p1", "pay-1") is False

        assert session.query(Transaction).count() == 0
        assert session.query(Purchase).count() == 0
