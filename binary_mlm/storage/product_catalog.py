# binary_mlm/storage/product_catalog.py
"""
Product catalog served over HTTP.
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List
import logging

import aiohttp

from models import Product
from binary_mlm.storage.base import ProductCatalog

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/api/db/products"


def productFromPayload(data: Dict[str, Any]) -> Product:
    """Build a transient Product from one catalog JSON object."""
    return Product(
        productID=str(data["id"]),
        name=data.get("name", ""),
        price=Decimal(str(data.get("price", 0))),
        commissionRate=Decimal(str(data.get("commissionRate", 0)))
    )


class HttpProductCatalog(ProductCatalog):
    """Catalog fetched from GET {baseUrl}/api/db/products."""

    def __init__(self, baseUrl: str):
        self.baseUrl = baseUrl.rstrip("/")

    async def getProductCatalog(self) -> List[Product]:
        url = f"{self.baseUrl}{PRODUCTS_PATH}"
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as response:
                response.raise_for_status()
                data = await response.json()

        products = []
        for item in data:
            try:
                products.append(productFromPayload(item))
            except (KeyError, TypeError, InvalidOperation) as e:
                logger.warning(f"Skipping malformed catalog item {item!r}: {e!r}")

        logger.debug(f"Fetched {len(products)} products from {url}")
        return products
