"""
Product catalog tests.
"""

import pytest

from graybay.core.catalog import PRODUCT_CATALOG, get_product, is_recurring


def test_catalog_lookup():
    assert get_product("seo-management").price == 300
    assert get_product("nope") is None
    assert get_product(None) is None
    assert is_recurring("website-maintenance")
    assert not is_recurring("website-template")


@pytest.mark.asyncio
async def test_list_products(test_client):
    response = await test_client.get("/api/catalog/products")

    assert response.status_code == 200
    assert response.json()["total"] == len(PRODUCT_CATALOG)


@pytest.mark.asyncio
async def test_filter_by_category(test_client):
    response = await test_client.get("/api/catalog/products", params={"category": "addon"})

    products = response.json()["items"]
    assert {p["category"] for p in products} == {"addon"}
    assert "ecommerce-integration" in {p["id"] for p in products}


@pytest.mark.asyncio
async def test_unknown_category(test_client):
    response = await test_client.get("/api/catalog/products", params={"category": "premium"})

    assert response.status_code == 422
