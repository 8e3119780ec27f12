"""
Quote lifecycle tests.
"""

import re

import pytest
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from graybay.models.quote import Quote, QuoteItem
from graybay.schemas.line_item import LineItemInput
from graybay.schemas.quote import QuoteUpdate
from graybay.services.quote_service import QuoteService


ITEMS = [
    {"productId": "custom-work", "quantity": 2, "customPrice": 50, "discount": 10},
    {"productId": "custom-extra", "quantity": 1, "customPrice": 20},
]


@pytest.fixture
def make_quote(test_client):
    async def _make_quote(client_id: int, items=None, tax_rate=8, **overrides) -> dict:
        payload = {
            "clientId": client_id,
            "title": "Website refresh",
            "validUntil": "2099-12-31",
            "taxRate": tax_rate,
            "items": ITEMS if items is None else items,
            **overrides,
        }
        response = await test_client.post("/api/quotes", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_quote


@pytest.mark.asyncio
async def test_create_quote_prices_items(make_client, make_quote):
    client = await make_client()

    quote = await make_quote(client["id"])

    assert re.fullmatch(r"Q-\d{6}", quote["id"])
    assert quote["status"] == "draft"
    assert quote["clientName"] == client["name"]
    assert quote["subtotal"] == pytest.approx(110)
    assert quote["tax"] == pytest.approx(8.8)
    assert quote["amount"] == pytest.approx(118.8)
    assert quote["validUntil"] == "2099-12-31"
    assert [item["total"] for item in quote["items"]] == pytest.approx([90, 20])


@pytest.mark.asyncio
async def test_get_quote_by_number(test_client, make_client, make_quote):
    client = await make_client()
    quote = await make_quote(client["id"])

    response = await test_client.get(f"/api/quotes/{quote['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == quote["id"]


@pytest.mark.asyncio
async def test_quote_numbers_are_unique(make_client, make_quote):
    client = await make_client()

    numbers = {(await make_quote(client["id"]))["id"] for _ in range(5)}

    assert len(numbers) == 5


@pytest.mark.asyncio
async def test_create_quote_for_missing_client(test_client):
    response = await test_client.post(
        "/api/quotes",
        json={"clientId": 404, "title": "Nope", "validUntil": "2099-01-01", "items": []},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_replaces_items_and_recomputes(test_client, make_client, make_quote):
    client = await make_client()
    quote = await make_quote(client["id"])

    response = await test_client.put(
        f"/api/quotes/{quote['id']}",
        json={"items": [{"productId": "seo-management", "quantity": 1}], "taxRate": 10},
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["items"]) == 1
    assert data["items"][0]["description"] == "SEO Management"
    assert data["subtotal"] == pytest.approx(300)
    assert data["tax"] == pytest.approx(30)
    assert data["amount"] == pytest.approx(330)
    assert data["status"] == "draft"


@pytest.mark.asyncio
async def test_update_without_items_keeps_lines(test_client, make_client, make_quote):
    client = await make_client()
    quote = await make_quote(client["id"])

    response = await test_client.put(f"/api/quotes/{quote['id']}", json={"title": "Renamed"})

    data = response.json()
    assert data["title"] == "Renamed"
    assert len(data["items"]) == 2
    assert data["amount"] == pytest.approx(118.8)


@pytest.mark.asyncio
async def test_monthly_amount_counts_recurring_products(make_client, make_quote):
    client = await make_client()

    quote = await make_quote(
        client["id"],
        items=[
            {"productId": "website-maintenance", "quantity": 1},
            {"productId": "website-template", "quantity": 1},
        ],
        tax_rate=0,
    )

    assert quote["monthlyAmount"] == pytest.approx(99)
    assert quote["amount"] == pytest.approx(1599)


@pytest.mark.asyncio
async def test_status_transitions(test_client, make_client, make_quote):
    client = await make_client()
    quote = await make_quote(client["id"])
    url = f"/api/quotes/{quote['id']}"

    skipped = await test_client.put(url, json={"status": "accepted"})
    assert skipped.status_code == 409
    assert skipped.json()["error"]["code"] == "conflict"

    assert (await test_client.put(url, json={"status": "sent"})).json()["status"] == "sent"
    assert (await test_client.put(url, json={"status": "accepted"})).json()["status"] == "accepted"

    reopened = await test_client.put(url, json={"status": "draft"})
    assert reopened.status_code == 409


@pytest.mark.asyncio
async def test_list_filters(test_client, make_client, make_quote):
    first = await make_client("First")
    second = await make_client("Second")
    sent = await make_quote(first["id"])
    await make_quote(second["id"])
    await test_client.put(f"/api/quotes/{sent['id']}", json={"status": "sent"})

    everything = (await test_client.get("/api/quotes", params={"status": "all"})).json()
    by_client = (await test_client.get("/api/quotes", params={"clientId": second["id"]})).json()
    by_status = (await test_client.get("/api/quotes", params={"status": "sent"})).json()

    assert everything["total"] == 2
    assert [q["clientName"] for q in by_client["items"]] == ["Second"]
    assert [q["id"] for q in by_status["items"]] == [sent["id"]]


@pytest.mark.asyncio
async def test_unknown_status_filter_is_rejected(test_client):
    response = await test_client.get("/api/quotes", params={"status": "bogus"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_quote(test_client, make_client, make_quote):
    client = await make_client()
    quote = await make_quote(client["id"])

    response = await test_client.delete(f"/api/quotes/{quote['id']}")
    assert response.status_code == 204

    missing = await test_client.get(f"/api/quotes/{quote['id']}")
    assert missing.status_code == 404

    again = await test_client.delete(f"/api/quotes/{quote['id']}")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_failed_item_replace_leaves_quote_untouched(test_database, make_client, make_quote, monkeypatch):
    client = await make_client()
    quote = await make_quote(client["id"])

    async def failing_bulk_create(self, quote_id, items):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(
        "graybay.db.repositories.quote_repository.QuoteItemRepository.bulk_create",
        failing_bulk_create,
    )

    async with test_database.session_maker() as session:
        with pytest.raises(SQLAlchemyError):
            await QuoteService(session).update_quote(
                quote["id"],
                QuoteUpdate(items=[LineItemInput(product_id="seo-management", quantity=1)]),
            )

    async with test_database.session_maker() as session:
        stored = await session.scalar(select(Quote).where(Quote.quote_number == quote["id"]))
        items = (await session.scalars(select(QuoteItem).where(QuoteItem.quote_id == stored.id))).all()

    assert stored.total == pytest.approx(118.8)
    assert len(items) == 2


@pytest.mark.asyncio
async def test_repeated_update_gives_identical_totals(test_client, make_client, make_quote):
    client = await make_client()
    quote = await make_quote(client["id"])
    body = {"items": ITEMS, "taxRate": 8}

    first = (await test_client.put(f"/api/quotes/{quote['id']}", json=body)).json()
    second = (await test_client.put(f"/api/quotes/{quote['id']}", json=body)).json()

    for field in ("subtotal", "tax", "amount"):
        assert first[field] == second[field] == quote[field]
