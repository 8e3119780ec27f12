"""
Client CRUD, onboarding and nested service tests.
"""

import pytest


@pytest.mark.asyncio
async def test_create_client_with_contacts(make_client):
    client = await make_client(
        contacts=[
            {"name": "Dana Reyes", "role": "Owner", "email": "dana@bayside.example", "isPrimary": True},
            {"name": "Sam Ito", "type": "technical"},
        ]
    )

    assert client["name"] == "Bayside Dental"
    assert client["status"] == "active"
    assert {c["name"] for c in client["contacts"]} == {"Dana Reyes", "Sam Ito"}
    assert all(c["clientId"] == client["id"] for c in client["contacts"])
    assert client["services"] == []
    assert client["tickets"] == []


@pytest.mark.asyncio
async def test_create_client_requires_name(test_client):
    response = await test_client.post("/api/clients", json={"industry": "Retail"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "validation_error"
    assert body["error"]["path"] == "/api/clients"


@pytest.mark.asyncio
async def test_list_embeds_only_open_tickets(test_client, make_client, make_service):
    client = await make_client()
    await make_service(client["id"])
    ticket_ids = []
    for title in ("Site down", "Renew SSL"):
        response = await test_client.post(
            "/api/tickets",
            json={
                "title": title,
                "description": "Needs attention",
                "type": "incident",
                "priority": "high",
                "clientId": client["id"],
                "services": ["Website Maintenance"],
            },
        )
        ticket_ids.append(response.json()["id"])
    await test_client.put(f"/api/tickets/{ticket_ids[1]}", json={"status": "closed"})

    listing = (await test_client.get("/api/clients")).json()
    detail = (await test_client.get(f"/api/clients/{client['id']}")).json()

    assert listing["total"] == 1
    assert [t["title"] for t in listing["items"][0]["tickets"]] == ["Site down"]
    assert {t["title"] for t in detail["tickets"]} == {"Site down", "Renew SSL"}
    assert [s["name"] for s in detail["services"]] == ["Website Maintenance"]


@pytest.mark.asyncio
async def test_list_filters_by_status(test_client, make_client):
    await make_client("Active Co")
    await make_client("Maybe Co", status="prospect")

    everything = (await test_client.get("/api/clients", params={"status": "all"})).json()
    prospects = (await test_client.get("/api/clients", params={"status": "prospect"})).json()

    assert everything["total"] == 2
    assert [c["name"] for c in prospects["items"]] == ["Maybe Co"]


@pytest.mark.asyncio
async def test_update_client(test_client, make_client):
    client = await make_client()

    response = await test_client.put(
        f"/api/clients/{client['id']}",
        json={"healthScore": 87.5, "status": "inactive"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["healthScore"] == 87.5
    assert data["status"] == "inactive"
    assert data["name"] == "Bayside Dental"


@pytest.mark.asyncio
async def test_update_missing_client(test_client):
    response = await test_client.put("/api/clients/999", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


@pytest.mark.asyncio
async def test_delete_client_cascades(test_client, make_client, make_service):
    client = await make_client()
    service = await make_service(client["id"])

    response = await test_client.delete(f"/api/clients/{client['id']}")

    assert response.status_code == 204
    assert (await test_client.get(f"/api/clients/{client['id']}")).status_code == 404
    assert (await test_client.get(f"/api/services/{service['id']}")).status_code == 404
    assert (await test_client.delete(f"/api/clients/{client['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_onboard_client(test_client):
    payload = {
        "companyInfo": {"name": "Acme Dental", "website": "https://acme.example", "industry": "Healthcare"},
        "contacts": {
            "primary": {"name": "Lee Park", "email": "lee@acme.example"},
            "technical": {"name": "Ray Chen", "role": "IT"},
        },
        "selectedServices": [
            {
                "id": "website-maintenance",
                "name": "Website Maintenance",
                "description": "Hosting and updates",
                "basePrice": 99,
                "priceRange": {"min": 79, "max": 149},
            },
            {"id": "seo-management", "name": "SEO Management", "basePrice": 300, "included": False},
        ],
    }

    response = await test_client.post("/api/clients/onboard", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Acme Dental"
    contacts = {c["type"]: c for c in data["contacts"]}
    assert contacts["primary"]["isPrimary"] is True
    assert contacts["technical"]["name"] == "Ray Chen"
    assert len(data["services"]) == 1
    service = data["services"][0]
    assert service["type"] == "website-maintenance"
    assert service["costPerUnit"] == 99
    assert service["priceRangeMin"] == 79


@pytest.mark.asyncio
async def test_onboard_without_technical_contact(test_client):
    payload = {
        "companyInfo": {"name": "Solo Shop"},
        "contacts": {"primary": {"name": "Kim"}},
    }

    response = await test_client.post("/api/clients/onboard", json=payload)

    assert response.status_code == 201
    assert [c["type"] for c in response.json()["contacts"]] == ["primary"]


@pytest.mark.asyncio
async def test_nested_services_are_scoped_to_client(test_client, make_client, make_service):
    owner = await make_client("Owner")
    other = await make_client("Other")
    service = await make_service(owner["id"])

    own = await test_client.get(f"/api/clients/{owner['id']}/services/{service['id']}")
    foreign = await test_client.get(f"/api/clients/{other['id']}/services/{service['id']}")
    listing = (await test_client.get(f"/api/clients/{other['id']}/services")).json()

    assert own.status_code == 200
    assert own.json()["client"]["name"] == "Owner"
    assert foreign.status_code == 404
    assert listing["total"] == 0


@pytest.mark.asyncio
async def test_nested_service_update_and_delete(test_client, make_client, make_service):
    client = await make_client()
    service = await make_service(client["id"])
    url = f"/api/clients/{client['id']}/services/{service['id']}"

    updated = await test_client.put(url, json={"capacityLimit": 500, "status": "degraded"})
    assert updated.status_code == 200
    assert updated.json()["capacityLimit"] == 500
    assert updated.json()["status"] == "degraded"

    assert (await test_client.delete(url)).status_code == 204
    assert (await test_client.get(url)).status_code == 404


@pytest.mark.asyncio
async def test_service_for_missing_client(test_client):
    response = await test_client.post(
        "/api/clients/404/services",
        json={"name": "Orphan", "type": "website-maintenance"},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_null_for_required_field_is_rejected(test_client, make_client, make_service):
    client = await make_client()
    service = await make_service(client["id"])

    client_response = await test_client.put(f"/api/clients/{client['id']}", json={"name": None})
    service_response = await test_client.put(f"/api/services/{service['id']}", json={"name": None})
    nested_response = await test_client.put(
        f"/api/clients/{client['id']}/services/{service['id']}",
        json={"status": None},
    )

    for response in (client_response, service_response, nested_response):
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"
    assert (await test_client.get(f"/api/clients/{client['id']}")).json()["name"] == "Bayside Dental"


@pytest.mark.asyncio
async def test_null_clears_optional_field(test_client, make_client):
    client = await make_client(website="https://bayside.example")

    response = await test_client.put(f"/api/clients/{client['id']}", json={"website": None})

    assert response.status_code == 200
    assert response.json()["website"] is None
