"""
Ticket tests: service linking, board view, filters and the activity trail.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError


@pytest.fixture
def make_ticket(test_client):
    async def _make_ticket(client_id: int, **overrides) -> dict:
        payload = {
            "title": "Contact form broken",
            "description": "Submissions bounce",
            "type": "incident",
            "priority": "high",
            "clientId": client_id,
            "services": ["Website Maintenance"],
            **overrides,
        }
        response = await test_client.post("/api/tickets", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_ticket


@pytest.fixture
async def client_with_service(make_client, make_service):
    client = await make_client()
    await make_service(client["id"])
    return client


@pytest.mark.asyncio
async def test_ticket_view_shape(client_with_service, make_ticket):
    ticket = await make_ticket(client_with_service["id"], assignee="Alex", scheduledFor="2026-11-02")

    assert ticket["id"].isdigit()
    assert ticket["status"] == "open"
    assert ticket["clientName"] == "Bayside Dental"
    assert ticket["services"] == ["Website Maintenance"]
    assert ticket["scheduledFor"] == "2026-11-02"
    assert "T" in ticket["createdAt"]


@pytest.mark.asyncio
async def test_ticket_requires_a_service(test_client, client_with_service):
    response = await test_client.post(
        "/api/tickets",
        json={
            "title": "No services",
            "description": "Nothing linked",
            "type": "request",
            "priority": "low",
            "clientId": client_with_service["id"],
            "services": [],
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_service_name_is_rejected(test_client, client_with_service):
    response = await test_client.post(
        "/api/tickets",
        json={
            "title": "Wrong service",
            "description": "Typo in the name",
            "type": "request",
            "priority": "low",
            "clientId": client_with_service["id"],
            "services": ["Website Maintenance", "Quantum Hosting"],
        },
    )

    assert response.status_code == 422
    assert response.json()["error"]["details"]["services"] == ["Quantum Hosting"]
    assert (await test_client.get("/api/tickets")).json()["total"] == 0


@pytest.mark.asyncio
async def test_ticket_for_missing_client(test_client):
    response = await test_client.post(
        "/api/tickets",
        json={
            "title": "Ghost",
            "description": "No such client",
            "type": "request",
            "priority": "low",
            "clientId": 999,
            "services": ["Website Maintenance"],
        },
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_filters(test_client, client_with_service, make_ticket):
    await make_ticket(client_with_service["id"], priority="low", assignee="Alex")
    urgent = await make_ticket(client_with_service["id"], priority="critical", type="outage")

    everything = await test_client.get(
        "/api/tickets",
        params={"status": "all", "priority": "all", "type": "all", "assignee": "all"},
    )
    critical = await test_client.get("/api/tickets", params={"priority": "critical"})
    by_type = await test_client.get("/api/tickets", params={"type": "outage"})
    by_assignee = await test_client.get("/api/tickets", params={"assignee": "Alex"})

    assert everything.json()["total"] == 2
    assert [t["id"] for t in critical.json()["items"]] == [urgent["id"]]
    assert [t["id"] for t in by_type.json()["items"]] == [urgent["id"]]
    assert [t["assignee"] for t in by_assignee.json()["items"]] == ["Alex"]


@pytest.mark.asyncio
async def test_invalid_priority_filter(test_client):
    response = await test_client.get("/api/tickets", params={"priority": "urgent"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_status_transitions(test_client, client_with_service, make_ticket):
    ticket = await make_ticket(client_with_service["id"])
    url = f"/api/tickets/{ticket['id']}"

    assert (await test_client.put(url, json={"status": "in_progress"})).json()["status"] == "in_progress"
    assert (await test_client.put(url, json={"status": "closed"})).json()["status"] == "closed"

    blocked = await test_client.put(url, json={"status": "in_progress"})
    assert blocked.status_code == 409

    assert (await test_client.put(url, json={"status": "open"})).json()["status"] == "open"


@pytest.mark.asyncio
async def test_update_replaces_service_links(test_client, make_service, client_with_service, make_ticket):
    await make_service(client_with_service["id"], name="SEO Management", type="seo-management")
    ticket = await make_ticket(client_with_service["id"])
    url = f"/api/tickets/{ticket['id']}"

    replaced = await test_client.put(url, json={"services": ["SEO Management"]})
    untouched = await test_client.put(url, json={"services": [], "title": "Renamed"})

    assert replaced.json()["services"] == ["SEO Management"]
    assert untouched.json()["services"] == ["SEO Management"]
    assert untouched.json()["title"] == "Renamed"


@pytest.mark.asyncio
async def test_mutations_are_recorded_as_activities(test_client, client_with_service, make_ticket):
    assigned = await make_ticket(client_with_service["id"], title="Assigned", assignee="Alex")
    unassigned = await make_ticket(client_with_service["id"], title="Unassigned")
    await test_client.put(f"/api/tickets/{assigned['id']}", json={"priority": "low"})
    assert (await test_client.delete(f"/api/tickets/{unassigned['id']}")).status_code == 204

    feed = (await test_client.get("/api/activities", params={"type": "ticket"})).json()["items"]

    descriptions = {a["description"]: a["user"] for a in feed}
    assert descriptions == {
        'Ticket "Assigned" created': "Alex",
        'Ticket "Unassigned" created': "System",
        'Ticket "Assigned" updated': "Alex",
        'Ticket "Unassigned" deleted': "System",
    }
    assert all(a["status"] == "success" for a in feed)


@pytest.mark.asyncio
async def test_delete_missing_ticket(test_client):
    response = await test_client.delete("/api/tickets/12345")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_activity_failure_does_not_undo_ticket(test_client, client_with_service, monkeypatch):
    async def failing_create(self, **kwargs):
        raise SQLAlchemyError("activity table unavailable")

    monkeypatch.setattr(
        "graybay.db.repositories.activity_repository.ActivityRepository.create",
        failing_create,
    )

    response = await test_client.post(
        "/api/tickets",
        json={
            "title": "Printer offline",
            "description": "Office printer unreachable",
            "type": "incident",
            "priority": "medium",
            "clientId": client_with_service["id"],
            "services": ["Website Maintenance"],
        },
    )
    updated = await test_client.put(f"/api/tickets/{response.json()['id']}", json={"status": "closed"})

    assert response.status_code == 201
    assert updated.status_code == 200
    monkeypatch.undo()
    stored = (await test_client.get(f"/api/tickets/{response.json()['id']}")).json()
    assert stored["status"] == "closed"
    assert (await test_client.get("/api/activities")).json()["total"] == 0
