"""
Template CRUD tests.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError


@pytest.mark.asyncio
async def test_template_crud(test_client):
    created = await test_client.post(
        "/api/templates",
        json={"name": "Onboarding email", "author": "Jo", "status": "draft", "content": "Welcome!"},
    )
    assert created.status_code == 201
    template = created.json()

    fetched = await test_client.get(f"/api/templates/{template['id']}")
    assert fetched.json()["content"] == "Welcome!"

    updated = await test_client.put(f"/api/templates/{template['id']}", json={"status": "published"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "published"
    assert updated.json()["name"] == "Onboarding email"

    deleted = await test_client.delete(f"/api/templates/{template['id']}")
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/templates/{template['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_template_activities(test_client):
    template = (await test_client.post("/api/templates", json={"name": "Invoice footer", "author": "Jo"})).json()
    await test_client.put(f"/api/templates/{template['id']}", json={"author": "Sam"})
    await test_client.delete(f"/api/templates/{template['id']}")

    feed = (await test_client.get("/api/activities", params={"type": "template"})).json()["items"]

    assert {(a["description"], a["user"]) for a in feed} == {
        ('Template "Invoice footer" created', "Jo"),
        ('Template "Invoice footer" updated', "Sam"),
        ('Template "Invoice footer" deleted', "System"),
    }
    assert all(a["target"] == "Invoice footer" for a in feed)


@pytest.mark.asyncio
async def test_activity_failure_does_not_undo_template(test_client, monkeypatch):
    async def failing_create(self, **kwargs):
        raise SQLAlchemyError("activity table unavailable")

    monkeypatch.setattr(
        "graybay.db.repositories.activity_repository.ActivityRepository.create",
        failing_create,
    )

    response = await test_client.post("/api/templates", json={"name": "Resilient"})

    assert response.status_code == 201
    monkeypatch.undo()
    listing = (await test_client.get("/api/templates")).json()
    assert [t["name"] for t in listing["items"]] == ["Resilient"]
    assert (await test_client.get("/api/activities")).json()["total"] == 0


@pytest.mark.asyncio
async def test_list_newest_first(test_client):
    for name in ("First", "Second"):
        await test_client.post("/api/templates", json={"name": name})

    listing = (await test_client.get("/api/templates")).json()

    assert listing["total"] == 2
    assert [t["name"] for t in listing["items"]] == ["Second", "First"]


@pytest.mark.asyncio
async def test_missing_template(test_client):
    assert (await test_client.put("/api/templates/77", json={"name": "x"})).status_code == 404
    assert (await test_client.delete("/api/templates/77")).status_code == 404


@pytest.mark.asyncio
async def test_null_name_is_rejected(test_client):
    template = (await test_client.post("/api/templates", json={"name": "Welcome"})).json()

    response = await test_client.put(f"/api/templates/{template['id']}", json={"name": None})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "validation_error"
    assert (await test_client.get(f"/api/templates/{template['id']}")).json()["name"] == "Welcome"
