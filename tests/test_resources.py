"""
Capacity metrics and recommendation tests.
"""

from types import SimpleNamespace

import pytest
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError

from graybay.models.potential_client import PotentialClient
from graybay.models.service import ResourceAllocation, Service
from graybay.schemas.service import ResourceAllocationCreate
from graybay.services.resource_service import (
    ResourceService,
    analyze_service,
    compute_resource_metrics,
)


def service(capacity_limit=100, current_usage=0, cost_per_unit=2.0):
    return SimpleNamespace(
        capacity_limit=capacity_limit,
        current_usage=current_usage,
        cost_per_unit=cost_per_unit,
    )


def allocation(allocated, used):
    return SimpleNamespace(allocated=allocated, used=used)


def test_high_usage_recommends_scaling():
    metrics, recommendations = analyze_service(service(current_usage=90), [allocation(100, 90)])

    assert metrics.usage_percentage == 90
    assert [r.type.value for r in recommendations] == ["scaling"]
    assert recommendations[0].impact.value == "high"
    assert recommendations[0].description == (
        "Current usage is at 90% of capacity. Consider increasing capacity by 20%."
    )


def test_exactly_at_threshold_does_not_scale():
    _, recommendations = analyze_service(service(current_usage=80), [])

    assert recommendations == []


def test_underutilized_allocations_recommend_optimization():
    allocations = [allocation(100, 50), allocation(10, 9), allocation(20, 5)]

    _, recommendations = analyze_service(service(current_usage=10, cost_per_unit=1.5), allocations)

    assert [r.type.value for r in recommendations] == ["optimization"]
    optimization = recommendations[0]
    assert optimization.impact.value == "medium"
    # (100 - 50 + 20 - 5) * 1.5 = 97.5, rounded half up
    assert optimization.estimated_savings == 98


def test_zero_allocated_is_not_underutilized():
    _, recommendations = analyze_service(service(current_usage=0), [allocation(0, 0)])

    assert recommendations == []


def test_zero_capacity_reports_zero_usage():
    metrics, recommendations = analyze_service(service(capacity_limit=0, current_usage=50), [])

    assert metrics.usage_percentage == 0
    assert recommendations == []


def test_missing_capacity_and_cost_default_to_zero():
    metrics = compute_resource_metrics(service(capacity_limit=None, current_usage=None, cost_per_unit=None), [])

    assert metrics.total_capacity == 0
    assert metrics.current_usage == 0
    assert metrics.cost_per_unit == 0


def test_average_and_peak_over_allocations():
    metrics = compute_resource_metrics(service(), [allocation(100, 30), allocation(100, 60), allocation(100, 90)])

    assert metrics.average_usage == 60
    assert metrics.peak_usage == 90


def test_no_allocations_gives_zero_average_and_peak():
    metrics = compute_resource_metrics(service(), [])

    assert metrics.average_usage == 0
    assert metrics.peak_usage == 0


@pytest.mark.asyncio
async def test_allocation_then_resources_report(test_client, test_database, make_client, make_service):
    client = await make_client()
    svc = await make_service(client["id"], capacityLimit=100, currentUsage=0, costPerUnit=2)

    async with test_database.session() as session:
        session.add_all([
            PotentialClient(name="Likely", interested_services='["website-maintenance"]', probability=0.9),
            PotentialClient(name="Maybe", interested_services='["website-maintenance", "seo"]', probability=0.3),
            PotentialClient(name="Other", interested_services='["chatbot-management"]', probability=0.99),
        ])

    created = await test_client.post(
        f"/api/services/{svc['id']}/resources",
        json={"allocated": 100, "used": 90, "cost": 180},
    )
    assert created.status_code == 201
    assert created.json()["client"]["name"] == client["name"]

    response = await test_client.get(f"/api/services/{svc['id']}/resources")

    assert response.status_code == 200
    data = response.json()
    assert data["service"]["currentUsage"] == 90
    assert data["resourceMetrics"]["usagePercentage"] == 90
    assert [r["type"] for r in data["recommendations"]] == ["scaling"]
    assert data["recommendations"][0]["impact"] == "high"
    assert [p["name"] for p in data["potentialClients"]] == ["Likely", "Maybe"]
    assert len(data["service"]["resourceAllocations"]) == 1


@pytest.mark.asyncio
async def test_resources_for_missing_service(test_client):
    response = await test_client.get("/api/services/999/resources")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


@pytest.mark.asyncio
async def test_allocation_rolls_back_when_usage_update_fails(
    test_database, make_client, make_service, monkeypatch
):
    client = await make_client()
    svc = await make_service(client["id"], capacityLimit=100, currentUsage=5)

    async def failing_set_current_usage(self, service_id, current_usage):
        raise SQLAlchemyError("usage update failed")

    monkeypatch.setattr(
        "graybay.db.repositories.service_repository.ServiceRepository.set_current_usage",
        failing_set_current_usage,
    )

    async with test_database.session_maker() as session:
        with pytest.raises(SQLAlchemyError):
            await ResourceService(session).record_allocation(
                svc["id"], ResourceAllocationCreate(allocated=100, used=70)
            )

    async with test_database.session_maker() as session:
        count = await session.scalar(select(func.count()).select_from(ResourceAllocation))
        usage = await session.scalar(select(Service.current_usage).where(Service.id == svc["id"]))

    assert count == 0
    assert usage == 5


@pytest.mark.asyncio
async def test_recorded_metrics_show_on_service(test_client, make_client, make_service):
    client = await make_client()
    service = await make_service(client["id"])

    for value in (41.0, 57.5):
        response = await test_client.post(
            f"/api/services/{service['id']}/metrics",
            json={"name": "cpu", "value": value, "unit": "%", "status": "ok"},
        )
        assert response.status_code == 201

    detail = (await test_client.get(f"/api/services/{service['id']}")).json()
    missing = await test_client.post("/api/services/999/metrics", json={"name": "cpu", "value": 1})

    assert [m["value"] for m in detail["metrics"]] == [57.5, 41.0]
    assert detail["client"]["name"] == client["name"]
    assert missing.status_code == 404
