"""
Billing statistics tests: the pure fold and the endpoint.
"""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from graybay.models.invoice import InvoiceStatus, InvoiceType
from graybay.models.quote import QuoteStatus
from graybay.services.billing_service import compute_billing_stats

NOW = datetime(2026, 6, 15, 12, 0, 0)


def invoice(id, amount, status, type=InvoiceType.CUSTOM, client_id=1, due_in_days=10, created_days_ago=0):
    return SimpleNamespace(
        id=id,
        invoice_number=f"INV-202606-{id:03d}",
        title=f"Invoice {id}",
        client_id=client_id,
        amount=amount,
        status=status,
        type=type,
        due_date=NOW + timedelta(days=due_in_days),
        created_at=NOW - timedelta(days=created_days_ago),
    )


def quote(id, total, status, client_id=1, valid_in_days=30, created_days_ago=0):
    return SimpleNamespace(
        id=id,
        quote_number=f"Q-{id:06d}",
        title=f"Quote {id}",
        client_id=client_id,
        total=total,
        status=status,
        valid_until=NOW + timedelta(days=valid_in_days),
        created_at=NOW - timedelta(days=created_days_ago),
    )


def test_empty_rows():
    stats = compute_billing_stats([], [], NOW)

    assert stats.total_revenue == 0
    assert stats.pending_invoices == 0
    assert stats.active_quotes == 0
    assert stats.conversion_rate == 0
    assert stats.total_clients == 0
    assert stats.recent_quotes is None


def test_invoice_sums():
    invoices = [
        invoice(1, 100, InvoiceStatus.PAID, type=InvoiceType.MONTHLY),
        invoice(2, 250, InvoiceStatus.SENT, type=InvoiceType.MONTHLY),
        invoice(3, 40, InvoiceStatus.SENT, due_in_days=-3),
        invoice(4, 999, InvoiceStatus.CANCELLED, type=InvoiceType.MONTHLY),
        invoice(5, 70, InvoiceStatus.DRAFT, client_id=2),
    ]

    stats = compute_billing_stats(invoices, [], NOW)

    assert stats.total_revenue == 100
    assert stats.monthly_recurring == 350
    assert stats.pending_invoices == 290
    assert stats.overdue_invoices == 40
    assert stats.total_clients == 2


def test_conversion_rate_rounds_half_up_to_one_decimal():
    quotes = [
        quote(1, 10, QuoteStatus.ACCEPTED),
        quote(2, 10, QuoteStatus.SENT),
        quote(3, 10, QuoteStatus.SENT),
        quote(4, 10, QuoteStatus.SENT),
    ]

    stats = compute_billing_stats([], quotes, NOW)

    assert stats.conversion_rate == 33.3


def test_conversion_rate_is_zero_without_sent_quotes():
    stats = compute_billing_stats([], [quote(1, 10, QuoteStatus.ACCEPTED)], NOW)

    assert stats.conversion_rate == 0


def test_active_quotes_exclude_expired_validity():
    quotes = [
        quote(1, 10, QuoteStatus.SENT, valid_in_days=5),
        quote(2, 10, QuoteStatus.SENT, valid_in_days=-1),
        quote(3, 10, QuoteStatus.DRAFT, valid_in_days=5),
    ]

    stats = compute_billing_stats([], quotes, NOW)

    assert stats.active_quotes == 1


def test_client_scope_adds_client_fields():
    invoices = [invoice(i, 10 * i, InvoiceStatus.PAID, created_days_ago=i) for i in range(1, 6)]
    quotes = [quote(i, 5 * i, QuoteStatus.DRAFT, created_days_ago=i) for i in range(1, 5)]

    stats = compute_billing_stats(invoices, quotes, NOW, client_id=1)

    assert stats.total_clients == 1
    assert stats.total_paid == 150
    assert stats.pending_amount == 0
    assert [q.id for q in stats.recent_quotes] == ["Q-000001", "Q-000002", "Q-000003"]
    assert [i.invoice_number for i in stats.recent_invoices] == [
        "INV-202606-001",
        "INV-202606-002",
        "INV-202606-003",
    ]


@pytest.mark.asyncio
async def test_billing_stats_endpoint(test_client, make_client):
    client = await make_client()
    created = await test_client.post(
        "/api/invoices",
        json={
            "clientId": client["id"],
            "title": "June hosting",
            "type": "monthly",
            "dueDate": "2099-01-31",
            "items": [{"productId": "website-maintenance", "quantity": 1}],
        },
    )
    number = created.json()["id"]
    await test_client.put(f"/api/invoices/{number}", json={"status": "sent"})

    response = await test_client.get("/api/billing/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["pendingInvoices"] == 99
    assert data["monthlyRecurring"] == 99
    assert data["totalClients"] == 1
    assert "totalPaid" not in data

    scoped = (await test_client.get("/api/billing/stats", params={"clientId": client["id"]})).json()
    assert scoped["pendingAmount"] == 99
    assert scoped["totalPaid"] == 0
    assert scoped["recentInvoices"][0]["id"] == number
