"""
Billing service.
Folds invoice and quote rows into the dashboard billing stats.
"""

from datetime import datetime
from typing import Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.logging import get_logger
from graybay.db.repositories.invoice_repository import InvoiceRepository
from graybay.db.repositories.quote_repository import QuoteRepository
from graybay.models.invoice import Invoice, InvoiceStatus, InvoiceType
from graybay.models.quote import Quote, QuoteStatus
from graybay.schemas.billing import BillingStatsResponse, RecentInvoice, RecentQuote
from graybay.services.base_service import BaseService
from graybay.utils.dates import format_date, utcnow
from graybay.utils.numbers import round_half_up

logger = get_logger(__name__)

RECENT_LIMIT = 3


def _newest(rows: Sequence, limit: int = RECENT_LIMIT) -> list:
    return sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)[:limit]


def compute_billing_stats(
    invoices: Sequence[Invoice],
    quotes: Sequence[Quote],
    now: datetime,
    client_id: Optional[int] = None,
) -> BillingStatsResponse:
    """
    Aggregate billing figures over the given rows.

    The rows must already be restricted to `client_id` when one is given;
    the client-only fields are filled in only in that case.
    """
    total_revenue = sum(inv.amount for inv in invoices if inv.status == InvoiceStatus.PAID)
    monthly_recurring = sum(
        inv.amount
        for inv in invoices
        if inv.type == InvoiceType.MONTHLY and inv.status != InvoiceStatus.CANCELLED
    )
    pending = sum(inv.amount for inv in invoices if inv.status == InvoiceStatus.SENT)
    overdue = sum(
        inv.amount
        for inv in invoices
        if inv.status == InvoiceStatus.SENT and inv.due_date < now
    )
    active_quotes = sum(
        1 for quote in quotes if quote.status == QuoteStatus.SENT and quote.valid_until > now
    )

    accepted = sum(1 for quote in quotes if quote.status == QuoteStatus.ACCEPTED)
    sent = sum(1 for quote in quotes if quote.status == QuoteStatus.SENT)
    conversion_rate = round_half_up(accepted / sent * 100, 1) if sent else 0.0

    if client_id is not None:
        total_clients = 1
    else:
        total_clients = len({inv.client_id for inv in invoices} | {quote.client_id for quote in quotes})

    stats = BillingStatsResponse(
        total_revenue=total_revenue,
        monthly_recurring=monthly_recurring,
        pending_invoices=pending,
        overdue_invoices=overdue,
        active_quotes=active_quotes,
        conversion_rate=conversion_rate,
        total_clients=total_clients,
    )

    if client_id is not None:
        stats.total_paid = total_revenue
        stats.pending_amount = pending
        stats.recent_quotes = [
            RecentQuote(
                id=quote.quote_number,
                title=quote.title,
                amount=quote.total,
                status=quote.status,
                valid_until=format_date(quote.valid_until),
                created_at=format_date(quote.created_at),
            )
            for quote in _newest(quotes)
        ]
        stats.recent_invoices = [
            RecentInvoice(
                id=invoice.invoice_number,
                invoice_number=invoice.invoice_number,
                title=invoice.title,
                amount=invoice.amount,
                status=invoice.status,
                type=invoice.type,
                due_date=format_date(invoice.due_date),
                created_at=format_date(invoice.created_at),
            )
            for invoice in _newest(invoices)
        ]

    return stats


class BillingService(BaseService):
    """Service for billing statistics."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.invoice_repo = InvoiceRepository(session)
        self.quote_repo = QuoteRepository(session)

    async def get_stats(self, client_id: Optional[int] = None) -> BillingStatsResponse:
        """Load invoices and quotes in scope and fold them."""
        invoices = await self.invoice_repo.list_filtered(client_id=client_id, with_items=False)
        quotes = await self.quote_repo.list_filtered(client_id=client_id, with_items=False)
        logger.debug(
            "Computing billing stats",
            extra={"client_id": client_id, "invoices": len(invoices), "quotes": len(quotes)},
        )
        return compute_billing_stats(invoices, quotes, utcnow(), client_id=client_id)
