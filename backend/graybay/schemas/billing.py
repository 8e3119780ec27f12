"""
Billing statistics schemas.
"""

from typing import Optional, List

from graybay.models.invoice import InvoiceStatus, InvoiceType
from graybay.models.quote import QuoteStatus
from graybay.schemas.base import APIModel


class RecentQuote(APIModel):
    id: str
    title: str
    amount: float
    status: QuoteStatus
    valid_until: Optional[str] = None
    created_at: Optional[str] = None


class RecentInvoice(APIModel):
    id: str
    invoice_number: str
    title: str
    amount: float
    status: InvoiceStatus
    type: InvoiceType
    due_date: Optional[str] = None
    created_at: Optional[str] = None


class BillingStatsResponse(APIModel):
    """
    Billing rollup. Client-only fields are omitted from the response
    unless the stats were requested for one client.
    """
    total_revenue: float
    monthly_recurring: float
    pending_invoices: float
    overdue_invoices: float
    active_quotes: int
    conversion_rate: float
    total_clients: int
    total_paid: Optional[float] = None
    pending_amount: Optional[float] = None
    recent_quotes: Optional[List[RecentQuote]] = None
    recent_invoices: Optional[List[RecentInvoice]] = None
