"""
Invoice schemas. Invoices are addressed by their invoice number on the wire.
"""

from pydantic import Field
from typing import Optional, List
from datetime import date

from graybay.models.invoice import Invoice, InvoiceStatus, InvoiceType
from graybay.schemas.base import APIModel
from graybay.schemas.line_item import LineItemInput, LineItemResponse
from graybay.utils.dates import format_date


class InvoiceCreate(APIModel):
    """Schema for creating an invoice."""
    client_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: InvoiceType = InvoiceType.CUSTOM
    items: List[LineItemInput] = []
    issue_date: Optional[date] = None
    due_date: date
    payment_method: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None
    tax_rate: float = Field(0, ge=0, le=100)


class InvoiceUpdate(APIModel):
    """Schema for updating an invoice (all fields optional)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[InvoiceType] = None
    items: Optional[List[LineItemInput]] = None
    due_date: Optional[date] = None
    paid_date: Optional[date] = None
    payment_method: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None
    tax_rate: Optional[float] = Field(None, ge=0, le=100)
    status: Optional[InvoiceStatus] = None


class InvoiceResponse(APIModel):
    """Invoice view; `id` is the invoice number."""
    id: str
    client_id: int
    client_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    amount: float
    subtotal: float
    tax: float
    tax_rate: float
    status: InvoiceStatus
    type: InvoiceType
    issue_date: Optional[str] = None
    due_date: Optional[str] = None
    paid_date: Optional[str] = None
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    items: List[LineItemResponse] = []

    @classmethod
    def from_model(cls, invoice: Invoice) -> "InvoiceResponse":
        """Build the view from an invoice loaded with its client and items."""
        return cls(
            id=invoice.invoice_number,
            client_id=invoice.client_id,
            client_name=invoice.client.name if invoice.client else None,
            title=invoice.title,
            description=invoice.description,
            amount=invoice.amount,
            subtotal=invoice.subtotal,
            tax=invoice.tax,
            tax_rate=invoice.tax_rate,
            status=invoice.status,
            type=invoice.type,
            issue_date=format_date(invoice.issue_date),
            due_date=format_date(invoice.due_date),
            paid_date=format_date(invoice.paid_date),
            payment_method=invoice.payment_method,
            notes=invoice.notes,
            created_at=format_date(invoice.created_at),
            items=[LineItemResponse.model_validate(item) for item in invoice.items],
        )


class InvoiceListResponse(APIModel):
    """Schema for invoice list response."""
    items: List[InvoiceResponse]
    total: int
