"""
Quote schemas. Quotes are addressed by their quote number on the wire.
"""

from pydantic import Field
from typing import Optional, List
from datetime import date

from graybay.core.catalog import is_recurring
from graybay.models.quote import Quote, QuoteStatus
from graybay.schemas.base import APIModel
from graybay.schemas.line_item import LineItemInput, LineItemResponse
from graybay.utils.dates import format_date


class QuoteCreate(APIModel):
    """Schema for creating a quote."""
    client_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    items: List[LineItemInput] = []
    valid_until: date
    notes: Optional[str] = None
    tax_rate: float = Field(0, ge=0, le=100)


class QuoteUpdate(APIModel):
    """
    Schema for updating a quote.
    Omitted items keep the stored lines; either way totals are recomputed.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    items: Optional[List[LineItemInput]] = None
    valid_until: Optional[date] = None
    notes: Optional[str] = None
    tax_rate: Optional[float] = Field(None, ge=0, le=100)
    status: Optional[QuoteStatus] = None


class QuoteResponse(APIModel):
    """Quote view; `id` is the quote number."""
    id: str
    client_id: int
    client_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    amount: float
    subtotal: float
    tax: float
    tax_rate: float
    monthly_amount: float
    status: QuoteStatus
    valid_until: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    items: List[LineItemResponse] = []

    @classmethod
    def from_model(cls, quote: Quote) -> "QuoteResponse":
        """Build the view from a quote loaded with its client and items."""
        items = list(quote.items)
        return cls(
            id=quote.quote_number,
            client_id=quote.client_id,
            client_name=quote.client.name if quote.client else None,
            title=quote.title,
            description=quote.description,
            amount=quote.total,
            subtotal=quote.subtotal,
            tax=quote.tax,
            tax_rate=quote.tax_rate,
            monthly_amount=sum(item.total for item in items if is_recurring(item.product_id)),
            status=quote.status,
            valid_until=format_date(quote.valid_until),
            notes=quote.notes,
            created_at=format_date(quote.created_at),
            items=[LineItemResponse.model_validate(item) for item in items],
        )


class QuoteListResponse(APIModel):
    """Schema for quote list response."""
    items: List[QuoteResponse]
    total: int
