"""
Quote model: an itemized price offer to a client.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, Text, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from graybay.db.base import Base
from graybay.models.common import enum_values
from graybay.utils.dates import utcnow


class QuoteStatus(str, enum.Enum):
    """Quote status enumeration."""
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    EXPIRED = "expired"


QUOTE_TRANSITIONS = {
    QuoteStatus.DRAFT: {QuoteStatus.SENT, QuoteStatus.EXPIRED},
    QuoteStatus.SENT: {QuoteStatus.DRAFT, QuoteStatus.ACCEPTED, QuoteStatus.EXPIRED},
    QuoteStatus.ACCEPTED: set(),
    QuoteStatus.EXPIRED: {QuoteStatus.DRAFT},
}


class Quote(Base):
    """Quote model, addressed by its quote number."""

    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    quote_number = Column(String(50), nullable=False, unique=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    subtotal = Column(Float, nullable=False, default=0)
    tax = Column(Float, nullable=False, default=0)
    tax_rate = Column(Float, nullable=False, default=0)
    total = Column(Float, nullable=False, default=0)
    status = Column(
        SQLEnum(QuoteStatus, name="quote_status", values_callable=enum_values),
        nullable=False,
        default=QuoteStatus.DRAFT,
        index=True,
    )
    valid_until = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    client = relationship("Client", back_populates="quotes")
    items = relationship(
        "QuoteItem",
        back_populates="quote",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="QuoteItem.id",
    )


class QuoteItem(Base):
    """Priced line of a quote; recomputed on every quote update."""

    __tablename__ = "quote_items"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    quote_id = Column(Integer, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    quantity = Column(Float, nullable=False, default=1)
    unit_price = Column(Float, nullable=False, default=0)
    custom_price = Column(Float, nullable=True)
    discount = Column(Float, nullable=True)
    total = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    quote = relationship("Quote", back_populates="items")
