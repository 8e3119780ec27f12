"""
Invoice model: a billed amount owed by a client.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, Text, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from graybay.db.base import Base
from graybay.models.common import enum_values
from graybay.utils.dates import utcnow


class InvoiceStatus(str, enum.Enum):
    """Invoice status enumeration."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    CANCELLED = "cancelled"


class InvoiceType(str, enum.Enum):
    """Invoice billing type."""
    MONTHLY = "monthly"
    ONE_TIME = "one-time"
    CUSTOM = "custom"


INVOICE_TRANSITIONS = {
    InvoiceStatus.DRAFT: {InvoiceStatus.SENT, InvoiceStatus.CANCELLED},
    InvoiceStatus.SENT: {InvoiceStatus.PAID, InvoiceStatus.CANCELLED},
    InvoiceStatus.PAID: set(),
    InvoiceStatus.CANCELLED: set(),
}


class Invoice(Base):
    """Invoice model, addressed by its invoice number."""

    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    invoice_number = Column(String(50), nullable=False, unique=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    amount = Column(Float, nullable=False, default=0)
    subtotal = Column(Float, nullable=False, default=0)
    tax = Column(Float, nullable=False, default=0)
    tax_rate = Column(Float, nullable=False, default=0)
    status = Column(
        SQLEnum(InvoiceStatus, name="invoice_status", values_callable=enum_values),
        nullable=False,
        default=InvoiceStatus.DRAFT,
        index=True,
    )
    type = Column(
        SQLEnum(InvoiceType, name="invoice_type", values_callable=enum_values),
        nullable=False,
        default=InvoiceType.CUSTOM,
        index=True,
    )
    issue_date = Column(DateTime, nullable=False, default=utcnow)
    due_date = Column(DateTime, nullable=False)
    paid_date = Column(DateTime, nullable=True)
    payment_method = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    client = relationship("Client", back_populates="invoices")
    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="InvoiceItem.id",
    )


class InvoiceItem(Base):
    """Priced line of an invoice."""

    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    quantity = Column(Float, nullable=False, default=1)
    unit_price = Column(Float, nullable=False, default=0)
    custom_price = Column(Float, nullable=True)
    discount = Column(Float, nullable=True)
    total = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    invoice = relationship("Invoice", back_populates="items")
