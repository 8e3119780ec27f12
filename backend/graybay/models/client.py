"""
Client model for customer organizations and their contacts.
"""

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from graybay.db.base import Base
from graybay.models.common import enum_values
from graybay.utils.dates import utcnow


class ClientStatus(str, enum.Enum):
    """Client status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    PROSPECT = "prospect"


class ContactType(str, enum.Enum):
    """Role a contact plays for the client."""
    PRIMARY = "primary"
    TECHNICAL = "technical"
    BILLING = "billing"


class Client(Base):
    """Customer organization receiving IT services."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    website = Column(String(255), nullable=True)
    industry = Column(String(100), nullable=True)
    size = Column(String(50), nullable=True)
    status = Column(
        SQLEnum(ClientStatus, name="client_status", values_callable=enum_values),
        nullable=False,
        default=ClientStatus.ACTIVE,
    )
    health_score = Column(Float, nullable=True)
    monthly_revenue = Column(Float, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    contacts = relationship("Contact", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    services = relationship("Service", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    tickets = relationship("Ticket", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    quotes = relationship("Quote", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)
    invoices = relationship("Invoice", back_populates="client", cascade="all, delete-orphan", passive_deletes=True)


class Contact(Base):
    """Person at a client organization."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False)
    type = Column(
        SQLEnum(ContactType, name="contact_type", values_callable=enum_values),
        nullable=False,
        default=ContactType.PRIMARY,
    )

    client = relationship("Client", back_populates="contacts")
