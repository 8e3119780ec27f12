"""
Support ticket model.
"""

from sqlalchemy import Column, Integer, String, DateTime, Date, Text, ForeignKey, Table, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from graybay.db.base import Base
from graybay.models.common import enum_values
from graybay.utils.dates import utcnow


class TicketStatus(str, enum.Enum):
    """Ticket status enumeration."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"


class TicketPriority(str, enum.Enum):
    """Ticket priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


TICKET_TRANSITIONS = {
    TicketStatus.OPEN: {TicketStatus.IN_PROGRESS, TicketStatus.CLOSED},
    TicketStatus.IN_PROGRESS: {TicketStatus.OPEN, TicketStatus.CLOSED},
    TicketStatus.CLOSED: {TicketStatus.OPEN},
}


ticket_services = Table(
    "ticket_services",
    Base.metadata,
    Column("ticket_id", Integer, ForeignKey("tickets.id", ondelete="CASCADE"), primary_key=True),
    Column("service_id", Integer, ForeignKey("services.id", ondelete="CASCADE"), primary_key=True),
)


class Ticket(Base):
    """Support ticket raised for a client."""

    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        SQLEnum(TicketStatus, name="ticket_status", values_callable=enum_values),
        nullable=False,
        default=TicketStatus.OPEN,
        index=True,
    )
    priority = Column(
        SQLEnum(TicketPriority, name="ticket_priority", values_callable=enum_values),
        nullable=False,
        default=TicketPriority.MEDIUM,
        index=True,
    )
    type = Column(String(50), nullable=True, index=True)
    assignee = Column(String(255), nullable=True, index=True)
    impact = Column(String(50), nullable=True)
    scheduled_for = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    client = relationship("Client", back_populates="tickets")
    services = relationship("Service", secondary=ticket_services, passive_deletes=True)
