"""
Ticket schemas.
Responses are shaped for the ticket board: string ids, ISO timestamps,
client name and linked service names inlined.
"""

from pydantic import Field
from typing import Optional, List
from datetime import date

from graybay.models.ticket import Ticket, TicketStatus, TicketPriority
from graybay.schemas.base import APIModel
from graybay.utils.dates import format_date, format_timestamp


class TicketCreate(APIModel):
    """Schema for creating a ticket."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=50)
    priority: TicketPriority
    client_id: int
    services: List[str] = Field(..., min_length=1)
    assignee: Optional[str] = Field(None, max_length=255)
    impact: Optional[str] = Field(None, max_length=50)
    scheduled_for: Optional[date] = None


class TicketUpdate(APIModel):
    """Schema for updating a ticket (all fields optional)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    services: Optional[List[str]] = None
    assignee: Optional[str] = Field(None, max_length=255)
    impact: Optional[str] = Field(None, max_length=50)
    scheduled_for: Optional[date] = None


class TicketResponse(APIModel):
    """Ticket as shown on the ticket board."""
    id: str
    title: str
    description: Optional[str] = None
    status: TicketStatus
    priority: TicketPriority
    type: Optional[str] = None
    client_id: int
    client_name: Optional[str] = None
    assignee: Optional[str] = None
    impact: Optional[str] = None
    created_at: str
    updated_at: str
    scheduled_for: Optional[str] = None
    services: List[str] = []

    @classmethod
    def from_model(cls, ticket: Ticket) -> "TicketResponse":
        """Build the view from a ticket loaded with its client and services."""
        return cls(
            id=str(ticket.id),
            title=ticket.title,
            description=ticket.description,
            status=ticket.status,
            priority=ticket.priority,
            type=ticket.type,
            client_id=ticket.client_id,
            client_name=ticket.client.name if ticket.client else None,
            assignee=ticket.assignee,
            impact=ticket.impact,
            created_at=format_timestamp(ticket.created_at),
            updated_at=format_timestamp(ticket.updated_at),
            scheduled_for=format_date(ticket.scheduled_for),
            services=[service.name for service in ticket.services],
        )


class TicketListResponse(APIModel):
    """Schema for ticket list response."""
    items: List[TicketResponse]
    total: int
