"""
Client Pydantic schemas for request/response validation.
"""

from pydantic import Field
from typing import Optional, List
from datetime import datetime

from graybay.models.client import ClientStatus, ContactType
from graybay.models.ticket import TicketStatus, TicketPriority
from graybay.schemas.base import APIModel, UpdateModel
from graybay.schemas.service import ServiceResponse


class ContactBase(APIModel):
    """Base contact schema."""
    name: str = Field(..., min_length=1, max_length=255)
    role: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    is_primary: bool = False
    type: ContactType = ContactType.PRIMARY


class ContactCreate(ContactBase):
    """Schema for creating a contact together with its client."""
    pass


class ContactResponse(ContactBase):
    """Schema for contact response."""
    id: int
    client_id: int


class ClientTicketSummary(APIModel):
    """Ticket as embedded in a client response."""
    id: int
    title: str
    status: TicketStatus
    priority: TicketPriority
    type: Optional[str] = None
    assignee: Optional[str] = None
    created_at: datetime


class ClientBase(APIModel):
    """Base client schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    website: Optional[str] = Field(None, max_length=255)
    industry: Optional[str] = Field(None, max_length=100)
    size: Optional[str] = Field(None, max_length=50)
    status: ClientStatus = ClientStatus.ACTIVE
    health_score: Optional[float] = Field(None, ge=0, le=100)
    monthly_revenue: Optional[float] = Field(None, ge=0)


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    contacts: List[ContactCreate] = []


class ClientUpdate(UpdateModel):
    """Schema for updating a client (all fields optional)."""
    non_nullable = ("name", "status")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    website: Optional[str] = Field(None, max_length=255)
    industry: Optional[str] = Field(None, max_length=100)
    size: Optional[str] = Field(None, max_length=50)
    status: Optional[ClientStatus] = None
    health_score: Optional[float] = Field(None, ge=0, le=100)
    monthly_revenue: Optional[float] = Field(None, ge=0)


class ClientResponse(ClientBase):
    """Schema for client response with its nested includes."""
    id: int
    created_at: datetime
    updated_at: datetime
    services: List[ServiceResponse] = []
    contacts: List[ContactResponse] = []
    tickets: List[ClientTicketSummary] = []


class ClientListResponse(APIModel):
    """Schema for client list response."""
    items: List[ClientResponse]
    total: int
