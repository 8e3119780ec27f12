"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from graybay.models.client import Client, ClientStatus, Contact, ContactType
from graybay.models.service import Service, ServiceMetric, ResourceAllocation
from graybay.models.ticket import Ticket, TicketStatus, TicketPriority, ticket_services
from graybay.models.quote import Quote, QuoteItem, QuoteStatus
from graybay.models.invoice import Invoice, InvoiceItem, InvoiceStatus, InvoiceType
from graybay.models.template import Template
from graybay.models.activity import Activity
from graybay.models.potential_client import PotentialClient

__all__ = [
    "Client",
    "ClientStatus",
    "Contact",
    "ContactType",
    "Service",
    "ServiceMetric",
    "ResourceAllocation",
    "Ticket",
    "TicketStatus",
    "TicketPriority",
    "ticket_services",
    "Quote",
    "QuoteItem",
    "QuoteStatus",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "InvoiceType",
    "Template",
    "Activity",
    "PotentialClient",
]
