"""
Ticket controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.models.ticket import TicketStatus, TicketPriority
from graybay.services.ticket_service import TicketService
from graybay.schemas.ticket import TicketCreate, TicketUpdate, TicketResponse, TicketListResponse


class TicketController(BaseController):
    """Controller for ticket operations."""

    def __init__(self, session: AsyncSession):
        self.ticket_service = TicketService(session)

    async def list_tickets(
        self,
        client_id: Optional[int] = None,
        status: Optional[TicketStatus] = None,
        priority: Optional[TicketPriority] = None,
        type: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> TicketListResponse:
        tickets = await self.ticket_service.list_tickets(
            client_id=client_id,
            status=status,
            priority=priority,
            type=type,
            assignee=assignee,
        )
        return TicketListResponse(items=tickets, total=len(tickets))

    async def get_ticket(self, ticket_id: int) -> TicketResponse:
        return await self.ticket_service.get_ticket(ticket_id)

    async def create_ticket(self, ticket_data: TicketCreate) -> TicketResponse:
        return await self.ticket_service.create_ticket(ticket_data)

    async def update_ticket(self, ticket_id: int, ticket_data: TicketUpdate) -> TicketResponse:
        return await self.ticket_service.update_ticket(ticket_id, ticket_data)

    async def delete_ticket(self, ticket_id: int) -> None:
        await self.ticket_service.delete_ticket(ticket_id)
