"""
Ticket repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, insert
from sqlalchemy.orm import selectinload

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.ticket import Ticket, TicketStatus, TicketPriority, ticket_services


class TicketRepository(BaseRepository[Ticket]):
    """Repository for ticket operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Ticket, session)

    def _base_query(self):
        """Base query with the client and linked services loaded."""
        return select(Ticket).options(
            selectinload(Ticket.client),
            selectinload(Ticket.services),
        )

    async def get_with_relations(self, ticket_id: int) -> Optional[Ticket]:
        result = await self.session.execute(
            self._base_query()
            .where(Ticket.id == ticket_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        client_id: Optional[int] = None,
        status: Optional[TicketStatus] = None,
        priority: Optional[TicketPriority] = None,
        type: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> List[Ticket]:
        """List tickets newest first."""
        query = self._base_query()
        if client_id is not None:
            query = query.where(Ticket.client_id == client_id)
        if status is not None:
            query = query.where(Ticket.status == status)
        if priority is not None:
            query = query.where(Ticket.priority == priority)
        if type is not None:
            query = query.where(Ticket.type == type)
        if assignee is not None:
            query = query.where(Ticket.assignee == assignee)
        query = query.order_by(Ticket.created_at.desc(), Ticket.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def replace_services(self, ticket_id: int, service_ids: List[int]) -> None:
        """Replace every service link of a ticket."""
        await self.session.execute(
            delete(ticket_services).where(ticket_services.c.ticket_id == ticket_id)
        )
        if service_ids:
            await self.session.execute(
                insert(ticket_services),
                [{"ticket_id": ticket_id, "service_id": service_id} for service_id in service_ids],
            )
        await self.session.flush()
