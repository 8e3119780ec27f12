"""
Client repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.client import Client, ClientStatus, Contact
from graybay.models.ticket import Ticket, TicketStatus


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def list_with_overview(
        self,
        status: Optional[ClientStatus] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Client]:
        """List clients with services, contacts and only their open tickets."""
        query = (
            select(Client)
            .options(
                selectinload(Client.services),
                selectinload(Client.contacts),
                selectinload(Client.tickets.and_(Ticket.status == TicketStatus.OPEN)),
            )
            .order_by(Client.id)
            .execution_options(populate_existing=True)
        )
        if status is not None:
            query = query.where(Client.status == status)
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_with_details(self, client_id: int) -> Optional[Client]:
        """Get client with services, contacts and every ticket."""
        result = await self.session.execute(
            select(Client)
            .options(
                selectinload(Client.services),
                selectinload(Client.contacts),
                selectinload(Client.tickets),
            )
            .where(Client.id == client_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def add_contact(self, client_id: int, **kwargs) -> Contact:
        """Attach a contact to a client."""
        contact = Contact(client_id=client_id, **kwargs)
        self.session.add(contact)
        await self.session.flush()
        return contact

    async def exists(self, client_id: int) -> bool:
        result = await self.session.execute(select(Client.id).where(Client.id == client_id))
        return result.scalar_one_or_none() is not None
