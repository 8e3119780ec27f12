"""
Ticket service with business logic.
Tickets link to services by name, follow the status transition table and
write an activity entry for every mutation.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import NotFoundError, ValidationError
from graybay.core.logging import get_logger
from graybay.db.repositories.client_repository import ClientRepository
from graybay.db.repositories.service_repository import ServiceRepository
from graybay.db.repositories.ticket_repository import TicketRepository
from graybay.db.session import transaction
from graybay.models.ticket import TicketStatus, TicketPriority, TICKET_TRANSITIONS
from graybay.schemas.ticket import TicketCreate, TicketUpdate, TicketResponse
from graybay.services.activity_service import ActivityService
from graybay.services.base_service import BaseService
from graybay.utils.transitions import ensure_transition

logger = get_logger(__name__)

ACTIVITY_TYPE = "ticket"


class TicketService(BaseService):
    """Service for ticket operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.ticket_repo = TicketRepository(session)
        self.service_repo = ServiceRepository(session)
        self.client_repo = ClientRepository(session)
        self.activity_service = ActivityService(session)

    async def _resolve_service_ids(self, client_id: int, names: List[str]) -> List[int]:
        """Map service names to the client's service ids; every name must match."""
        services = await self.service_repo.list_by_names(client_id, names)
        found = {service.name for service in services}
        missing = sorted(set(names) - found)
        if missing:
            raise ValidationError(
                "Unknown services for this client",
                details={"client_id": client_id, "services": missing},
            )
        return [service.id for service in services]

    async def _load(self, ticket_id: int) -> TicketResponse:
        ticket = await self.ticket_repo.get_with_relations(ticket_id)
        if not ticket:
            raise NotFoundError.for_entity("Ticket", ticket_id)
        return TicketResponse.from_model(ticket)

    async def list_tickets(
        self,
        client_id: Optional[int] = None,
        status: Optional[TicketStatus] = None,
        priority: Optional[TicketPriority] = None,
        type: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> List[TicketResponse]:
        """List tickets newest first."""
        tickets = await self.ticket_repo.list_filtered(
            client_id=client_id,
            status=status,
            priority=priority,
            type=type,
            assignee=assignee,
        )
        return [TicketResponse.from_model(ticket) for ticket in tickets]

    async def get_ticket(self, ticket_id: int) -> TicketResponse:
        return await self._load(ticket_id)

    async def create_ticket(self, ticket_data: TicketCreate) -> TicketResponse:
        """Create an open ticket linked to the named services."""
        if not await self.client_repo.exists(ticket_data.client_id):
            raise NotFoundError.for_entity("Client", ticket_data.client_id)
        service_ids = await self._resolve_service_ids(ticket_data.client_id, ticket_data.services)

        async with transaction(self.session):
            ticket = await self.ticket_repo.create(
                title=ticket_data.title,
                description=ticket_data.description,
                type=ticket_data.type,
                priority=ticket_data.priority,
                status=TicketStatus.OPEN,
                client_id=ticket_data.client_id,
                assignee=ticket_data.assignee,
                impact=ticket_data.impact,
                scheduled_for=ticket_data.scheduled_for,
            )
            await self.ticket_repo.replace_services(ticket.id, service_ids)

        response = await self._load(ticket.id)
        logger.info("Ticket created", extra={"ticket_id": ticket.id, "client_id": ticket_data.client_id})
        await self.activity_service.record(
            type=ACTIVITY_TYPE,
            description=f'Ticket "{response.title}" created',
            user=response.assignee,
            target=response.title,
        )
        return response

    async def update_ticket(self, ticket_id: int, ticket_data: TicketUpdate) -> TicketResponse:
        """
        Partially update a ticket.
        A non-empty services list replaces the ticket's service links.
        """
        ticket = await self.ticket_repo.get(ticket_id)
        if not ticket:
            raise NotFoundError.for_entity("Ticket", ticket_id)

        update_dict = ticket_data.model_dump(exclude_unset=True, exclude_none=True, exclude={"services"})
        if update_dict.get("status") is not None:
            ensure_transition("ticket", ticket.status, update_dict["status"], TICKET_TRANSITIONS)

        service_ids = None
        if ticket_data.services:
            service_ids = await self._resolve_service_ids(ticket.client_id, ticket_data.services)

        async with transaction(self.session):
            await self.ticket_repo.update(ticket_id, **update_dict)
            if service_ids is not None:
                await self.ticket_repo.replace_services(ticket_id, service_ids)

        response = await self._load(ticket_id)
        await self.activity_service.record(
            type=ACTIVITY_TYPE,
            description=f'Ticket "{response.title}" updated',
            user=response.assignee,
            target=response.title,
        )
        return response

    async def delete_ticket(self, ticket_id: int) -> None:
        """Delete a ticket; its service links cascade."""
        ticket = await self.ticket_repo.get(ticket_id)
        if not ticket:
            raise NotFoundError.for_entity("Ticket", ticket_id)
        title, assignee = ticket.title, ticket.assignee

        await self.ticket_repo.delete(ticket_id)
        await self.session.commit()
        logger.info("Ticket deleted", extra={"ticket_id": ticket_id})

        await self.activity_service.record(
            type=ACTIVITY_TYPE,
            description=f'Ticket "{title}" deleted',
            user=assignee,
            target=title,
        )
