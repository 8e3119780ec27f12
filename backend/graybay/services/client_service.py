"""
Client service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import NotFoundError
from graybay.core.logging import get_logger
from graybay.db.repositories.client_repository import ClientRepository
from graybay.db.repositories.service_repository import ServiceRepository
from graybay.db.session import transaction
from graybay.models.client import ClientStatus, ContactType
from graybay.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from graybay.schemas.onboarding import ContactInfo, OnboardingRequest
from graybay.services.base_service import BaseService

logger = get_logger(__name__)


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.service_repo = ServiceRepository(session)

    async def get_client(self, client_id: int) -> ClientResponse:
        """Get client with services, contacts and all tickets."""
        client = await self.client_repo.get_with_details(client_id)
        if not client:
            raise NotFoundError.for_entity("Client", client_id)
        return ClientResponse.model_validate(client)

    async def list_clients(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        status: Optional[ClientStatus] = None,
    ) -> List[ClientResponse]:
        """List clients with services, contacts and open tickets."""
        clients = await self.client_repo.list_with_overview(status=status, skip=skip, limit=limit)
        return [ClientResponse.model_validate(client) for client in clients]

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a client together with its contacts."""
        client_dict = client_data.model_dump(exclude={"contacts"})
        async with transaction(self.session):
            client = await self.client_repo.create(**client_dict)
            for contact in client_data.contacts:
                await self.client_repo.add_contact(client.id, **contact.model_dump())
        logger.info("Client created", extra={"client_id": client.id})
        return await self.get_client(client.id)

    async def update_client(self, client_id: int, client_data: ClientUpdate) -> ClientResponse:
        """Partially update a client."""
        client = await self.client_repo.get(client_id)
        if not client:
            raise NotFoundError.for_entity("Client", client_id)
        await self.client_repo.update(client_id, **client_data.model_dump(exclude_unset=True))
        await self.session.commit()
        return await self.get_client(client_id)

    async def delete_client(self, client_id: int) -> None:
        """Delete a client and everything it owns."""
        deleted = await self.client_repo.delete(client_id)
        if not deleted:
            raise NotFoundError.for_entity("Client", client_id)
        await self.session.commit()
        logger.info("Client deleted", extra={"client_id": client_id})

    async def onboard_client(self, onboarding: OnboardingRequest) -> ClientResponse:
        """
        Create a client from the onboarding wizard: company, primary and
        technical contacts, and every included service, in one transaction.
        """
        company = onboarding.company_info
        contacts = [(onboarding.contacts.primary, ContactType.PRIMARY, True)]
        if onboarding.contacts.technical is not None:
            contacts.append((onboarding.contacts.technical, ContactType.TECHNICAL, False))

        async with transaction(self.session):
            client = await self.client_repo.create(
                name=company.name,
                website=company.website,
                industry=company.industry,
                size=company.size,
                status=ClientStatus.ACTIVE,
            )
            for info, contact_type, is_primary in contacts:
                await self._add_contact(client.id, info, contact_type, is_primary)

            for selected in onboarding.selected_services:
                if not selected.included:
                    continue
                price_range = selected.price_range
                await self.service_repo.create(
                    client_id=client.id,
                    name=selected.name,
                    type=selected.id,
                    description=selected.description,
                    cost_per_unit=selected.base_price,
                    custom_price=selected.custom_price,
                    price_range_min=price_range.min if price_range else None,
                    price_range_max=price_range.max if price_range else None,
                    included=True,
                )

        logger.info(
            "Client onboarded",
            extra={
                "client_id": client.id,
                "services": sum(1 for s in onboarding.selected_services if s.included),
            },
        )
        return await self.get_client(client.id)

    async def _add_contact(
        self,
        client_id: int,
        info: ContactInfo,
        contact_type: ContactType,
        is_primary: bool,
    ) -> None:
        await self.client_repo.add_contact(
            client_id,
            name=info.name,
            role=info.role,
            email=info.email,
            phone=info.phone,
            is_primary=is_primary,
            type=contact_type,
        )
