"""
Client controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.models.client import ClientStatus
from graybay.services.client_service import ClientService
from graybay.services.service_service import ServiceService
from graybay.schemas.client import ClientCreate, ClientUpdate, ClientResponse, ClientListResponse
from graybay.schemas.onboarding import OnboardingRequest
from graybay.schemas.service import (
    ClientServiceCreate,
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceUpdate,
)


class ClientController(BaseController):
    """Controller for client operations, including a client's services."""

    def __init__(self, session: AsyncSession):
        self.client_service = ClientService(session)
        self.service_service = ServiceService(session)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        return await self.client_service.create_client(client_data)

    async def onboard_client(self, onboarding: OnboardingRequest) -> ClientResponse:
        """Create a client from the onboarding wizard."""
        return await self.client_service.onboard_client(onboarding)

    async def get_client(self, client_id: int) -> ClientResponse:
        """Get client by ID."""
        return await self.client_service.get_client(client_id)

    async def list_clients(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        status: Optional[ClientStatus] = None,
    ) -> ClientListResponse:
        """List clients with optional filters."""
        clients = await self.client_service.list_clients(skip=skip, limit=limit, status=status)
        return ClientListResponse(items=clients, total=len(clients))

    async def update_client(self, client_id: int, client_data: ClientUpdate) -> ClientResponse:
        """Update a client."""
        return await self.client_service.update_client(client_id, client_data)

    async def delete_client(self, client_id: int) -> None:
        """Delete a client."""
        await self.client_service.delete_client(client_id)

    async def list_client_services(self, client_id: int) -> ServiceListResponse:
        services = await self.service_service.list_client_services(client_id)
        return ServiceListResponse(items=services, total=len(services))

    async def get_client_service(self, client_id: int, service_id: int) -> ServiceDetailResponse:
        return await self.service_service.get_client_service(client_id, service_id)

    async def create_client_service(
        self,
        client_id: int,
        service_data: ClientServiceCreate,
    ) -> ServiceDetailResponse:
        return await self.service_service.create_client_service(client_id, service_data)

    async def update_client_service(
        self,
        client_id: int,
        service_id: int,
        service_data: ServiceUpdate,
    ) -> ServiceDetailResponse:
        return await self.service_service.update_client_service(client_id, service_id, service_data)

    async def delete_client_service(self, client_id: int, service_id: int) -> None:
        await self.service_service.delete_client_service(client_id, service_id)
