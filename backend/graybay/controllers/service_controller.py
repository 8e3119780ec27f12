"""
Service controller.
Coordinates service CRUD with the resource/capacity service.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.services.resource_service import ResourceService
from graybay.services.service_service import ServiceService
from graybay.schemas.resources import ServiceResourcesResponse
from graybay.schemas.service import (
    ResourceAllocationCreate,
    ResourceAllocationResponse,
    ServiceCreate,
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceMetricCreate,
    ServiceMetricResponse,
    ServiceUpdate,
)


class ServiceController(BaseController):
    """Controller for managed service operations."""

    def __init__(self, session: AsyncSession):
        self.service_service = ServiceService(session)
        self.resource_service = ResourceService(session)

    async def list_services(
        self,
        client_id: Optional[int] = None,
        type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> ServiceListResponse:
        services = await self.service_service.list_services(client_id=client_id, type=type, status=status)
        return ServiceListResponse(items=services, total=len(services))

    async def get_service(self, service_id: int) -> ServiceDetailResponse:
        return await self.service_service.get_service(service_id)

    async def create_service(self, service_data: ServiceCreate) -> ServiceDetailResponse:
        return await self.service_service.create_service(service_data)

    async def update_service(self, service_id: int, service_data: ServiceUpdate) -> ServiceDetailResponse:
        return await self.service_service.update_service(service_id, service_data)

    async def delete_service(self, service_id: int) -> None:
        await self.service_service.delete_service(service_id)

    async def record_metric(self, service_id: int, metric_data: ServiceMetricCreate) -> ServiceMetricResponse:
        return await self.service_service.record_metric(service_id, metric_data)

    async def get_resources(self, service_id: int) -> ServiceResourcesResponse:
        """Capacity metrics, prospects and recommendations for a service."""
        return await self.resource_service.get_service_resources(service_id)

    async def record_allocation(
        self,
        service_id: int,
        allocation_data: ResourceAllocationCreate,
    ) -> ResourceAllocationResponse:
        return await self.resource_service.record_allocation(service_id, allocation_data)
