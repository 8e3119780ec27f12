"""
Service service: managed services, per client and across clients.
"""

from typing import List, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import NotFoundError
from graybay.core.logging import get_logger
from graybay.db.repositories.client_repository import ClientRepository
from graybay.db.repositories.service_repository import (
    ServiceRepository,
    ServiceMetricRepository,
    ResourceAllocationRepository,
)
from graybay.models.service import ResourceAllocation, Service, ServiceMetric
from graybay.schemas.common import ClientSummary
from graybay.schemas.service import (
    ClientServiceCreate,
    ResourceAllocationResponse,
    ServiceCreate,
    ServiceDetailResponse,
    ServiceMetricCreate,
    ServiceMetricResponse,
    ServiceResponse,
    ServiceUpdate,
)
from graybay.services.base_service import BaseService

logger = get_logger(__name__)

LIST_METRICS = 5


def build_service_detail(
    service: Service,
    metrics: Sequence[ServiceMetric] = (),
    allocations: Sequence[ResourceAllocation] = (),
    with_client: bool = True,
) -> ServiceDetailResponse:
    """
    Assemble a service view from separately loaded children.
    Allocations must have their client loaded.
    """
    base = ServiceResponse.model_validate(service)
    return ServiceDetailResponse(
        **base.model_dump(),
        client=ClientSummary.model_validate(service.client) if with_client and service.client else None,
        metrics=[ServiceMetricResponse.model_validate(metric) for metric in metrics],
        resource_allocations=[ResourceAllocationResponse.model_validate(a) for a in allocations],
    )


class ServiceService(BaseService):
    """Service for managed service operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.service_repo = ServiceRepository(session)
        self.metric_repo = ServiceMetricRepository(session)
        self.allocation_repo = ResourceAllocationRepository(session)
        self.client_repo = ClientRepository(session)

    async def _ensure_client(self, client_id: int) -> None:
        if not await self.client_repo.exists(client_id):
            raise NotFoundError.for_entity("Client", client_id)

    async def list_services(
        self,
        client_id: Optional[int] = None,
        type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[ServiceDetailResponse]:
        """List services with their client and most recent metrics."""
        services = await self.service_repo.list_with_client(client_id=client_id, type=type, status=status)
        result = []
        for service in services:
            metrics = await self.metric_repo.recent_for_service(service.id, limit=LIST_METRICS)
            result.append(build_service_detail(service, metrics=metrics))
        return result

    async def get_service(self, service_id: int) -> ServiceDetailResponse:
        """Get service with its client and every metric, newest first."""
        service = await self.service_repo.get_with_client(service_id)
        if not service:
            raise NotFoundError.for_entity("Service", service_id)
        metrics = await self.metric_repo.recent_for_service(service_id)
        return build_service_detail(service, metrics=metrics)

    async def create_service(self, service_data: ServiceCreate) -> ServiceDetailResponse:
        """Create a service for the client named in the body."""
        await self._ensure_client(service_data.client_id)
        service = await self.service_repo.create(**service_data.model_dump())
        await self.session.commit()
        logger.info("Service created", extra={"service_id": service.id, "client_id": service.client_id})
        return await self.get_service(service.id)

    async def update_service(self, service_id: int, service_data: ServiceUpdate) -> ServiceDetailResponse:
        """Partially update a service."""
        service = await self.service_repo.get(service_id)
        if not service:
            raise NotFoundError.for_entity("Service", service_id)
        await self.service_repo.update(service_id, **service_data.model_dump(exclude_unset=True))
        await self.session.commit()
        return await self.get_service(service_id)

    async def delete_service(self, service_id: int) -> None:
        """Delete a service; metrics, allocations and ticket links cascade."""
        deleted = await self.service_repo.delete(service_id)
        if not deleted:
            raise NotFoundError.for_entity("Service", service_id)
        await self.session.commit()
        logger.info("Service deleted", extra={"service_id": service_id})

    async def record_metric(self, service_id: int, metric_data: ServiceMetricCreate) -> ServiceMetricResponse:
        """Append a metric sample to a service."""
        service = await self.service_repo.get(service_id)
        if not service:
            raise NotFoundError.for_entity("Service", service_id)
        metric = await self.metric_repo.create(service_id=service_id, **metric_data.model_dump())
        await self.session.commit()
        return ServiceMetricResponse.model_validate(metric)

    # Client-scoped operations for /clients/{client_id}/services

    async def list_client_services(self, client_id: int) -> List[ServiceDetailResponse]:
        """List a client's services with recent metrics and the newest allocation."""
        await self._ensure_client(client_id)
        services = await self.service_repo.list_with_client(client_id=client_id)
        result = []
        for service in services:
            metrics = await self.metric_repo.recent_for_service(service.id, limit=LIST_METRICS)
            allocations = await self.allocation_repo.recent_for_service(
                service.id, limit=1, include_client=True
            )
            result.append(build_service_detail(service, metrics=metrics, allocations=allocations))
        return result

    async def get_client_service(self, client_id: int, service_id: int) -> ServiceDetailResponse:
        service = await self.service_repo.get_with_client(service_id, client_id=client_id)
        if not service:
            raise NotFoundError.for_entity("Service", service_id)
        metrics = await self.metric_repo.recent_for_service(service_id)
        allocations = await self.allocation_repo.recent_for_service(service_id, include_client=True)
        return build_service_detail(service, metrics=metrics, allocations=allocations)

    async def create_client_service(
        self,
        client_id: int,
        service_data: ClientServiceCreate,
    ) -> ServiceDetailResponse:
        """Create a service owned by the client in the path."""
        await self._ensure_client(client_id)
        service = await self.service_repo.create(client_id=client_id, **service_data.model_dump())
        await self.session.commit()
        logger.info("Service created", extra={"service_id": service.id, "client_id": client_id})
        return await self.get_client_service(client_id, service.id)

    async def update_client_service(
        self,
        client_id: int,
        service_id: int,
        service_data: ServiceUpdate,
    ) -> ServiceDetailResponse:
        updated = await self.service_repo.update_scoped(
            service_id, client_id, **service_data.model_dump(exclude_unset=True)
        )
        if not updated:
            raise NotFoundError.for_entity("Service", service_id)
        await self.session.commit()
        return await self.get_client_service(client_id, service_id)

    async def delete_client_service(self, client_id: int, service_id: int) -> None:
        deleted = await self.service_repo.delete_scoped(service_id, client_id)
        if not deleted:
            raise NotFoundError.for_entity("Service", service_id)
        await self.session.commit()
        logger.info("Service deleted", extra={"service_id": service_id, "client_id": client_id})
