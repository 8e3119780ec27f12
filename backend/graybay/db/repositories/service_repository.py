"""
Service repository: services, their metrics and allocation log.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from sqlalchemy.orm import selectinload

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.service import Service, ServiceMetric, ResourceAllocation


class ServiceRepository(BaseRepository[Service]):
    """Repository for service operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Service, session)

    async def get_with_client(self, service_id: int, client_id: Optional[int] = None) -> Optional[Service]:
        """Get service with its client; optionally scoped to one client."""
        query = (
            select(Service)
            .options(selectinload(Service.client))
            .where(Service.id == service_id)
            .execution_options(populate_existing=True)
        )
        if client_id is not None:
            query = query.where(Service.client_id == client_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_with_client(
        self,
        client_id: Optional[int] = None,
        type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Service]:
        """List services with the owning client loaded."""
        query = select(Service).options(selectinload(Service.client)).order_by(Service.id)
        if client_id is not None:
            query = query.where(Service.client_id == client_id)
        if type is not None:
            query = query.where(Service.type == type)
        if status is not None:
            query = query.where(Service.status == status)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_names(self, client_id: int, names: List[str]) -> List[Service]:
        """Resolve service names to a client's services."""
        if not names:
            return []
        result = await self.session.execute(
            select(Service)
            .where(Service.client_id == client_id, Service.name.in_(names))
            .order_by(Service.id)
        )
        return list(result.scalars().all())

    async def update_scoped(self, service_id: int, client_id: int, **kwargs) -> bool:
        """Update a service only if it belongs to the client."""
        exists = await self.session.execute(
            select(Service.id).where(Service.id == service_id, Service.client_id == client_id)
        )
        if exists.scalar_one_or_none() is None:
            return False
        if kwargs:
            await self.session.execute(
                update(Service)
                .where(Service.id == service_id, Service.client_id == client_id)
                .values(**kwargs)
            )
            await self.session.flush()
        return True

    async def delete_scoped(self, service_id: int, client_id: int) -> bool:
        """Delete a service only if it belongs to the client."""
        result = await self.session.execute(
            delete(Service).where(Service.id == service_id, Service.client_id == client_id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def set_current_usage(self, service_id: int, current_usage: float) -> None:
        await self.session.execute(
            update(Service).where(Service.id == service_id).values(current_usage=current_usage)
        )
        await self.session.flush()


class ServiceMetricRepository(BaseRepository[ServiceMetric]):
    """Repository for service metrics."""

    def __init__(self, session: AsyncSession):
        super().__init__(ServiceMetric, session)

    async def recent_for_service(self, service_id: int, limit: Optional[int] = None) -> List[ServiceMetric]:
        """Newest metrics first."""
        query = (
            select(ServiceMetric)
            .where(ServiceMetric.service_id == service_id)
            .order_by(ServiceMetric.timestamp.desc(), ServiceMetric.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())


class ResourceAllocationRepository(BaseRepository[ResourceAllocation]):
    """Repository for the append-only allocation log."""

    def __init__(self, session: AsyncSession):
        super().__init__(ResourceAllocation, session)

    async def get_with_client(self, allocation_id: int) -> Optional[ResourceAllocation]:
        result = await self.session.execute(
            select(ResourceAllocation)
            .options(selectinload(ResourceAllocation.client))
            .where(ResourceAllocation.id == allocation_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def recent_for_service(
        self,
        service_id: int,
        limit: Optional[int] = None,
        include_client: bool = False,
    ) -> List[ResourceAllocation]:
        """Newest allocations first."""
        query = (
            select(ResourceAllocation)
            .where(ResourceAllocation.service_id == service_id)
            .order_by(ResourceAllocation.timestamp.desc(), ResourceAllocation.id.desc())
        )
        if include_client:
            query = query.options(selectinload(ResourceAllocation.client))
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
