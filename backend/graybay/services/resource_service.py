"""
Resource service.
Capacity metrics, allocation log and scaling/optimization recommendations.
"""

from typing import List, Sequence, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import NotFoundError
from graybay.core.logging import get_logger
from graybay.db.repositories.client_repository import ClientRepository
from graybay.db.repositories.potential_client_repository import PotentialClientRepository
from graybay.db.repositories.service_repository import (
    ServiceRepository,
    ServiceMetricRepository,
    ResourceAllocationRepository,
)
from graybay.db.session import transaction
from graybay.models.service import ResourceAllocation, Service
from graybay.schemas.resources import (
    PotentialClientResponse,
    Recommendation,
    RecommendationImpact,
    RecommendationType,
    ResourceMetrics,
    ServiceResourcesResponse,
)
from graybay.schemas.service import ResourceAllocationCreate, ResourceAllocationResponse
from graybay.services.base_service import BaseService
from graybay.services.service_service import build_service_detail
from graybay.utils.numbers import percentage, round_half_up

logger = get_logger(__name__)

SCALING_THRESHOLD_PERCENT = 80
UNDERUTILIZATION_RATIO = 0.6
RECENT_ALLOCATIONS = 10
RECENT_METRICS = 5


def compute_resource_metrics(
    service: Service,
    allocations: Sequence[ResourceAllocation],
) -> ResourceMetrics:
    """Capacity rollup; averages and peaks are 0 when there is no allocation history."""
    capacity = service.capacity_limit or 0.0
    current = service.current_usage or 0.0
    used = [allocation.used for allocation in allocations]
    return ResourceMetrics(
        total_capacity=capacity,
        current_usage=current,
        usage_percentage=percentage(current, capacity),
        average_usage=sum(used) / len(used) if used else 0.0,
        peak_usage=max(used) if used else 0.0,
        cost_per_unit=service.cost_per_unit or 0.0,
    )


def build_recommendations(
    metrics: ResourceMetrics,
    allocations: Sequence[ResourceAllocation],
) -> List[Recommendation]:
    """Scaling advice above the threshold, optimization advice for under-used allocations."""
    recommendations: List[Recommendation] = []

    if metrics.usage_percentage > SCALING_THRESHOLD_PERCENT:
        recommendations.append(
            Recommendation(
                type=RecommendationType.SCALING,
                title="Consider scaling up capacity",
                description=(
                    f"Current usage is at {round_half_up(metrics.usage_percentage):.0f}% of capacity. "
                    "Consider increasing capacity by 20%."
                ),
                impact=RecommendationImpact.HIGH,
            )
        )

    underutilized = [
        allocation
        for allocation in allocations
        if allocation.allocated > 0 and allocation.used / allocation.allocated < UNDERUTILIZATION_RATIO
    ]
    if underutilized:
        unused = sum(allocation.allocated - allocation.used for allocation in underutilized)
        recommendations.append(
            Recommendation(
                type=RecommendationType.OPTIMIZATION,
                title="Optimize resource allocation",
                description=(
                    "Some clients are significantly under-utilizing their allocated resources. "
                    "Consider reallocation."
                ),
                impact=RecommendationImpact.MEDIUM,
                estimated_savings=round_half_up(unused * metrics.cost_per_unit),
            )
        )

    return recommendations


def analyze_service(
    service: Service,
    allocations: Sequence[ResourceAllocation],
) -> Tuple[ResourceMetrics, List[Recommendation]]:
    metrics = compute_resource_metrics(service, allocations)
    return metrics, build_recommendations(metrics, allocations)


class ResourceService(BaseService):
    """Service for capacity reporting and the allocation log."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.service_repo = ServiceRepository(session)
        self.metric_repo = ServiceMetricRepository(session)
        self.allocation_repo = ResourceAllocationRepository(session)
        self.client_repo = ClientRepository(session)
        self.potential_client_repo = PotentialClientRepository(session)

    async def get_service_resources(self, service_id: int) -> ServiceResourcesResponse:
        """Capacity report for one service."""
        service = await self.service_repo.get_with_client(service_id)
        if not service:
            raise NotFoundError.for_entity("Service", service_id)

        allocations = await self.allocation_repo.recent_for_service(
            service_id, limit=RECENT_ALLOCATIONS, include_client=True
        )
        metrics = await self.metric_repo.recent_for_service(service_id, limit=RECENT_METRICS)
        prospects = await self.potential_client_repo.list_interested_in(service.type)

        resource_metrics, recommendations = analyze_service(service, allocations)
        logger.debug(
            "Resource report computed",
            extra={
                "service_id": service_id,
                "usage_percentage": resource_metrics.usage_percentage,
                "recommendations": len(recommendations),
            },
        )

        return ServiceResourcesResponse(
            service=build_service_detail(service, metrics=metrics, allocations=allocations),
            resource_metrics=resource_metrics,
            potential_clients=[
                PotentialClientResponse(
                    id=prospect.id,
                    name=prospect.name,
                    interested_services=prospect.interested_service_list,
                    probability=prospect.probability,
                )
                for prospect in prospects
            ],
            recommendations=recommendations,
        )

    async def record_allocation(
        self,
        service_id: int,
        allocation_data: ResourceAllocationCreate,
    ) -> ResourceAllocationResponse:
        """
        Append an allocation and set the service's current usage to its `used`.
        Both writes commit together or not at all.
        """
        service = await self.service_repo.get(service_id)
        if not service:
            raise NotFoundError.for_entity("Service", service_id)

        client_id = allocation_data.client_id or service.client_id
        if not await self.client_repo.exists(client_id):
            raise NotFoundError.for_entity("Client", client_id)

        async with transaction(self.session):
            allocation = await self.allocation_repo.create(
                service_id=service_id,
                client_id=client_id,
                allocated=allocation_data.allocated,
                used=allocation_data.used,
                cost=allocation_data.cost,
            )
            await self.service_repo.set_current_usage(service_id, allocation_data.used)

        logger.info(
            "Resource allocation recorded",
            extra={"service_id": service_id, "client_id": client_id, "used": allocation_data.used},
        )
        allocation = await self.allocation_repo.get_with_client(allocation.id)
        return ResourceAllocationResponse.model_validate(allocation)
