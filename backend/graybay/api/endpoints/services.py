"""
Service API endpoints, including capacity resources and metrics.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.service_controller import ServiceController
from graybay.db.session import get_db
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
from graybay.utils.filters import parse_filter

router = APIRouter()


@router.get("", response_model=ServiceListResponse)
async def list_services(
    client_id: Optional[int] = Query(None, alias="clientId"),
    type: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ServiceListResponse:
    """List services with their client and five most recent metrics."""
    controller = ServiceController(db)
    return await controller.list_services(
        client_id=client_id,
        type=parse_filter(type),
        status=parse_filter(status),
    )


@router.post("", response_model=ServiceDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    service_data: ServiceCreate,
    db: AsyncSession = Depends(get_db),
) -> ServiceDetailResponse:
    controller = ServiceController(db)
    return await controller.create_service(service_data)


@router.get("/{service_id}", response_model=ServiceDetailResponse)
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db),
) -> ServiceDetailResponse:
    """Get a service with its client and every metric, newest first."""
    controller = ServiceController(db)
    return await controller.get_service(service_id)


@router.put("/{service_id}", response_model=ServiceDetailResponse)
async def update_service(
    service_id: int,
    service_data: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> ServiceDetailResponse:
    controller = ServiceController(db)
    return await controller.update_service(service_id, service_data)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    controller = ServiceController(db)
    await controller.delete_service(service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{service_id}/metrics",
    response_model=ServiceMetricResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_metric(
    service_id: int,
    metric_data: ServiceMetricCreate,
    db: AsyncSession = Depends(get_db),
) -> ServiceMetricResponse:
    """Append a metric sample to a service."""
    controller = ServiceController(db)
    return await controller.record_metric(service_id, metric_data)


@router.get("/{service_id}/resources", response_model=ServiceResourcesResponse)
async def get_service_resources(
    service_id: int,
    db: AsyncSession = Depends(get_db),
) -> ServiceResourcesResponse:
    """Capacity metrics, interested prospects and recommendations."""
    controller = ServiceController(db)
    return await controller.get_resources(service_id)


@router.post(
    "/{service_id}/resources",
    response_model=ResourceAllocationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_allocation(
    service_id: int,
    allocation_data: ResourceAllocationCreate,
    db: AsyncSession = Depends(get_db),
) -> ResourceAllocationResponse:
    """Record an allocation and update the service's current usage."""
    controller = ServiceController(db)
    return await controller.record_allocation(service_id, allocation_data)
