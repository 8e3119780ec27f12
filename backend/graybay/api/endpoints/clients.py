"""
Client API endpoints, including onboarding and a client's services.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.client_controller import ClientController
from graybay.db.session import get_db
from graybay.models.client import ClientStatus
from graybay.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListResponse,
)
from graybay.schemas.onboarding import OnboardingRequest
from graybay.schemas.service import (
    ClientServiceCreate,
    ServiceDetailResponse,
    ServiceListResponse,
    ServiceUpdate,
)
from graybay.utils.filters import parse_enum_filter

router = APIRouter()


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_data: ClientCreate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a new client."""
    controller = ClientController(db)
    return await controller.create_client(client_data)


@router.post("/onboard", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def onboard_client(
    onboarding: OnboardingRequest,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a client, its contacts and included services from the onboarding wizard."""
    controller = ClientController(db)
    return await controller.onboard_client(onboarding)


@router.get("", response_model=ClientListResponse)
async def list_clients(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    status: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ClientListResponse:
    """List clients with services, contacts and open tickets."""
    controller = ClientController(db)
    return await controller.list_clients(
        skip=skip,
        limit=limit,
        status=parse_enum_filter(status, ClientStatus, "status"),
    )


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Get client by ID."""
    controller = ClientController(db)
    return await controller.get_client(client_id)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    client_data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Update a client."""
    controller = ClientController(db)
    return await controller.update_client(client_id, client_data)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a client and everything it owns."""
    controller = ClientController(db)
    await controller.delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{client_id}/services", response_model=ServiceListResponse)
async def list_client_services(
    client_id: int,
    db: AsyncSession = Depends(get_db),
) -> ServiceListResponse:
    """List a client's services with recent metrics and the newest allocation."""
    controller = ClientController(db)
    return await controller.list_client_services(client_id)


@router.post(
    "/{client_id}/services",
    response_model=ServiceDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_client_service(
    client_id: int,
    service_data: ClientServiceCreate,
    db: AsyncSession = Depends(get_db),
) -> ServiceDetailResponse:
    controller = ClientController(db)
    return await controller.create_client_service(client_id, service_data)


@router.get("/{client_id}/services/{service_id}", response_model=ServiceDetailResponse)
async def get_client_service(
    client_id: int,
    service_id: int,
    db: AsyncSession = Depends(get_db),
) -> ServiceDetailResponse:
    controller = ClientController(db)
    return await controller.get_client_service(client_id, service_id)


@router.put("/{client_id}/services/{service_id}", response_model=ServiceDetailResponse)
async def update_client_service(
    client_id: int,
    service_id: int,
    service_data: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> ServiceDetailResponse:
    controller = ClientController(db)
    return await controller.update_client_service(client_id, service_id, service_data)


@router.delete("/{client_id}/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client_service(
    client_id: int,
    service_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    controller = ClientController(db)
    await controller.delete_client_service(client_id, service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
