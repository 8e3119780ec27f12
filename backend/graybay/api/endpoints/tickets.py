"""
Ticket API endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.ticket_controller import TicketController
from graybay.db.session import get_db
from graybay.models.ticket import TicketStatus, TicketPriority
from graybay.schemas.ticket import TicketCreate, TicketUpdate, TicketResponse, TicketListResponse
from graybay.utils.filters import parse_filter, parse_enum_filter

router = APIRouter()


@router.get("", response_model=TicketListResponse)
async def list_tickets(
    client_id: Optional[int] = Query(None, alias="clientId"),
    status: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    assignee: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> TicketListResponse:
    """List tickets newest first; `all` disables a filter."""
    controller = TicketController(db)
    return await controller.list_tickets(
        client_id=client_id,
        status=parse_enum_filter(status, TicketStatus, "status"),
        priority=parse_enum_filter(priority, TicketPriority, "priority"),
        type=parse_filter(type),
        assignee=parse_filter(assignee),
    )


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    ticket_data: TicketCreate,
    db: AsyncSession = Depends(get_db),
) -> TicketResponse:
    controller = TicketController(db)
    return await controller.create_ticket(ticket_data)


@router.get("/{ticket_id}", response_model=TicketResponse)
async def get_ticket(
    ticket_id: int,
    db: AsyncSession = Depends(get_db),
) -> TicketResponse:
    controller = TicketController(db)
    return await controller.get_ticket(ticket_id)


@router.put("/{ticket_id}", response_model=TicketResponse)
async def update_ticket(
    ticket_id: int,
    ticket_data: TicketUpdate,
    db: AsyncSession = Depends(get_db),
) -> TicketResponse:
    controller = TicketController(db)
    return await controller.update_ticket(ticket_id, ticket_data)


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket(
    ticket_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    controller = TicketController(db)
    await controller.delete_ticket(ticket_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
