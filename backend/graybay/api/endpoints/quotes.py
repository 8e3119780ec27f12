"""
Quote API endpoints. Quotes are addressed by quote number.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.quote_controller import QuoteController
from graybay.db.session import get_db
from graybay.models.quote import QuoteStatus
from graybay.schemas.quote import QuoteCreate, QuoteUpdate, QuoteResponse, QuoteListResponse
from graybay.utils.filters import parse_enum_filter

router = APIRouter()


@router.get("", response_model=QuoteListResponse)
async def list_quotes(
    client_id: Optional[int] = Query(None, alias="clientId"),
    status: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> QuoteListResponse:
    """List quotes newest first."""
    controller = QuoteController(db)
    return await controller.list_quotes(
        client_id=client_id,
        status=parse_enum_filter(status, QuoteStatus, "status"),
    )


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(
    quote_data: QuoteCreate,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Create a draft quote; line items are priced from the catalog."""
    controller = QuoteController(db)
    return await controller.create_quote(quote_data)


@router.get("/{quote_number}", response_model=QuoteResponse)
async def get_quote(
    quote_number: str,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    controller = QuoteController(db)
    return await controller.get_quote(quote_number)


@router.put("/{quote_number}", response_model=QuoteResponse)
async def update_quote(
    quote_number: str,
    quote_data: QuoteUpdate,
    db: AsyncSession = Depends(get_db),
) -> QuoteResponse:
    """Update a quote and recompute its totals."""
    controller = QuoteController(db)
    return await controller.update_quote(quote_number, quote_data)


@router.delete("/{quote_number}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quote(
    quote_number: str,
    db: AsyncSession = Depends(get_db),
) -> Response:
    controller = QuoteController(db)
    await controller.delete_quote(quote_number)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
