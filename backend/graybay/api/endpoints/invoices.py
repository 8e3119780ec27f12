"""
Invoice API endpoints. Invoices are addressed by invoice number.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.invoice_controller import InvoiceController
from graybay.db.session import get_db
from graybay.models.invoice import InvoiceStatus, InvoiceType
from graybay.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceResponse, InvoiceListResponse
from graybay.utils.filters import parse_enum_filter

router = APIRouter()


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    client_id: Optional[int] = Query(None, alias="clientId"),
    status: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> InvoiceListResponse:
    """List invoices newest first."""
    controller = InvoiceController(db)
    return await controller.list_invoices(
        client_id=client_id,
        status=parse_enum_filter(status, InvoiceStatus, "status"),
        type=parse_enum_filter(type, InvoiceType, "type"),
    )


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    controller = InvoiceController(db)
    return await controller.create_invoice(invoice_data)


@router.get("/{invoice_number}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_number: str,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    controller = InvoiceController(db)
    return await controller.get_invoice(invoice_number)


@router.put("/{invoice_number}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_number: str,
    invoice_data: InvoiceUpdate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    controller = InvoiceController(db)
    return await controller.update_invoice(invoice_number, invoice_data)


@router.delete("/{invoice_number}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_number: str,
    db: AsyncSession = Depends(get_db),
) -> Response:
    controller = InvoiceController(db)
    await controller.delete_invoice(invoice_number)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
