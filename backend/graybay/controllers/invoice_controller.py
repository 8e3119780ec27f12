"""
Invoice controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.models.invoice import InvoiceStatus, InvoiceType
from graybay.services.invoice_service import InvoiceService
from graybay.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceResponse, InvoiceListResponse


class InvoiceController(BaseController):
    """Controller for invoice operations."""

    def __init__(self, session: AsyncSession):
        self.invoice_service = InvoiceService(session)

    async def list_invoices(
        self,
        client_id: Optional[int] = None,
        status: Optional[InvoiceStatus] = None,
        type: Optional[InvoiceType] = None,
    ) -> InvoiceListResponse:
        invoices = await self.invoice_service.list_invoices(client_id=client_id, status=status, type=type)
        return InvoiceListResponse(items=invoices, total=len(invoices))

    async def get_invoice(self, invoice_number: str) -> InvoiceResponse:
        return await self.invoice_service.get_invoice(invoice_number)

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        return await self.invoice_service.create_invoice(invoice_data)

    async def update_invoice(self, invoice_number: str, invoice_data: InvoiceUpdate) -> InvoiceResponse:
        return await self.invoice_service.update_invoice(invoice_number, invoice_data)

    async def delete_invoice(self, invoice_number: str) -> None:
        await self.invoice_service.delete_invoice(invoice_number)
