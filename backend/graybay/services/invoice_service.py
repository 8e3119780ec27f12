"""
Invoice service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import ConflictError, NotFoundError
from graybay.core.logging import get_logger
from graybay.db.repositories.client_repository import ClientRepository
from graybay.db.repositories.invoice_repository import InvoiceRepository, InvoiceItemRepository
from graybay.db.session import transaction
from graybay.models.invoice import InvoiceStatus, InvoiceType, INVOICE_TRANSITIONS
from graybay.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceResponse
from graybay.services.base_service import BaseService
from graybay.services.pricing import price_items
from graybay.utils.dates import to_datetime, utcnow
from graybay.utils.numbering import generate_invoice_number
from graybay.utils.transitions import ensure_transition

logger = get_logger(__name__)

MAX_NUMBER_ATTEMPTS = 20


class InvoiceService(BaseService):
    """Service for invoice operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.invoice_repo = InvoiceRepository(session)
        self.item_repo = InvoiceItemRepository(session)
        self.client_repo = ClientRepository(session)

    async def _next_invoice_number(self) -> str:
        for _ in range(MAX_NUMBER_ATTEMPTS):
            invoice_number = generate_invoice_number()
            if not await self.invoice_repo.number_exists(invoice_number):
                return invoice_number
        raise ConflictError("Could not allocate a unique invoice number")

    async def list_invoices(
        self,
        client_id: Optional[int] = None,
        status: Optional[InvoiceStatus] = None,
        type: Optional[InvoiceType] = None,
    ) -> List[InvoiceResponse]:
        """List invoices newest first."""
        invoices = await self.invoice_repo.list_filtered(client_id=client_id, status=status, type=type)
        return [InvoiceResponse.from_model(invoice) for invoice in invoices]

    async def get_invoice(self, invoice_number: str) -> InvoiceResponse:
        invoice = await self.invoice_repo.get_by_number(invoice_number)
        if not invoice:
            raise NotFoundError.for_entity("Invoice", invoice_number)
        return InvoiceResponse.from_model(invoice)

    async def create_invoice(self, invoice_data: InvoiceCreate) -> InvoiceResponse:
        """Create a draft invoice with priced line items."""
        if not await self.client_repo.exists(invoice_data.client_id):
            raise NotFoundError.for_entity("Client", invoice_data.client_id)

        priced = price_items(invoice_data.items, invoice_data.tax_rate)
        invoice_number = await self._next_invoice_number()

        async with transaction(self.session):
            invoice = await self.invoice_repo.create(
                invoice_number=invoice_number,
                client_id=invoice_data.client_id,
                title=invoice_data.title,
                description=invoice_data.description,
                type=invoice_data.type,
                status=InvoiceStatus.DRAFT,
                subtotal=priced.subtotal,
                tax=priced.tax,
                tax_rate=invoice_data.tax_rate,
                amount=priced.total,
                issue_date=to_datetime(invoice_data.issue_date) if invoice_data.issue_date else utcnow(),
                due_date=to_datetime(invoice_data.due_date),
                payment_method=invoice_data.payment_method,
                notes=invoice_data.notes,
            )
            await self.item_repo.bulk_create(invoice.id, [line.as_row() for line in priced.lines])

        logger.info(
            "Invoice created",
            extra={"invoice_number": invoice_number, "client_id": invoice_data.client_id, "amount": priced.total},
        )
        return await self.get_invoice(invoice_number)

    async def update_invoice(self, invoice_number: str, invoice_data: InvoiceUpdate) -> InvoiceResponse:
        """
        Update an invoice and recompute its totals.
        Marking an invoice paid stamps the paid date unless one is given.
        """
        invoice = await self.invoice_repo.get_by_number(invoice_number)
        if not invoice:
            raise NotFoundError.for_entity("Invoice", invoice_number)

        if invoice_data.status is not None:
            ensure_transition("invoice", invoice.status, invoice_data.status, INVOICE_TRANSITIONS)

        tax_rate = invoice_data.tax_rate if invoice_data.tax_rate is not None else invoice.tax_rate
        items = invoice_data.items if invoice_data.items is not None else list(invoice.items)
        priced = price_items(items, tax_rate)

        values = invoice_data.model_dump(
            exclude_unset=True,
            exclude_none=True,
            include={"title", "description", "type", "payment_method", "notes", "status"},
        )
        if invoice_data.due_date is not None:
            values["due_date"] = to_datetime(invoice_data.due_date)
        if invoice_data.paid_date is not None:
            values["paid_date"] = to_datetime(invoice_data.paid_date)
        elif invoice_data.status == InvoiceStatus.PAID and invoice.paid_date is None:
            values["paid_date"] = utcnow()
        values.update(subtotal=priced.subtotal, tax=priced.tax, tax_rate=tax_rate, amount=priced.total)

        async with transaction(self.session):
            await self.item_repo.delete_by_invoice(invoice.id)
            await self.item_repo.bulk_create(invoice.id, [line.as_row() for line in priced.lines])
            await self.invoice_repo.update(invoice.id, **values)

        logger.info("Invoice updated", extra={"invoice_number": invoice_number, "amount": priced.total})
        return await self.get_invoice(invoice_number)

    async def delete_invoice(self, invoice_number: str) -> None:
        """Delete an invoice; its items cascade."""
        deleted = await self.invoice_repo.delete_by_number(invoice_number)
        if not deleted:
            raise NotFoundError.for_entity("Invoice", invoice_number)
        await self.session.commit()
        logger.info("Invoice deleted", extra={"invoice_number": invoice_number})
