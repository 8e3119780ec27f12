"""
Invoice repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.invoice import Invoice, InvoiceItem, InvoiceStatus, InvoiceType


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for invoice operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)

    def _base_query(self):
        return select(Invoice).options(
            selectinload(Invoice.client),
            selectinload(Invoice.items),
        )

    async def get_by_number(self, invoice_number: str) -> Optional[Invoice]:
        result = await self.session.execute(
            self._base_query()
            .where(Invoice.invoice_number == invoice_number)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def number_exists(self, invoice_number: str) -> bool:
        result = await self.session.execute(
            select(Invoice.id).where(Invoice.invoice_number == invoice_number)
        )
        return result.scalar_one_or_none() is not None

    async def list_filtered(
        self,
        client_id: Optional[int] = None,
        status: Optional[InvoiceStatus] = None,
        type: Optional[InvoiceType] = None,
        with_items: bool = True,
    ) -> List[Invoice]:
        """List invoices newest first."""
        query = self._base_query() if with_items else select(Invoice)
        if client_id is not None:
            query = query.where(Invoice.client_id == client_id)
        if status is not None:
            query = query.where(Invoice.status == status)
        if type is not None:
            query = query.where(Invoice.type == type)
        query = query.order_by(Invoice.created_at.desc(), Invoice.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete_by_number(self, invoice_number: str) -> bool:
        result = await self.session.execute(
            delete(Invoice).where(Invoice.invoice_number == invoice_number)
        )
        await self.session.flush()
        return result.rowcount > 0


class InvoiceItemRepository(BaseRepository[InvoiceItem]):
    """Repository for invoice line items."""

    def __init__(self, session: AsyncSession):
        super().__init__(InvoiceItem, session)

    async def delete_by_invoice(self, invoice_id: int) -> int:
        result = await self.session.execute(
            delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        )
        await self.session.flush()
        return result.rowcount

    async def bulk_create(self, invoice_id: int, items: List[dict]) -> None:
        self.session.add_all([InvoiceItem(invoice_id=invoice_id, **item) for item in items])
        await self.session.flush()
