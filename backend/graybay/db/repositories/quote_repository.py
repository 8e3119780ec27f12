"""
Quote repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.quote import Quote, QuoteItem, QuoteStatus


class QuoteRepository(BaseRepository[Quote]):
    """Repository for quote operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Quote, session)

    def _base_query(self):
        """Base query with client and items loaded."""
        return select(Quote).options(
            selectinload(Quote.client),
            selectinload(Quote.items),
        )

    async def get_by_number(self, quote_number: str) -> Optional[Quote]:
        """Get quote by its quote number, with client and items."""
        result = await self.session.execute(
            self._base_query()
            .where(Quote.quote_number == quote_number)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def number_exists(self, quote_number: str) -> bool:
        result = await self.session.execute(
            select(Quote.id).where(Quote.quote_number == quote_number)
        )
        return result.scalar_one_or_none() is not None

    async def list_filtered(
        self,
        client_id: Optional[int] = None,
        status: Optional[QuoteStatus] = None,
        with_items: bool = True,
    ) -> List[Quote]:
        """List quotes newest first."""
        query = self._base_query() if with_items else select(Quote)
        if client_id is not None:
            query = query.where(Quote.client_id == client_id)
        if status is not None:
            query = query.where(Quote.status == status)
        query = query.order_by(Quote.created_at.desc(), Quote.id.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete_by_number(self, quote_number: str) -> bool:
        """Delete a quote; its items go with it through the FK cascade."""
        result = await self.session.execute(
            delete(Quote).where(Quote.quote_number == quote_number)
        )
        await self.session.flush()
        return result.rowcount > 0


class QuoteItemRepository(BaseRepository[QuoteItem]):
    """Repository for quote line items."""

    def __init__(self, session: AsyncSession):
        super().__init__(QuoteItem, session)

    async def delete_by_quote(self, quote_id: int) -> int:
        """Delete every item of a quote."""
        result = await self.session.execute(
            delete(QuoteItem).where(QuoteItem.quote_id == quote_id)
        )
        await self.session.flush()
        return result.rowcount

    async def bulk_create(self, quote_id: int, items: List[dict]) -> None:
        self.session.add_all([QuoteItem(quote_id=quote_id, **item) for item in items])
        await self.session.flush()
