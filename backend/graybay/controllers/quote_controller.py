"""
Quote controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.models.quote import QuoteStatus
from graybay.services.quote_service import QuoteService
from graybay.schemas.quote import QuoteCreate, QuoteUpdate, QuoteResponse, QuoteListResponse


class QuoteController(BaseController):
    """Controller for quote operations."""

    def __init__(self, session: AsyncSession):
        self.quote_service = QuoteService(session)

    async def list_quotes(
        self,
        client_id: Optional[int] = None,
        status: Optional[QuoteStatus] = None,
    ) -> QuoteListResponse:
        quotes = await self.quote_service.list_quotes(client_id=client_id, status=status)
        return QuoteListResponse(items=quotes, total=len(quotes))

    async def get_quote(self, quote_number: str) -> QuoteResponse:
        return await self.quote_service.get_quote(quote_number)

    async def create_quote(self, quote_data: QuoteCreate) -> QuoteResponse:
        return await self.quote_service.create_quote(quote_data)

    async def update_quote(self, quote_number: str, quote_data: QuoteUpdate) -> QuoteResponse:
        return await self.quote_service.update_quote(quote_number, quote_data)

    async def delete_quote(self, quote_number: str) -> None:
        await self.quote_service.delete_quote(quote_number)
