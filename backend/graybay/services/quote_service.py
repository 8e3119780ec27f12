"""
Quote service with business logic.
Handles numbering, pricing of line items and the quote status lifecycle.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.exceptions import ConflictError, NotFoundError
from graybay.core.logging import get_logger
from graybay.db.repositories.client_repository import ClientRepository
from graybay.db.repositories.quote_repository import QuoteRepository, QuoteItemRepository
from graybay.db.session import transaction
from graybay.models.quote import QuoteStatus, QUOTE_TRANSITIONS
from graybay.schemas.quote import QuoteCreate, QuoteUpdate, QuoteResponse
from graybay.services.base_service import BaseService
from graybay.services.pricing import price_items
from graybay.utils.dates import to_datetime
from graybay.utils.numbering import generate_quote_number
from graybay.utils.transitions import ensure_transition

logger = get_logger(__name__)

MAX_NUMBER_ATTEMPTS = 10


class QuoteService(BaseService):
    """Service for quote operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.quote_repo = QuoteRepository(session)
        self.item_repo = QuoteItemRepository(session)
        self.client_repo = ClientRepository(session)

    async def _next_quote_number(self) -> str:
        for attempt in range(MAX_NUMBER_ATTEMPTS):
            quote_number = generate_quote_number(attempt)
            if not await self.quote_repo.number_exists(quote_number):
                return quote_number
            logger.debug("Quote number collision", extra={"quote_number": quote_number})
        raise ConflictError("Could not allocate a unique quote number")

    async def list_quotes(
        self,
        client_id: Optional[int] = None,
        status: Optional[QuoteStatus] = None,
    ) -> List[QuoteResponse]:
        """List quotes newest first."""
        quotes = await self.quote_repo.list_filtered(client_id=client_id, status=status)
        return [QuoteResponse.from_model(quote) for quote in quotes]

    async def get_quote(self, quote_number: str) -> QuoteResponse:
        quote = await self.quote_repo.get_by_number(quote_number)
        if not quote:
            raise NotFoundError.for_entity("Quote", quote_number)
        return QuoteResponse.from_model(quote)

    async def create_quote(self, quote_data: QuoteCreate) -> QuoteResponse:
        """Create a draft quote with priced line items."""
        if not await self.client_repo.exists(quote_data.client_id):
            raise NotFoundError.for_entity("Client", quote_data.client_id)

        priced = price_items(quote_data.items, quote_data.tax_rate)
        quote_number = await self._next_quote_number()

        async with transaction(self.session):
            quote = await self.quote_repo.create(
                quote_number=quote_number,
                client_id=quote_data.client_id,
                title=quote_data.title,
                description=quote_data.description,
                subtotal=priced.subtotal,
                tax=priced.tax,
                tax_rate=quote_data.tax_rate,
                total=priced.total,
                status=QuoteStatus.DRAFT,
                valid_until=to_datetime(quote_data.valid_until),
                notes=quote_data.notes,
            )
            await self.item_repo.bulk_create(quote.id, [line.as_row() for line in priced.lines])

        logger.info(
            "Quote created",
            extra={"quote_number": quote_number, "client_id": quote_data.client_id, "total": priced.total},
        )
        return await self.get_quote(quote_number)

    async def update_quote(self, quote_number: str, quote_data: QuoteUpdate) -> QuoteResponse:
        """
        Update a quote and recompute its totals.
        Items are replaced, and the quote row rewritten, in one transaction.
        """
        quote = await self.quote_repo.get_by_number(quote_number)
        if not quote:
            raise NotFoundError.for_entity("Quote", quote_number)

        if quote_data.status is not None:
            ensure_transition("quote", quote.status, quote_data.status, QUOTE_TRANSITIONS)

        tax_rate = quote_data.tax_rate if quote_data.tax_rate is not None else quote.tax_rate
        items = quote_data.items if quote_data.items is not None else list(quote.items)
        priced = price_items(items, tax_rate)

        values = quote_data.model_dump(
            exclude_unset=True,
            exclude_none=True,
            include={"title", "description", "notes", "status"},
        )
        if quote_data.valid_until is not None:
            values["valid_until"] = to_datetime(quote_data.valid_until)
        values.update(subtotal=priced.subtotal, tax=priced.tax, tax_rate=tax_rate, total=priced.total)

        async with transaction(self.session):
            await self.item_repo.delete_by_quote(quote.id)
            await self.item_repo.bulk_create(quote.id, [line.as_row() for line in priced.lines])
            await self.quote_repo.update(quote.id, **values)

        logger.info("Quote updated", extra={"quote_number": quote_number, "total": priced.total})
        return await self.get_quote(quote_number)

    async def delete_quote(self, quote_number: str) -> None:
        """Delete a quote; its items cascade."""
        deleted = await self.quote_repo.delete_by_number(quote_number)
        if not deleted:
            raise NotFoundError.for_entity("Quote", quote_number)
        await self.session.commit()
        logger.info("Quote deleted", extra={"quote_number": quote_number})
