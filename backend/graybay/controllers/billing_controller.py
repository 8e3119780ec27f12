"""
Billing controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.services.billing_service import BillingService
from graybay.schemas.billing import BillingStatsResponse


class BillingController(BaseController):
    """Controller for billing statistics."""

    def __init__(self, session: AsyncSession):
        self.billing_service = BillingService(session)

    async def get_stats(self, client_id: Optional[int] = None) -> BillingStatsResponse:
        return await self.billing_service.get_stats(client_id=client_id)
