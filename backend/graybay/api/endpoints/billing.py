"""
Billing statistics endpoint.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.billing_controller import BillingController
from graybay.db.session import get_db
from graybay.schemas.billing import BillingStatsResponse

router = APIRouter()


@router.get("/stats", response_model=BillingStatsResponse, response_model_exclude_none=True)
async def get_billing_stats(
    client_id: Optional[int] = Query(None, alias="clientId"),
    db: AsyncSession = Depends(get_db),
) -> BillingStatsResponse:
    """Revenue, receivables and quote conversion, optionally for one client."""
    controller = BillingController(db)
    return await controller.get_stats(client_id=client_id)
