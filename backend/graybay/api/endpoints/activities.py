"""
Activity feed endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from graybay.controllers.activity_controller import ActivityController
from graybay.db.session import get_db
from graybay.schemas.activity import ActivityCreate, ActivityResponse, ActivityListResponse
from graybay.utils.filters import parse_filter

router = APIRouter()


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    type: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    user: Optional[str] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
) -> ActivityListResponse:
    """List activities newest first."""
    controller = ActivityController(db)
    return await controller.list_activities(
        type=parse_filter(type),
        status=parse_filter(status),
        user=parse_filter(user),
        limit=limit,
    )


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_data: ActivityCreate,
    db: AsyncSession = Depends(get_db),
) -> ActivityResponse:
    controller = ActivityController(db)
    return await controller.create_activity(activity_data)
