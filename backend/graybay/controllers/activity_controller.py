"""
Activity controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.controllers.base_controller import BaseController
from graybay.services.activity_service import ActivityService
from graybay.schemas.activity import ActivityCreate, ActivityResponse, ActivityListResponse


class ActivityController(BaseController):
    """Controller for the activity feed."""

    def __init__(self, session: AsyncSession):
        self.activity_service = ActivityService(session)

    async def list_activities(
        self,
        type: Optional[str] = None,
        status: Optional[str] = None,
        user: Optional[str] = None,
        limit: int = 50,
    ) -> ActivityListResponse:
        activities = await self.activity_service.list_activities(
            type=type, status=status, user=user, limit=limit
        )
        return ActivityListResponse(items=activities, total=len(activities))

    async def create_activity(self, activity_data: ActivityCreate) -> ActivityResponse:
        return await self.activity_service.create_activity(activity_data)
