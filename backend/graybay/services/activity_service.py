"""
Activity service: the audit feed shown on the dashboard.
"""

from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.logging import get_logger
from graybay.db.repositories.activity_repository import ActivityRepository
from graybay.schemas.activity import ActivityCreate, ActivityResponse
from graybay.services.base_service import BaseService

logger = get_logger(__name__)

SYSTEM_USER = "System"


class ActivityService(BaseService):
    """Service for activity feed operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.activity_repo = ActivityRepository(session)

    async def list_activities(
        self,
        type: Optional[str] = None,
        status: Optional[str] = None,
        user: Optional[str] = None,
        limit: int = 50,
    ) -> List[ActivityResponse]:
        """List activities newest first."""
        activities = await self.activity_repo.list_recent(type=type, status=status, user=user, limit=limit)
        return [ActivityResponse.model_validate(activity) for activity in activities]

    async def create_activity(self, activity_data: ActivityCreate) -> ActivityResponse:
        """Append an activity entry."""
        activity = await self.activity_repo.create(**activity_data.model_dump())
        await self.session.commit()
        return ActivityResponse.model_validate(activity)

    async def record(
        self,
        type: str,
        description: str,
        user: Optional[str] = None,
        target: Optional[str] = None,
        status: str = "success",
    ) -> bool:
        """
        Record a side-effect activity after the primary change has committed.

        A failure is logged and rolled back on its own; it never undoes the
        change being audited.
        """
        try:
            await self.activity_repo.create(
                type=type,
                description=description,
                user=user or SYSTEM_USER,
                target=target,
                status=status,
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Failed to record activity",
                extra={"activity_type": type, "target": target, "error": str(e)},
                exc_info=True,
            )
            return False
        return True
