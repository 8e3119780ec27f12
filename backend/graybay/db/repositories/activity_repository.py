"""
Activity repository for the audit trail.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.activity import Activity


class ActivityRepository(BaseRepository[Activity]):
    """Repository for activity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Activity, session)

    async def list_recent(
        self,
        type: Optional[str] = None,
        status: Optional[str] = None,
        user: Optional[str] = None,
        limit: int = 50,
    ) -> List[Activity]:
        """Newest first, filtered by exact match on each given field."""
        query = select(Activity)
        if type is not None:
            query = query.where(Activity.type == type)
        if status is not None:
            query = query.where(Activity.status == status)
        if user is not None:
            query = query.where(Activity.user == user)
        query = query.order_by(Activity.created_at.desc(), Activity.id.desc()).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
