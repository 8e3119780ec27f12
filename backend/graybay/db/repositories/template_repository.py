"""
Template repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.template import Template


class TemplateRepository(BaseRepository[Template]):
    """Repository for template operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Template, session)

    async def list_recent(self) -> List[Template]:
        """Most recently updated first."""
        result = await self.session.execute(
            select(Template).order_by(Template.updated_at.desc(), Template.id.desc())
        )
        return list(result.scalars().all())
