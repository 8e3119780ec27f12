"""
Potential client repository.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from graybay.db.repositories.base_repository import BaseRepository
from graybay.models.potential_client import PotentialClient


class PotentialClientRepository(BaseRepository[PotentialClient]):
    """Read-only lookups for prospects."""

    def __init__(self, session: AsyncSession):
        super().__init__(PotentialClient, session)

    async def list_interested_in(self, service_type: str) -> List[PotentialClient]:
        """Prospects whose serialized interest list mentions the service type, most likely first."""
        result = await self.session.execute(
            select(PotentialClient)
            .where(PotentialClient.interested_services.contains(service_type, autoescape=True))
            .order_by(PotentialClient.probability.desc(), PotentialClient.id)
        )
        return list(result.scalars().all())
