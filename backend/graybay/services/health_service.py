"""
Health service.
Provides health check functionality.
"""

import time
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from graybay.core.config import settings
from graybay.db.repositories.health_repository import HealthRepository
from graybay.schemas.health import HealthResponse
from graybay.services.base_service import BaseService


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self, session: Optional[AsyncSession] = None) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}
        if session is not None:
            repo = HealthRepository(session=session)
            db_status = await repo.check_database()
            checks["database"] = "ok" if db_status else "error"
        else:
            checks["database"] = "unavailable"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            version=settings.VERSION,
            checks=checks,
        )
