"""
Shared slowapi limiter.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from graybay.core.config import settings


limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

# Limit applied to credential and document endpoints
DEFAULT_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
