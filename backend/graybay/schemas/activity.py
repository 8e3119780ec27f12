"""
Activity feed schemas.
"""

from pydantic import Field
from typing import Optional, List
from datetime import datetime

from graybay.schemas.base import APIModel


class ActivityCreate(APIModel):
    """Schema for recording an activity."""
    type: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    user: Optional[str] = Field(None, max_length=255)
    target: Optional[str] = Field(None, max_length=255)
    status: str = Field("success", max_length=50)


class ActivityResponse(ActivityCreate):
    """Schema for activity response."""
    id: int
    created_at: datetime


class ActivityListResponse(APIModel):
    items: List[ActivityResponse]
    total: int
