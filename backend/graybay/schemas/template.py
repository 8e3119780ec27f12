"""
Template schemas for request/response validation.
"""

from pydantic import Field
from typing import Optional, List
from datetime import datetime

from graybay.schemas.base import APIModel, UpdateModel


class TemplateBase(APIModel):
    """Base template schema."""
    name: str = Field(..., min_length=1, max_length=255)
    author: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    status: Optional[str] = Field(None, max_length=50)
    content: Optional[str] = None


class TemplateCreate(TemplateBase):
    """Schema for creating a template."""
    pass


class TemplateUpdate(UpdateModel):
    """Schema for updating a template (all fields optional)."""
    non_nullable = ("name",)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    author: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    status: Optional[str] = Field(None, max_length=50)
    content: Optional[str] = None


class TemplateResponse(TemplateBase):
    """Schema for template response."""
    id: int
    created_at: datetime
    updated_at: datetime


class TemplateListResponse(APIModel):
    items: List[TemplateResponse]
    total: int
