"""
Service, metric and allocation schemas.
"""

from pydantic import Field
from typing import Optional, List
from datetime import datetime

from graybay.schemas.base import APIModel, UpdateModel
from graybay.schemas.common import ClientSummary


class ServiceBase(APIModel):
    """Base service schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    status: str = Field("active", max_length=50)
    capacity_limit: Optional[float] = Field(None, ge=0)
    current_usage: Optional[float] = Field(0, ge=0)
    cost_per_unit: Optional[float] = Field(None, ge=0)
    custom_price: Optional[float] = Field(None, ge=0)
    price_range_min: Optional[float] = Field(None, ge=0)
    price_range_max: Optional[float] = Field(None, ge=0)
    included: bool = True
    health_score: Optional[float] = Field(None, ge=0, le=100)


class ClientServiceCreate(ServiceBase):
    """Schema for creating a service under /clients/{id}/services."""
    pass


class ServiceCreate(ServiceBase):
    """Schema for creating a service; the owning client is in the body."""
    client_id: int


class ServiceUpdate(UpdateModel):
    """Schema for updating a service (all fields optional)."""
    non_nullable = ("name", "type", "status", "included")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    status: Optional[str] = Field(None, max_length=50)
    capacity_limit: Optional[float] = Field(None, ge=0)
    current_usage: Optional[float] = Field(None, ge=0)
    cost_per_unit: Optional[float] = Field(None, ge=0)
    custom_price: Optional[float] = Field(None, ge=0)
    price_range_min: Optional[float] = Field(None, ge=0)
    price_range_max: Optional[float] = Field(None, ge=0)
    included: Optional[bool] = None
    health_score: Optional[float] = Field(None, ge=0, le=100)


class ServiceResponse(ServiceBase):
    """Schema for service response."""
    id: int
    client_id: int
    created_at: datetime
    updated_at: datetime


class ServiceMetricCreate(APIModel):
    """Schema for recording a service metric."""
    name: str = Field(..., min_length=1, max_length=100)
    value: float
    unit: Optional[str] = Field(None, max_length=50)
    status: Optional[str] = Field(None, max_length=50)
    trend: Optional[float] = None


class ServiceMetricResponse(ServiceMetricCreate):
    """Schema for service metric response."""
    id: int
    service_id: int
    timestamp: datetime


class ResourceAllocationCreate(APIModel):
    """Schema for recording a resource allocation; client defaults to the service's client."""
    client_id: Optional[int] = None
    allocated: float = Field(..., ge=0)
    used: float = Field(..., ge=0)
    cost: float = Field(0, ge=0)


class ResourceAllocationResponse(APIModel):
    """Schema for resource allocation response."""
    id: int
    service_id: int
    client_id: int
    allocated: float
    used: float
    cost: float
    timestamp: datetime
    client: Optional[ClientSummary] = None


class ServiceDetailResponse(ServiceResponse):
    """Service with its client and the requested slice of metrics and allocations."""
    client: Optional[ClientSummary] = None
    metrics: List[ServiceMetricResponse] = []
    resource_allocations: List[ResourceAllocationResponse] = []


class ServiceListResponse(APIModel):
    """Schema for service list response."""
    items: List[ServiceDetailResponse]
    total: int
