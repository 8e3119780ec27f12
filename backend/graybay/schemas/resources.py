"""
Resource metrics and capacity recommendation schemas.
"""

from typing import Optional, List
import enum

from graybay.schemas.base import APIModel
from graybay.schemas.service import ServiceDetailResponse


class RecommendationType(str, enum.Enum):
    SCALING = "scaling"
    OPTIMIZATION = "optimization"
    COST = "cost"


class RecommendationImpact(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ResourceMetrics(APIModel):
    """Capacity rollup for one service."""
    total_capacity: float
    current_usage: float
    usage_percentage: float
    average_usage: float
    peak_usage: float
    cost_per_unit: float


class Recommendation(APIModel):
    type: RecommendationType
    title: str
    description: str
    impact: RecommendationImpact
    estimated_savings: Optional[float] = None


class PotentialClientResponse(APIModel):
    id: int
    name: str
    interested_services: List[str]
    probability: float


class ServiceResourcesResponse(APIModel):
    """Service with allocations, capacity metrics, prospects and recommendations."""
    service: ServiceDetailResponse
    resource_metrics: ResourceMetrics
    potential_clients: List[PotentialClientResponse]
    recommendations: List[Recommendation]
