"""
Catalog product schemas.
"""

from typing import List, Optional
import enum

from graybay.schemas.base import APIModel


class ProductCategory(str, enum.Enum):
    """Catalog category."""
    CORE = "core"
    MONTHLY = "monthly"
    ADDON = "addon"


class ProductType(str, enum.Enum):
    """Billing cadence of a product."""
    ONE_TIME = "one-time"
    RECURRING = "recurring"


class Product(APIModel):
    """A purchasable product or service."""
    id: str
    name: str
    category: ProductCategory
    type: ProductType
    price: float
    description: str
    delivery_time: Optional[str] = None
    features: List[str] = []


class ProductListResponse(APIModel):
    """Schema for product list response."""
    items: List[Product]
    total: int
