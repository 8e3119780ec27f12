"""
Line item schemas shared by quotes and invoices.
"""

from pydantic import Field
from typing import Optional

from graybay.schemas.base import APIModel


class LineItemInput(APIModel):
    """A requested line; unit price is resolved from the catalog unless customPrice is set."""
    product_id: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    quantity: float = Field(1, gt=0)
    custom_price: Optional[float] = Field(None, ge=0)
    discount: Optional[float] = Field(None, ge=0, le=100)


class LineItemResponse(APIModel):
    """A priced line as stored."""
    product_id: Optional[str] = None
    description: Optional[str] = None
    quantity: float
    unit_price: float
    custom_price: Optional[float] = None
    discount: Optional[float] = None
    total: float
