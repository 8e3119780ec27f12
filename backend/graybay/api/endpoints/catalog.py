"""
Product catalog endpoint.
"""

from fastapi import APIRouter, Query
from typing import Optional

from graybay.core.catalog import list_products
from graybay.schemas.catalog import ProductCategory, ProductListResponse
from graybay.utils.filters import parse_enum_filter

router = APIRouter()


@router.get("/products", response_model=ProductListResponse)
async def get_products(
    category: Optional[str] = Query(None),
) -> ProductListResponse:
    """List catalog products, optionally for one category."""
    products = list_products(parse_enum_filter(category, ProductCategory, "category"))
    return ProductListResponse(items=products, total=len(products))
