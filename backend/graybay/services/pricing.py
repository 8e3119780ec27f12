"""
Line-item pricing shared by quotes and invoices.
Pure functions: the same items and tax rate always give the same totals.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

from graybay.core.catalog import get_product


class PriceableItem(Protocol):
    product_id: Optional[str]
    description: Optional[str]
    quantity: float
    custom_price: Optional[float]
    discount: Optional[float]


@dataclass
class PricedLine:
    product_id: Optional[str]
    description: Optional[str]
    quantity: float
    unit_price: float
    custom_price: Optional[float]
    discount: Optional[float]
    total: float

    def as_row(self) -> dict:
        """Column values for a quote or invoice item row."""
        return {
            "product_id": self.product_id,
            "description": self.description,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "custom_price": self.custom_price,
            "discount": self.discount,
            "total": self.total,
        }


@dataclass
class PricedItems:
    lines: List[PricedLine] = field(default_factory=list)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0


def price_line(item: PriceableItem) -> PricedLine:
    """
    Price one line.

    Unit price is the custom price when one is set, else the catalog price of
    the product, else 0. Discount is a percentage off the unit price.
    """
    product = get_product(item.product_id)
    if item.custom_price:
        unit_price = item.custom_price
    elif product is not None:
        unit_price = product.price
    else:
        unit_price = 0.0

    discount_amount = unit_price * item.discount / 100 if item.discount else 0.0
    total = (unit_price - discount_amount) * item.quantity

    description = item.description
    if not description and product is not None:
        description = product.name

    return PricedLine(
        product_id=item.product_id,
        description=description,
        quantity=item.quantity,
        unit_price=unit_price,
        custom_price=item.custom_price,
        discount=item.discount,
        total=total,
    )


def price_items(items: Iterable[PriceableItem], tax_rate: Optional[float]) -> PricedItems:
    """Price every line and derive subtotal, tax and total."""
    lines = [price_line(item) for item in items]
    subtotal = sum(line.total for line in lines)
    tax = subtotal * tax_rate / 100 if tax_rate else 0.0
    return PricedItems(lines=lines, subtotal=subtotal, tax=tax, total=subtotal + tax)
