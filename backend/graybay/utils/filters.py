"""
Query-string filter parsing shared by list endpoints.
"""

import enum
from typing import Optional, Type, TypeVar

from graybay.core.exceptions import ValidationError

EnumType = TypeVar("EnumType", bound=enum.Enum)

# Sentinel the dashboard sends for "no filter"
ALL = "all"


def parse_filter(value: Optional[str]) -> Optional[str]:
    """Normalize a free-text filter; empty and `all` mean no filter."""
    if value is None or value == "" or value == ALL:
        return None
    return value


def parse_enum_filter(value: Optional[str], enum_cls: Type[EnumType], field: str) -> Optional[EnumType]:
    """Parse a filter into an enum member, rejecting unknown values."""
    value = parse_filter(value)
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(
            f"Invalid {field} filter",
            details={"field": field, "value": value, "allowed": [member.value for member in enum_cls]},
        )
