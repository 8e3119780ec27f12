"""
Shared Pydantic base for API schemas.
The dashboard client speaks camelCase; Python code uses snake_case field names.
"""

from typing import ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base schema: camelCase on the wire, ORM attribute loading enabled."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UpdateModel(APIModel):
    """
    Base for partial-update schemas.
    Fields named in `non_nullable` may be omitted but not sent as null.
    """

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode='before')
    @classmethod
    def reject_explicit_nulls(cls, data):
        """Null for a required column is a validation error, not a partial update."""
        if isinstance(data, dict):
            nulls = [
                field
                for field in cls.non_nullable
                if any(key in data and data[key] is None for key in (field, to_camel(field)))
            ]
            if nulls:
                raise ValueError(f"Fields may not be null: {', '.join(nulls)}")
        return data
