"""Common Pydantic schemas and base classes."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer


def _float_as_written(value):
    # JSON 1.3 arrives as a float; keep the digits the client sent
    return str(value) if isinstance(value, float) else value


# Decimal internally, plain JSON numbers on the wire
Money = Annotated[
    Decimal,
    BeforeValidator(_float_as_written),
    PlainSerializer(float, return_type=float, when_used="json"),
]
Odds = Annotated[
    Decimal,
    BeforeValidator(_float_as_written),
    PlainSerializer(float, return_type=float, when_used="json"),
]
Percent = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(round(v, 2)), return_type=float, when_used="json"),
]


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseSchema):
    success: bool = True
    message: str
