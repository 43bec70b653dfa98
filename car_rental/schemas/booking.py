from datetime import datetime
from typing import Any

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_OUT = ConfigDict(
    from_attributes=True,
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class BookingCreate(BaseModel):
    """Raw booking request body.

    Fields are untyped and optional so presence and format checks can report
    the booking-specific errors instead of a generic validation failure.
    """

    car_id: Any = None
    from_: Any = Field(default=None, validation_alias="from")
    to: Any = None
    user: Any = None
    email: Any = None
    phone: Any = None

    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
    )


class DateRange(BaseModel):
    from_: str = Field(serialization_alias="from")
    to: str

    model_config = _CAMEL_OUT


class BookingRead(BaseModel):
    id: int
    car_id: int
    from_: str = Field(serialization_alias="from")
    to: str
    user: str
    email: str
    phone: str
    car_name: str
    car_image: str
    total_price: int | float
    created_at: datetime

    model_config = _CAMEL_OUT


class AvailabilityRead(BaseModel):
    car_id: int | None
    booked_dates: list[DateRange]

    model_config = _CAMEL_OUT


class ConflictRead(BaseModel):
    message: str
    conflicting_dates: DateRange

    model_config = _CAMEL_OUT
