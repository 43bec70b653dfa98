from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar

from fastapi import status

from car_rental.models import Booking
from car_rental.schemas.booking import ConflictRead, DateRange


class BookingError(Exception):
    """Base class for booking failures surfaced to the caller."""

    status_code: ClassVar[int] = status.HTTP_400_BAD_REQUEST
    default_message: ClassVar[str] = "Booking request rejected"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        return {"message": self.message}


class MissingFieldsError(BookingError):
    default_message = "All fields are required: carId, from, to, user, email, phone"


class InvalidDateFormatError(BookingError):
    default_message = "Invalid date format"


class InvalidRangeError(BookingError):
    default_message = "End date must be after start date"


class CarNotFoundError(BookingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Car not found"


class BookingConflictError(BookingError):
    """Raised when the requested interval touches an existing booking."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, conflicting: Booking) -> None:
        self.conflicting = conflicting
        super().__init__(
            f"Car is already booked from {_short_date(conflicting.start)} to "
            f"{_short_date(conflicting.end)}. Please choose different dates."
        )

    def to_payload(self) -> dict[str, Any]:
        body = ConflictRead(
            message=self.message,
            conflicting_dates=DateRange(from_=self.conflicting.from_, to=self.conflicting.to),
        )
        return body.model_dump(by_alias=True)


def _short_date(value: datetime) -> str:
    value = value.astimezone(timezone.utc)
    return f"{value.month}/{value.day}/{value.year}"
