from __future__ import annotations

import itertools
import logging
import math
import re
import threading
from datetime import datetime, timezone
from typing import Any, Final

from car_rental.models import Availability, BookedInterval, Booking, Car
from car_rental.services.catalog import CarCatalog
from car_rental.services.errors import (
    BookingConflictError,
    CarNotFoundError,
    InvalidDateFormatError,
    InvalidRangeError,
    MissingFieldsError,
)
from car_rental.services.pricing import calculate_total_price

logger = logging.getLogger(__name__)

_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?\d+)")


class BookingService:
    """Holds the car catalog and the in-memory booking ledger.

    One instance lives for the whole process. Bookings are only ever appended,
    and the conflict check plus the append run under one lock so two parallel
    requests can never commit overlapping rentals for the same car.
    """

    def __init__(self, catalog: CarCatalog) -> None:
        self.catalog: Final[CarCatalog] = catalog
        self._bookings: list[Booking] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list_cars(self, q: str = "", category: str = "") -> list[Car]:
        return self.catalog.search(q, category)

    def create_booking(
        self,
        car_id: Any,
        from_raw: Any,
        to_raw: Any,
        user: Any,
        email: Any,
        phone: Any,
    ) -> Booking:
        """Validate a booking request and record it.

        Checks run in a fixed order and the first failure is raised: missing
        fields, unparseable dates, an empty or inverted range, an unknown car,
        then an overlap with an existing booking of the same car.
        """

        if any(_is_missing(value) for value in (car_id, from_raw, to_raw, user, email, phone)):
            raise MissingFieldsError()

        start = parse_instant(from_raw)
        end = parse_instant(to_raw)
        if start is None or end is None:
            raise InvalidDateFormatError()
        if start >= end:
            raise InvalidRangeError()

        resolved_id = parse_car_id(car_id)
        car = self.catalog.get(resolved_id) if resolved_id is not None else None
        if car is None:
            logger.info("Booking rejected: car %r not found", car_id)
            raise CarNotFoundError()

        with self._lock:
            conflicting = next(
                (
                    booking
                    for booking in self._bookings
                    if booking.car_id == car.id and booking.overlaps(start, end)
                ),
                None,
            )
            if conflicting is not None:
                logger.info(
                    "Booking rejected: car %s already booked %s - %s (booking %s)",
                    car.id,
                    conflicting.from_,
                    conflicting.to,
                    conflicting.id,
                )
                raise BookingConflictError(conflicting)

            booking = Booking(
                id=next(self._ids),
                car_id=car.id,
                from_=from_raw,
                to=to_raw,
                start=start,
                end=end,
                user=_as_text(user),
                email=_as_text(email),
                phone=_as_text(phone),
                car_name=car.name,
                car_image=car.image,
                total_price=calculate_total_price(car.price, start, end),
                created_at=datetime.now(timezone.utc),
            )
            self._bookings.append(booking)

        logger.info("Created booking %s for car %s (%s - %s)", booking.id, car.id, from_raw, to_raw)
        return booking

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings)

    def list_bookings_for_car(self, car_id: int | None) -> list[Booking]:
        if car_id is None:
            return []
        with self._lock:
            return [booking for booking in self._bookings if booking.car_id == car_id]

    def get_availability(self, car_id: int | None) -> Availability:
        """Return the intervals already booked for a car.

        Despite the name this lists taken dates, not free ones.
        """

        return Availability(
            car_id=car_id,
            booked_dates=tuple(
                BookedInterval(from_=booking.from_, to=booking.to)
                for booking in self.list_bookings_for_car(car_id)
            ),
        )


def parse_instant(raw: Any) -> datetime | None:
    """Parse an ISO-8601 date or date-time; naive values are read as UTC."""

    if not isinstance(raw, str):
        return None
    try:
        value = datetime.fromisoformat(raw.strip())
    except ValueError:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def parse_car_id(raw: Any) -> int | None:
    """Read a car id the lenient way browsers send it: ``3``, ``"3"`` or ``"3abc"``."""

    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match:
            return int(match.group(1))
    return None


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False
