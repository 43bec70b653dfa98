from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BookedInterval:
    from_: str
    to: str


@dataclass(frozen=True, slots=True)
class Availability:
    """Intervals already booked for a car, in booking order."""

    car_id: int | None
    booked_dates: tuple[BookedInterval, ...] = ()
