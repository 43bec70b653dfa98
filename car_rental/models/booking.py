from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Booking:
    """Confirmed reservation of one car for a rental interval.

    ``from_`` and ``to`` hold the strings the client sent; ``start`` and
    ``end`` are their parsed, timezone-aware values used for comparisons.
    """

    id: int
    car_id: int
    from_: str
    to: str
    start: datetime
    end: datetime
    user: str
    email: str
    phone: str
    car_name: str
    car_image: str
    total_price: int | float
    created_at: datetime

    def overlaps(self, start: datetime, end: datetime) -> bool:
        # Both boundaries are inclusive: a rental ending when another starts collides.
        return self.start <= end and self.end >= start
