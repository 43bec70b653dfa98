from fastapi import APIRouter, Depends, status

from car_rental.api.deps import get_booking_service
from car_rental.schemas.booking import BookingCreate, BookingRead
from car_rental.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_in: BookingCreate | None = None,
    service: BookingService = Depends(get_booking_service),
) -> BookingRead:
    """Book a car for a date range if it is free.

    Validation and conflict failures are raised as ``BookingError`` and
    rendered by the application's exception handler.
    """

    booking_in = booking_in or BookingCreate()
    return service.create_booking(
        car_id=booking_in.car_id,
        from_raw=booking_in.from_,
        to_raw=booking_in.to,
        user=booking_in.user,
        email=booking_in.email,
        phone=booking_in.phone,
    )


@router.get("", response_model=list[BookingRead])
def list_bookings(service: BookingService = Depends(get_booking_service)) -> list[BookingRead]:
    """Return every booking in creation order."""

    return service.list_bookings()
