from fastapi import APIRouter, Depends

from car_rental.api.deps import get_booking_service
from car_rental.schemas.booking import AvailabilityRead, BookingRead
from car_rental.schemas.car import CarRead
from car_rental.services.booking_service import BookingService, parse_car_id

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("", response_model=list[CarRead])
def list_cars(
    q: str = "",
    category: str = "",
    service: BookingService = Depends(get_booking_service),
) -> list[CarRead]:
    """Return catalog cars filtered by name substring and category."""

    return service.list_cars(q, category)


@router.get("/{car_id}/bookings", response_model=list[BookingRead])
def list_car_bookings(
    car_id: str,
    service: BookingService = Depends(get_booking_service),
) -> list[BookingRead]:
    """Return the bookings recorded for one car, oldest first."""

    return service.list_bookings_for_car(parse_car_id(car_id))


@router.get("/{car_id}/availability", response_model=AvailabilityRead)
def get_car_availability(
    car_id: str,
    service: BookingService = Depends(get_booking_service),
) -> AvailabilityRead:
    """Return the date ranges already booked for one car.

    Ids are read like ``carId`` in a booking request, so ``3abc`` is car 3
    and an id without leading digits matches nothing.
    """

    return service.get_availability(parse_car_id(car_id))
