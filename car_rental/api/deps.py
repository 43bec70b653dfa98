from fastapi import Request

from car_rental.services.booking_service import BookingService


def get_booking_service(request: Request) -> BookingService:
    """Return the process-wide booking service attached at startup."""

    return request.app.state.booking_service
