from fastapi import APIRouter

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "cars": "GET /cars?q=&category=",
    "bookings": "POST /bookings",
    "allBookings": "GET /bookings",
    "carBookings": "GET /cars/:carId/bookings",
    "availability": "GET /cars/:carId/availability",
}


@router.get("/")
def health_check() -> dict[str, object]:
    return {"message": "Car Rental API is running", "endpoints": ENDPOINTS}
