from car_rental.schemas.booking import AvailabilityRead, BookingCreate, BookingRead, ConflictRead, DateRange
from car_rental.schemas.car import CarRead

__all__ = [
	"AvailabilityRead",
	"BookingCreate",
	"BookingRead",
	"CarRead",
	"ConflictRead",
	"DateRange",
]
