from car_rental.models.availability import Availability, BookedInterval
from car_rental.models.booking import Booking
from car_rental.models.car import Car

__all__ = ["Car", "Booking", "Availability", "BookedInterval"]
