import pytest
from fastapi.testclient import TestClient

from car_rental.main import create_app
from car_rental.models import Car
from car_rental.services.booking_service import BookingService
from car_rental.services.catalog import CarCatalog


@pytest.fixture
def application():
    return create_app()


@pytest.fixture
def client(application) -> TestClient:
    return TestClient(application, raise_server_exceptions=False)


@pytest.fixture
def catalog() -> CarCatalog:
    return CarCatalog(
        [
            Car(id=1, name="Compact Hatch", category="Economy", price=50, image="compact.jpg"),
            Car(id=2, name="Family SUV", category="SUV", price=80, image="suv.jpg"),
        ]
    )


@pytest.fixture
def service(catalog: CarCatalog) -> BookingService:
    return BookingService(catalog)
