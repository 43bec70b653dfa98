from fastapi import FastAPI
from fastapi.testclient import TestClient


def _book(client: TestClient, car_id: int, start: str, end: str) -> None:
    response = client.post(
        "/bookings",
        json={
            "carId": car_id,
            "from": start,
            "to": end,
            "user": "Jane Doe",
            "email": "jane@example.com",
            "phone": "+15550100",
        },
    )
    assert response.status_code == 201


def test_health_lists_endpoints(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Car Rental API is running"
    assert data["endpoints"]["bookings"] == "POST /bookings"
    assert data["endpoints"]["availability"] == "GET /cars/:carId/availability"


def test_list_all_cars(client: TestClient) -> None:
    response = client.get("/cars")

    assert response.status_code == 200
    cars = response.json()
    assert cars
    assert set(cars[0]) == {"id", "name", "category", "price", "image", "transmission"}
    assert all(isinstance(car["price"], int) for car in cars)


def test_name_filter_ignores_category(client: TestClient) -> None:
    cars = client.get("/cars", params={"q": "SUV", "category": ""}).json()

    assert cars
    assert all("suv" in car["name"].lower() for car in cars)
    assert {car["category"] for car in cars} != {"SUV"}


def test_category_filter(client: TestClient) -> None:
    cars = client.get("/cars", params={"category": "suv"}).json()

    assert cars
    assert all(car["category"].lower() == "suv" for car in cars)


def test_no_match_returns_empty_list(client: TestClient) -> None:
    assert client.get("/cars", params={"q": "hovercraft"}).json() == []


def test_car_bookings_and_availability(client: TestClient) -> None:
    _book(client, 1, "2024-02-01", "2024-02-05")
    _book(client, 2, "2024-02-01", "2024-02-05")
    _book(client, 1, "2024-02-10T09:00", "2024-02-12T09:00")

    bookings = client.get("/cars/1/bookings").json()
    assert [booking["id"] for booking in bookings] == [1, 3]

    availability = client.get("/cars/1/availability")
    assert availability.status_code == 200
    assert availability.json() == {
        "carId": 1,
        "bookedDates": [
            {"from": "2024-02-01", "to": "2024-02-05"},
            {"from": "2024-02-10T09:00", "to": "2024-02-12T09:00"},
        ],
    }


def test_availability_without_bookings(client: TestClient) -> None:
    assert client.get("/cars/3/bookings").json() == []
    assert client.get("/cars/3/availability").json() == {"carId": 3, "bookedDates": []}


def test_car_id_with_trailing_text_is_read_leniently(client: TestClient) -> None:
    _book(client, 3, "2024-02-01", "2024-02-05")

    bookings = client.get("/cars/3abc/bookings")
    assert bookings.status_code == 200
    assert [booking["carId"] for booking in bookings.json()] == [3]

    availability = client.get("/cars/3abc/availability")
    assert availability.status_code == 200
    assert availability.json() == {
        "carId": 3,
        "bookedDates": [{"from": "2024-02-01", "to": "2024-02-05"}],
    }


def test_car_id_without_digits_matches_nothing(client: TestClient) -> None:
    _book(client, 3, "2024-02-01", "2024-02-05")

    bookings = client.get("/cars/abc/bookings")
    assert bookings.status_code == 200
    assert bookings.json() == []

    availability = client.get("/cars/abc/availability")
    assert availability.status_code == 200
    assert availability.json() == {"carId": None, "bookedDates": []}


def test_unknown_endpoint(client: TestClient) -> None:
    response = client.get("/trucks")

    assert response.status_code == 404
    assert response.json() == {"message": "Endpoint not found"}


def test_unsupported_method(client: TestClient) -> None:
    response = client.delete("/bookings")

    assert response.status_code == 404
    assert response.json() == {"message": "Endpoint not found"}


def test_unhandled_error_is_opaque(application: FastAPI, client: TestClient) -> None:
    @application.get("/explode")
    def explode() -> None:
        raise RuntimeError("database password is hunter2")

    response = client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong!"}


def test_cors_headers(client: TestClient) -> None:
    response = client.get("/cars", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "*"
