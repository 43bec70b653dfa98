from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Car:
    """A rentable car from the static catalog."""

    id: int
    name: str
    category: str
    price: int | float
    image: str = ""
    transmission: str = ""
