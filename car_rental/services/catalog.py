from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Final

from pydantic import TypeAdapter, ValidationError

from car_rental.models import Car
from car_rental.schemas.car import CarRead

logger = logging.getLogger(__name__)

_CAR_LIST: Final[TypeAdapter[list[CarRead]]] = TypeAdapter(list[CarRead])


class CatalogLoadError(RuntimeError):
    """The catalog file is missing or does not describe a list of cars."""


class CarCatalog:
    """Read-only collection of rentable cars, kept in file order."""

    def __init__(self, cars: Iterable[Car]) -> None:
        self._cars: Final[tuple[Car, ...]] = tuple(cars)
        self._by_id: Final[dict[int, Car]] = {}
        for car in self._cars:
            if car.id in self._by_id:
                raise CatalogLoadError(f"Duplicate car id {car.id} in catalog")
            self._by_id[car.id] = car

    @classmethod
    def from_file(cls, path: Path) -> CarCatalog:
        """Load and validate a JSON array of cars."""

        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(f"Cannot read catalog {path}: {exc}") from exc

        try:
            entries = _CAR_LIST.validate_python(raw)
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid catalog {path}: {exc}") from exc

        catalog = cls(Car(**entry.model_dump()) for entry in entries)
        logger.debug("Loaded %d cars from %s", len(catalog), path)
        return catalog

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(self._cars)

    def get(self, car_id: int) -> Car | None:
        return self._by_id.get(car_id)

    def search(self, q: str = "", category: str = "") -> list[Car]:
        """Filter by name substring and exact category, both case-insensitive.

        Empty arguments do not filter.
        """

        needle = (q or "").lower()
        wanted = (category or "").lower()
        return [
            car
            for car in self._cars
            if (not needle or needle in car.name.lower())
            and (not wanted or car.category.lower() == wanted)
        ]
