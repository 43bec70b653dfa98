"""Utility script to validate the configured car catalog."""

from car_rental.core.config import get_settings
from car_rental.services.catalog import CarCatalog


def main() -> None:
    """Ensure the catalog file can be loaded and validated."""

    settings = get_settings()
    catalog = CarCatalog.from_file(settings.catalog_path)
    print(f"Catalog {settings.catalog_path} loaded: {len(catalog)} cars.")


if __name__ == "__main__":
    main()
