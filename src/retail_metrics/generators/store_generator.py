"""
Store master data generation.
"""

import logging
from datetime import datetime

from retail_metrics.shared.models import Store
from retail_metrics.sourcedata.default import (
    BRAND_NAME,
    CITIES_BY_REGION,
    FIRST_NAMES,
    LAST_NAMES,
    REGIONS,
    STORE_TYPES,
    STREETS,
)

from .utils import IdentifierGenerator, RandomSource, format_date

logger = logging.getLogger(__name__)

OPEN_DATE_START = datetime(2015, 1, 1)
OPEN_DATE_END = datetime(2022, 12, 31)

STORE_SIZE_RANGE = (5000, 20000)
STREET_NUMBER_RANGE = (100, 999)


class StoreGeneratorMixin:
    """Mixin for store master data generation."""

    _random: RandomSource
    _ids: IdentifierGenerator

    def generate_stores(self, store_count: int = 200) -> list[Store]:
        """
        Generate stores with sequential ids and region-consistent locations.

        Args:
            store_count: Number of stores to generate

        Returns:
            List of Store records ordered by id
        """
        if store_count < 1:
            raise ValueError("store_count must be >= 1")

        logger.info(f"Generating {store_count} stores...")

        stores = []
        for sequence in range(1, store_count + 1):
            region = self._random.choice(REGIONS, "regions")
            city = self._random.choice(CITIES_BY_REGION.get(region, []), region)
            store_type = self._random.choice(STORE_TYPES, "store types")
            coordinates = self._random.region_coordinates(region)
            open_date = format_date(
                self._random.random_date(OPEN_DATE_START, OPEN_DATE_END)
            )
            size = self._random.randint(*STORE_SIZE_RANGE)
            street_number = self._random.randint(*STREET_NUMBER_RANGE)
            street = self._random.choice(STREETS, "streets")
            manager_first = self._random.choice(FIRST_NAMES, "first names")
            manager_last = self._random.choice(LAST_NAMES, "last names")

            name = f"{BRAND_NAME} {city}"
            if store_type == "Flagship":
                name = f"{name} Flagship"

            stores.append(
                Store(
                    id=self._ids.generate_store_id(sequence),
                    name=name,
                    region=region,
                    store_type=store_type,
                    address=f"{street_number} {street}, {city}",
                    open_date=open_date,
                    size=size,
                    coordinates=coordinates,
                    manager=f"{manager_first} {manager_last}",
                )
            )

        logger.info(f"Generated {len(stores)} store records")
        return stores
