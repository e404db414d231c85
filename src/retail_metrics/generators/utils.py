"""
Utility classes and functions for mock data generation.

This module provides the random primitives every generator draws from
(bounded integers and floats, element selection, dates, coordinates)
and identifier generation for stores and products.
"""

import random
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import TypeVar

from retail_metrics.shared.exceptions import EmptySelectionError, UnknownRegionError
from retail_metrics.shared.models import Coordinates
from retail_metrics.sourcedata.default import REGION_CENTERS

T = TypeVar("T")

COORDINATE_JITTER_DEGREES = 1.5
COORDINATE_DECIMALS = 4


class RandomSource:
    """
    Seedable source of the bounded random values used by all generators.

    Wraps a ``random.Random`` instance so that one seed reproduces an
    entire dataset. Construct with an existing ``random.Random`` to share
    its stream, or with a seed.
    """

    def __init__(self, rng: random.Random | int | None = None):
        """
        Initialize random source.

        Args:
            rng: A random.Random to draw from, or a seed for a new one.
                None seeds from system entropy.
        """
        if isinstance(rng, random.Random):
            self._rng = rng
        else:
            self._rng = random.Random(rng)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def randint(self, min_value: int, max_value: int) -> int:
        """Uniform integer in [min_value, max_value], both inclusive."""
        return self._rng.randint(min_value, max_value)

    def randfloat(self, min_value: float, max_value: float, decimals: int = 2) -> float:
        """Uniform float in [min_value, max_value) rounded to ``decimals`` places."""
        value = self._rng.random() * (max_value - min_value) + min_value
        return round(value, decimals)

    def choice(self, items: Sequence[T], source: str | None = None) -> T:
        """
        Pick one element uniformly.

        Args:
            items: Non-empty ordered sequence
            source: Optional label used in the error message

        Raises:
            EmptySelectionError: If ``items`` is empty
        """
        if not items:
            raise EmptySelectionError(source)
        return self._rng.choice(items)

    def random_date(self, start: datetime, end: datetime) -> datetime:
        """Uniform timestamp in [start, end)."""
        return start + (end - start) * self._rng.random()

    def region_coordinates(
        self,
        region: str,
        centers: Mapping[str, tuple[float, float]] = REGION_CENTERS,
    ) -> Coordinates:
        """
        Jitter a region's center point by up to 1.5 degrees on each axis.

        Raises:
            UnknownRegionError: If the region has no center point
        """
        if region not in centers:
            raise UnknownRegionError(region, list(centers))

        lat, lng = centers[region]
        jitter_lat = self.randfloat(
            -COORDINATE_JITTER_DEGREES, COORDINATE_JITTER_DEGREES, COORDINATE_DECIMALS
        )
        jitter_lng = self.randfloat(
            -COORDINATE_JITTER_DEGREES, COORDINATE_JITTER_DEGREES, COORDINATE_DECIMALS
        )
        return Coordinates(
            lat=round(lat + jitter_lat, COORDINATE_DECIMALS),
            lng=round(lng + jitter_lng, COORDINATE_DECIMALS),
        )


def format_date(value: date | datetime) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def safe_ratio(numerator: float, denominator: float, decimals: int = 2) -> float:
    """Rounded ratio, 0.0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return round(numerator / denominator, decimals)


class IdentifierGenerator:
    """Generates synthetic identifiers for stores and products."""

    def __init__(self, random_source: RandomSource):
        self._random = random_source

    def generate_store_id(self, sequence: int) -> str:
        """Generate store id in format ST001."""
        return f"ST{sequence:03d}"

    def generate_product_id(self) -> str:
        """Generate product id in format P1234."""
        return f"P{self._random.randint(1000, 9999)}"
