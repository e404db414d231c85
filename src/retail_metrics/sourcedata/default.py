"""
Default retail profile for mock data generation.

This module re-exports the active default profile's data.
Change the import source to switch profiles.

Usage:
    from retail_metrics.sourcedata.default import REGIONS, PRODUCTS
"""

# Default profile: fashion
from retail_metrics.sourcedata.fashion import (
    BRAND_NAME,
    CATEGORIES,
    CITIES_BY_REGION,
    DEPARTMENTS,
    FIRST_NAMES,
    LAST_NAMES,
    POSITIONS,
    PRODUCTS,
    REGION_CENTERS,
    REGIONS,
    STORE_TYPES,
    STREETS,
    TIME_RANGES,
)

__all__ = [
    "BRAND_NAME",
    "CATEGORIES",
    "CITIES_BY_REGION",
    "DEPARTMENTS",
    "FIRST_NAMES",
    "LAST_NAMES",
    "POSITIONS",
    "PRODUCTS",
    "REGION_CENTERS",
    "REGIONS",
    "STORE_TYPES",
    "STREETS",
    "TIME_RANGES",
]
