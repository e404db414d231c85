"""
Custom exceptions for the RetailMetrics mock API.

This module contains specialized exception classes for handling error
conditions during mock data generation and data store access.
"""

from typing import Any


class RetailMetricsException(Exception):
    """Base exception for all RetailMetrics mock API errors."""

    pass


class GenerationError(RetailMetricsException):
    """Exception raised when mock data generation cannot complete."""

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        original_error: Exception | None = None,
    ):
        self.entity = entity
        self.original_error = original_error

        if entity:
            message = f"Failed to generate {entity}: {message}"

        if original_error:
            message = f"{message} (Original error: {original_error})"

        super().__init__(message)


class EmptySelectionError(GenerationError):
    """Exception raised when a random pick is requested from an empty sequence."""

    def __init__(self, source: str | None = None):
        self.source = source

        message = "Cannot select a random element from an empty sequence"
        if source:
            message = f"{message} ({source})"

        super().__init__(message)


class UnknownRegionError(GenerationError):
    """Exception raised when a region has no configured center or city list."""

    def __init__(self, region: Any, known_regions: list[str] | None = None):
        self.region = region
        self.known_regions = known_regions or []

        message = f"Unknown region: {region!r}"
        if known_regions:
            message = f"{message}. Known regions: {', '.join(known_regions)}"

        super().__init__(message)


class DataStoreNotInitializedError(RetailMetricsException):
    """Exception raised when handlers are called before data generation ran."""

    def __init__(self, message: str = "Mock data store has not been initialized"):
        super().__init__(message)
