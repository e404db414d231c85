"""
Request handlers for the mock API.

Pure accessors over the in-memory data store. Filter parameters are
accepted for interface compatibility and logged, but never applied.
"""

import logging

from retail_metrics.shared.data_store import MockDataStore
from retail_metrics.shared.models import (
    FilterOptions,
    InventoryData,
    SalesData,
    Store,
    StoreDetail,
)

from .models import InventoryQueryParams, SalesQueryParams

logger = logging.getLogger(__name__)


def handle_get_stores(data_store: MockDataStore) -> list[Store]:
    """All generated stores, in id order."""
    return data_store.stores


def handle_get_sales(
    data_store: MockDataStore, params: SalesQueryParams | None = None
) -> SalesData:
    """Full sales data; filters are not evaluated."""
    if params is not None and params.provided():
        logger.debug(f"Ignoring sales filters: {params.provided()}")
    return data_store.sales_data


def handle_get_inventory(
    data_store: MockDataStore, params: InventoryQueryParams | None = None
) -> InventoryData:
    """Full inventory data; filters are not evaluated."""
    if params is not None and params.provided():
        logger.debug(f"Ignoring inventory filters: {params.provided()}")
    return data_store.inventory_data


def handle_get_store_details(
    data_store: MockDataStore, store_id: str
) -> StoreDetail | None:
    """Detail record for ``store_id``, or None if no such store exists."""
    return data_store.store_details.get(store_id)


def handle_get_filters(data_store: MockDataStore) -> FilterOptions:
    """Static filter option lists."""
    return data_store.filters
