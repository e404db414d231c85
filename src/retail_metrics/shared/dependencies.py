"""
FastAPI dependencies for the RetailMetrics mock API.

The generated data store and the active configuration live on
``app.state``; these dependencies hand them to route functions so
handlers never reach for module-level globals.
"""

import logging

from fastapi import Query, Request

from ..api.models import InventoryQueryParams, SalesQueryParams
from ..config.models import MockDataConfig
from .data_store import MockDataStore
from .exceptions import DataStoreNotInitializedError

logger = logging.getLogger(__name__)


# ================================
# STATE DEPENDENCIES
# ================================


def get_data_store(request: Request) -> MockDataStore:
    """Get the data store generated at startup."""
    data_store = getattr(request.app.state, "data_store", None)
    if data_store is None:
        raise DataStoreNotInitializedError()
    return data_store


def get_config(request: Request) -> MockDataConfig:
    """Get the configuration the application was created with."""
    return request.app.state.config


# ================================
# QUERY PARAMETER DEPENDENCIES
# ================================


def get_sales_query_params(
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    store_ids: str | None = Query(None, alias="storeIds"),
    region: str | None = Query(None),
    store_type: str | None = Query(None, alias="storeType"),
) -> SalesQueryParams:
    """Collect the sales filter parameters without validating them."""
    return SalesQueryParams(
        start_date=start_date,
        end_date=end_date,
        store_ids=store_ids,
        region=region,
        store_type=store_type,
    )


def get_inventory_query_params(
    store_ids: str | None = Query(None, alias="storeIds"),
    region: str | None = Query(None),
    store_type: str | None = Query(None, alias="storeType"),
) -> InventoryQueryParams:
    """Collect the inventory filter parameters without validating them."""
    return InventoryQueryParams(
        store_ids=store_ids, region=region, store_type=store_type
    )
