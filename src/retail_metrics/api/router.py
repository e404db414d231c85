"""
FastAPI router for the dashboard data endpoints.

This module maps each read-only endpoint to exactly one handler call
over the injected data store.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..shared.data_store import MockDataStore
from ..shared.dependencies import (
    get_data_store,
    get_inventory_query_params,
    get_sales_query_params,
)
from ..shared.metrics import store_detail_misses_total
from ..shared.models import FilterOptions, InventoryData, SalesData, Store, StoreDetail
from .handlers import (
    handle_get_filters,
    handle_get_inventory,
    handle_get_sales,
    handle_get_store_details,
    handle_get_stores,
)
from .models import ErrorResponse, InventoryQueryParams, SalesQueryParams

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/stores",
    response_model=list[Store],
    summary="List stores",
    description="Get every generated store",
)
async def list_stores(data_store: MockDataStore = Depends(get_data_store)):
    """List all stores."""
    return handle_get_stores(data_store)


@router.get(
    "/sales",
    response_model=SalesData,
    summary="Get sales data",
    description=(
        "Get the sales summary and breakdowns. "
        "Filter parameters are accepted but not applied."
    ),
)
async def get_sales(
    params: SalesQueryParams = Depends(get_sales_query_params),
    data_store: MockDataStore = Depends(get_data_store),
):
    """Get sales data."""
    return handle_get_sales(data_store, params)


@router.get(
    "/inventory",
    response_model=InventoryData,
    summary="Get inventory data",
    description=(
        "Get the inventory summary and breakdowns. "
        "Filter parameters are accepted but not applied."
    ),
)
async def get_inventory(
    params: InventoryQueryParams = Depends(get_inventory_query_params),
    data_store: MockDataStore = Depends(get_data_store),
):
    """Get inventory data."""
    return handle_get_inventory(data_store, params)


@router.get(
    "/stores/{store_id}/details",
    response_model=StoreDetail,
    responses={404: {"model": ErrorResponse, "description": "Unknown store id"}},
    summary="Get store details",
    description="Get departments, staff, inventory and history for one store",
)
async def get_store_details(
    store_id: str, data_store: MockDataStore = Depends(get_data_store)
):
    """Get details for a single store."""
    store_detail = handle_get_store_details(data_store, store_id)
    if store_detail is None:
        store_detail_misses_total.inc()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Store {store_id} not found",
        )
    return store_detail


@router.get(
    "/filters",
    response_model=FilterOptions,
    summary="Get filter options",
    description="Get the static option lists for dashboard filters",
)
async def get_filters(data_store: MockDataStore = Depends(get_data_store)):
    """Get filter options."""
    return handle_get_filters(data_store)
