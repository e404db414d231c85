"""
In-memory container for the generated mock dataset.

A MockDataStore is built once at startup, attached to the FastAPI
application state and injected into request handlers. It is frozen and
has no re-initialization path.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from retail_metrics.sourcedata.default import (
    CATEGORIES,
    DEPARTMENTS,
    REGIONS,
    STORE_TYPES,
    TIME_RANGES,
)

from .models import FilterOptions, InventoryData, SalesData, Store, StoreDetail


def default_filter_options() -> FilterOptions:
    """Static filter option lists from the active source data profile."""
    return FilterOptions(
        regions=list(REGIONS),
        store_types=list(STORE_TYPES),
        categories=list(CATEGORIES),
        departments=list(DEPARTMENTS),
        time_ranges=list(TIME_RANGES),
    )


class MockDataStore(BaseModel):
    """Process-wide, read-only holder of every generated collection."""

    model_config = ConfigDict(frozen=True)

    stores: list[Store]
    sales_data: SalesData
    inventory_data: InventoryData
    store_details: dict[str, StoreDetail]
    filters: FilterOptions = Field(default_factory=default_filter_options)
    seed: int | None = Field(None, description="Seed the dataset was built from")
    generated_at: datetime | None = Field(None, description="Generation timestamp")

    def record_counts(self) -> dict[str, int]:
        """Number of records per generated collection."""
        return {
            "stores": len(self.stores),
            "sales_by_date": len(self.sales_data.by_date),
            "sales_by_region": len(self.sales_data.by_region),
            "sales_by_category": len(self.sales_data.by_category),
            "sales_by_store": len(self.sales_data.by_store),
            "inventory_by_category": len(self.inventory_data.by_category),
            "inventory_by_store": len(self.inventory_data.by_store),
            "store_details": len(self.store_details),
        }
