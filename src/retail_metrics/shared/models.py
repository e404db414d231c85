"""
Pydantic models for all generated mock data.

Every record serializes with camelCase field names, matching the JSON
shape the dashboard consumes. Models are frozen: the data store is built
once at startup and never mutated afterwards.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MockRecord(BaseModel):
    """Base model: camelCase aliases, immutable after construction."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


# ================================
# STORES
# ================================


class Coordinates(MockRecord):
    """Approximate geographic position of a store."""

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude")
    lng: float = Field(..., ge=-180.0, le=180.0, description="Longitude")


class Store(MockRecord):
    """Store master record."""

    id: str = Field(..., min_length=1, description="Sequential store identifier")
    name: str = Field(..., min_length=1, description="Display name")
    region: str = Field(..., min_length=1, description="Sales region")
    store_type: str = Field(..., alias="type", description="Store format")
    address: str = Field(..., min_length=1, description="Street address and city")
    open_date: str = Field(..., description="Opening date (YYYY-MM-DD)")
    size: int = Field(..., gt=0, description="Floor size in square feet")
    coordinates: Coordinates
    manager: str = Field(..., min_length=1, description="Store manager name")


class StoreInfo(Store):
    """Store record augmented with staffing for the detail view."""

    staff_count: int = Field(..., gt=0, description="Number of staff employed")


# ================================
# SALES
# ================================


class SalesSummary(MockRecord):
    total_sales: int
    comparison_sales: int
    percent_change: float
    average_transaction_value: float
    transaction_count: int
    conversion_rate: float


class DailySales(MockRecord):
    date: str = Field(..., description="Calendar day (YYYY-MM-DD)")
    sales: int
    transactions: int
    avg_value: float


class RegionSales(MockRecord):
    region: str
    sales: int
    percent_of_total: float
    store_count: int = Field(..., ge=0)


class CategorySales(MockRecord):
    category: str
    sales: int
    percent_of_total: float
    comparison_sales: int
    percent_change: float


class StoreSales(MockRecord):
    store_id: str
    store_name: str
    sales: int
    rank: int = Field(..., ge=1, le=50)
    percent_of_region: float
    percent_change: float


class SalesData(MockRecord):
    """Sales summary plus breakdowns by date, region, category and store."""

    summary: SalesSummary
    by_date: list[DailySales]
    by_region: list[RegionSales]
    by_category: list[CategorySales]
    by_store: list[StoreSales]


# ================================
# INVENTORY
# ================================


class InventorySummary(MockRecord):
    total_value: int
    total_items: int
    turnover_rate: float
    out_of_stock_percentage: float


class CategoryInventory(MockRecord):
    category: str
    value: int
    item_count: int
    turnover_rate: float


class StoreInventory(MockRecord):
    store_id: str
    store_name: str
    value: int
    item_count: int
    turnover_rate: float
    out_of_stock_items: int = Field(..., ge=0)


class InventoryData(MockRecord):
    """Inventory summary plus breakdowns by category and store."""

    summary: InventorySummary
    by_category: list[CategoryInventory]
    by_store: list[StoreInventory]


# ================================
# STORE DETAILS
# ================================


class DepartmentSales(MockRecord):
    department: str
    sales: int
    percent_of_store: float
    percent_change: float


class StaffPerformance(MockRecord):
    name: str
    position: str
    sales_total: int
    transaction_count: int
    avg_per_transaction: float


class TopSellingItem(MockRecord):
    id: str = Field(..., pattern=r"^P\d{4}$", description="Synthetic product id")
    name: str
    category: str
    units_sold: int
    revenue: int


class InventoryDetails(MockRecord):
    total_value: int
    turnover_rate: float
    top_selling_items: list[TopSellingItem]


class QuarterlyPerformance(MockRecord):
    year: int
    quarter: int = Field(..., ge=1, le=4)
    sales: int
    transactions: int
    avg_value: float


class StoreDetail(MockRecord):
    """Everything the dashboard shows on a single store page."""

    store_info: StoreInfo
    sales_by_department: list[DepartmentSales]
    staff_performance: list[StaffPerformance]
    inventory_details: InventoryDetails
    historical_performance: list[QuarterlyPerformance]


# ================================
# FILTERS
# ================================


class FilterOptions(MockRecord):
    """Static option lists for the dashboard's filter controls."""

    regions: list[str] = Field(..., min_length=1)
    store_types: list[str] = Field(..., min_length=1)
    categories: list[str] = Field(..., min_length=1)
    departments: list[str] = Field(..., min_length=1)
    time_ranges: list[str] = Field(..., min_length=1)
