"""
Response shape validation for the dashboard endpoints.

Each validator takes a decoded JSON payload and returns a list of
problems; an empty list means the payload has the shape the dashboard
relies on.
"""

from typing import Any, Callable

STORE_FIELDS = [
    "id",
    "name",
    "region",
    "type",
    "address",
    "openDate",
    "size",
    "coordinates",
    "manager",
]
SALES_SECTIONS = ["summary", "byDate", "byRegion", "byCategory", "byStore"]
SALES_SUMMARY_FIELDS = [
    "totalSales",
    "comparisonSales",
    "percentChange",
    "averageTransactionValue",
    "transactionCount",
    "conversionRate",
]
INVENTORY_SECTIONS = ["summary", "byCategory", "byStore"]
INVENTORY_SUMMARY_FIELDS = [
    "totalValue",
    "totalItems",
    "turnoverRate",
    "outOfStockPercentage",
]
STORE_DETAIL_SECTIONS = [
    "storeInfo",
    "salesByDepartment",
    "staffPerformance",
    "inventoryDetails",
    "historicalPerformance",
]
FILTER_LISTS = ["regions", "storeTypes", "categories", "departments", "timeRanges"]


def _missing(data: dict, keys: list[str], label: str) -> list[str]:
    return [f"Missing required {label}: {key}" for key in keys if key not in data]


def _not_lists(data: dict, keys: list[str]) -> list[str]:
    return [
        f"{key} should be an array"
        for key in keys
        if key in data and not isinstance(data[key], list)
    ]


def validate_stores(data: Any) -> list[str]:
    """Validate the /api/stores payload."""
    if not isinstance(data, list):
        return ["Expected an array of stores"]
    if not data:
        return ["Expected at least one store"]

    problems = []
    for index, store in enumerate(data):
        if not isinstance(store, dict):
            problems.append(f"Store {index} is not an object")
            continue
        problems.extend(
            f"Store {index}: {p}" for p in _missing(store, STORE_FIELDS, "field")
        )
        coordinates = store.get("coordinates")
        if isinstance(coordinates, dict):
            if "lat" not in coordinates or "lng" not in coordinates:
                problems.append(
                    f"Store {index}: coordinates should have lat and lng properties"
                )
        elif coordinates is not None:
            problems.append(f"Store {index}: coordinates should be an object")
    return problems


def validate_sales(data: Any) -> list[str]:
    """Validate the /api/sales payload."""
    if not isinstance(data, dict):
        return ["Expected a sales object"]

    problems = _missing(data, SALES_SECTIONS, "section")
    if isinstance(data.get("summary"), dict):
        problems.extend(_missing(data["summary"], SALES_SUMMARY_FIELDS, "summary field"))
    problems.extend(_not_lists(data, SALES_SECTIONS[1:]))
    return problems


def validate_inventory(data: Any) -> list[str]:
    """Validate the /api/inventory payload."""
    if not isinstance(data, dict):
        return ["Expected an inventory object"]

    problems = _missing(data, INVENTORY_SECTIONS, "section")
    if isinstance(data.get("summary"), dict):
        problems.extend(
            _missing(data["summary"], INVENTORY_SUMMARY_FIELDS, "summary field")
        )
    problems.extend(_not_lists(data, INVENTORY_SECTIONS[1:]))
    return problems


def validate_store_details(data: Any) -> list[str]:
    """Validate the /api/stores/{storeId}/details payload."""
    if not isinstance(data, dict):
        return ["Expected a store detail object"]

    problems = _missing(data, STORE_DETAIL_SECTIONS, "section")
    problems.extend(
        _not_lists(
            data, ["salesByDepartment", "staffPerformance", "historicalPerformance"]
        )
    )
    inventory_details = data.get("inventoryDetails")
    if isinstance(inventory_details, dict):
        if "topSellingItems" not in inventory_details:
            problems.append("inventoryDetails should contain topSellingItems")
        elif not isinstance(inventory_details["topSellingItems"], list):
            problems.append("topSellingItems should be an array")
    return problems


def validate_filters(data: Any) -> list[str]:
    """Validate the /api/filters payload."""
    if not isinstance(data, dict):
        return ["Expected a filters object"]

    problems = []
    for key in FILTER_LISTS:
        if key not in data:
            problems.append(f"Missing required filter: {key}")
        elif not isinstance(data[key], list):
            problems.append(f"{key} should be an array")
        elif not data[key]:
            problems.append(f"{key} should not be empty")
    return problems


VALIDATORS: dict[str, Callable[[Any], list[str]]] = {
    "stores": validate_stores,
    "sales": validate_sales,
    "inventory": validate_inventory,
    "store_details": validate_store_details,
    "filters": validate_filters,
}
