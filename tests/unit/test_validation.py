"""
Unit tests for response shape validation.
"""

from retail_metrics.api.validation import (
    VALIDATORS,
    validate_filters,
    validate_inventory,
    validate_sales,
    validate_store_details,
    validate_stores,
)
from retail_metrics.cli import dataset_to_json


def test_generated_dataset_is_valid(data_store):
    payload = dataset_to_json(data_store)
    assert validate_stores(payload["stores"]) == []
    assert validate_sales(payload["sales"]) == []
    assert validate_inventory(payload["inventory"]) == []
    assert validate_filters(payload["filters"]) == []
    for detail in payload["storeDetails"].values():
        assert validate_store_details(detail) == []


def test_stores_must_be_non_empty_list():
    assert validate_stores({}) == ["Expected an array of stores"]
    assert validate_stores([]) == ["Expected at least one store"]


def test_store_missing_fields_and_bad_coordinates():
    problems = validate_stores([{"id": "ST001", "coordinates": {"lat": 1.0}}])
    assert "Store 0: Missing required field: name" in problems
    assert "Store 0: coordinates should have lat and lng properties" in problems


def test_sales_missing_section_and_non_list():
    problems = validate_sales({"summary": {}, "byDate": {}})
    assert "Missing required section: byRegion" in problems
    assert "Missing required summary field: totalSales" in problems
    assert "byDate should be an array" in problems


def test_inventory_wrong_type():
    assert validate_inventory([]) == ["Expected an inventory object"]


def test_store_details_top_selling_items():
    problems = validate_store_details({"inventoryDetails": {}})
    assert "inventoryDetails should contain topSellingItems" in problems


def test_filters_empty_list():
    data = {
        "regions": [],
        "storeTypes": ["Mall"],
        "categories": "Tops",
        "departments": ["Women's"],
    }
    assert validate_filters(data) == [
        "regions should not be empty",
        "categories should be an array",
        "Missing required filter: timeRanges",
    ]


def test_validators_cover_every_endpoint():
    assert set(VALIDATORS) == {"stores", "sales", "inventory", "store_details", "filters"}
