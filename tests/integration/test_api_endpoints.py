"""
Integration tests for the dashboard API endpoints.

Exercises the full FastAPI application, middleware and exception
handlers through TestClient.
"""

import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from retail_metrics.main import create_app
from retail_metrics.shared.dependencies import get_config

pytestmark = pytest.mark.integration

STORE_FIELDS = {
    "id",
    "name",
    "region",
    "type",
    "address",
    "openDate",
    "size",
    "coordinates",
    "manager",
}


class TestStoresEndpoint:
    def test_lists_every_store(self, client):
        response = client.get("/api/stores")
        assert response.status_code == 200

        stores = response.json()
        assert len(stores) == 5
        for store in stores:
            assert set(store) == STORE_FIELDS
            assert set(store["coordinates"]) == {"lat", "lng"}

    def test_store_ids_are_sequential(self, client):
        ids = [store["id"] for store in client.get("/api/stores").json()]
        assert ids == ["ST001", "ST002", "ST003", "ST004", "ST005"]


class TestSalesEndpoint:
    def test_sales_shape(self, client):
        data = client.get("/api/sales").json()
        assert set(data) == {"summary", "byDate", "byRegion", "byCategory", "byStore"}
        assert len(data["byDate"]) == 119
        assert len(data["byStore"]) == 5

    def test_filters_are_accepted_but_ignored(self, client):
        unfiltered = client.get("/api/sales").json()
        filtered = client.get(
            "/api/sales",
            params={
                "startDate": "2023-02-01",
                "endDate": "2023-02-28",
                "storeIds": "ST001",
                "region": "West",
                "storeType": "Outlet",
            },
        )
        assert filtered.status_code == 200
        assert filtered.json() == unfiltered

    def test_repeated_calls_are_identical(self, client):
        assert client.get("/api/sales").json() == client.get("/api/sales").json()


class TestInventoryEndpoint:
    def test_inventory_shape(self, client):
        data = client.get("/api/inventory").json()
        assert set(data) == {"summary", "byCategory", "byStore"}
        assert set(data["summary"]) == {
            "totalValue",
            "totalItems",
            "turnoverRate",
            "outOfStockPercentage",
        }
        assert len(data["byStore"]) == 5

    def test_filters_are_accepted_but_ignored(self, client):
        unfiltered = client.get("/api/inventory").json()
        filtered = client.get("/api/inventory", params={"region": "Northeast"})
        assert filtered.json() == unfiltered


class TestStoreDetailsEndpoint:
    def test_known_store(self, client):
        response = client.get("/api/stores/ST003/details")
        assert response.status_code == 200

        data = response.json()
        assert data["storeInfo"]["id"] == "ST003"
        assert "staffCount" in data["storeInfo"]
        assert len(data["historicalPerformance"]) == 6
        assert "topSellingItems" in data["inventoryDetails"]

    def test_store_info_matches_store_listing(self, client):
        store = client.get("/api/stores").json()[0]
        info = client.get(f"/api/stores/{store['id']}/details").json()["storeInfo"]
        info.pop("staffCount")
        assert info == store

    @pytest.mark.parametrize("store_id", ["INVALID_ID", "ST999", "st001"])
    def test_unknown_store(self, client, store_id):
        response = client.get(f"/api/stores/{store_id}/details")
        assert response.status_code == 404

        data = response.json()
        assert data["error"] == "HTTP_404"
        assert data["message"] == f"Store {store_id} not found"


class TestFiltersEndpoint:
    def test_filter_lists(self, client):
        data = client.get("/api/filters").json()
        assert set(data) == {
            "regions",
            "storeTypes",
            "categories",
            "departments",
            "timeRanges",
        }
        for options in data.values():
            assert options


class TestCoreEndpoints:
    def test_root(self, client):
        data = client.get("/api").json()
        assert data["message"].startswith("Welcome")
        assert data["health_url"] == "/health"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["checks"]["data_store"]["seed"] == 42
        assert data["checks"]["data_store"]["record_counts"]["stores"] == 5
        assert data["checks"]["configuration"]["port"] == 3001

    def test_version(self, client):
        data = client.get("/version").json()
        assert data["name"] == "RetailMetrics Mock API"
        assert data["version"]

    def test_metrics(self, client):
        client.get("/api/stores")
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "retail_metrics_api_requests_total" in response.text
        assert 'endpoint="/api/stores"' in response.text
        assert 'endpoint="/stores"' not in response.text
        assert "retail_metrics_generated_records" in response.text

    def test_unknown_route(self, client):
        assert client.get("/api/unknown").status_code == 404

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/stores",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"] == "http://localhost:3000"
        )


class TestApplicationLifecycle:
    def test_requests_before_generation_are_unavailable(self, small_config):
        client = TestClient(create_app(small_config))

        response = client.get("/api/stores")
        assert response.status_code == 503
        assert response.json()["error"] == "SERVICE_UNAVAILABLE"

        health = client.get("/health").json()
        assert health["status"] == "unhealthy"

    def test_startup_generates_data(self, small_config):
        config = small_config.model_copy(
            update={
                "generation": small_config.generation.model_copy(
                    update={"seed": 7, "store_count": 3}
                )
            }
        )
        with TestClient(create_app(config)) as client:
            assert len(client.get("/api/stores").json()) == 3
            assert client.get("/health").json()["checks"]["data_store"]["seed"] == 7

    def test_startup_is_reproducible(self, small_config):
        with TestClient(create_app(small_config)) as first:
            stores = first.get("/api/stores").json()
        with TestClient(create_app(small_config)) as second:
            assert second.get("/api/stores").json() == stores


def _request_count(endpoint: str, status: str, method: str = "GET") -> float:
    value = REGISTRY.get_sample_value(
        "retail_metrics_api_requests_total",
        {"method": method, "endpoint": endpoint, "status": status},
    )
    return value or 0.0


class TestRequestMetrics:
    @pytest.mark.parametrize(
        "path,label",
        [
            ("/api/stores", "/api/stores"),
            ("/api/stores/ST001/details", "/api/stores/{store_id}/details"),
            ("/api/filters", "/api/filters"),
            ("/health", "/health"),
        ],
    )
    def test_labelled_with_full_route_template(self, client, path, label):
        before = _request_count(label, "200")
        assert client.get(path).status_code == 200
        assert _request_count(label, "200") == before + 1

    def test_unknown_store_counted_as_404(self, client):
        label = "/api/stores/{store_id}/details"
        before = _request_count(label, "404")
        client.get("/api/stores/ST999/details")
        assert _request_count(label, "404") == before + 1

    def test_unmatched_path(self, client):
        before = _request_count("unmatched", "404")
        client.get("/api/nowhere")
        assert _request_count("unmatched", "404") == before + 1

    def test_unhandled_error_counted_as_500(self, small_config, data_store, monkeypatch):
        def broken(data_store):
            raise ZeroDivisionError("division by zero")

        monkeypatch.setattr("retail_metrics.api.router.handle_get_filters", broken)
        before = _request_count("/api/filters", "500")

        app = create_app(small_config, data_store)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/filters")

        assert response.status_code == 500
        assert response.json()["error"] == "INTERNAL_SERVER_ERROR"
        assert _request_count("/api/filters", "500") == before + 1


def test_health_reports_injected_config(small_config, data_store):
    app = create_app(small_config, data_store)
    override = small_config.model_copy(
        update={"server": small_config.server.model_copy(update={"port": 9100})}
    )
    app.dependency_overrides[get_config] = lambda: override

    with TestClient(app) as client:
        configuration = client.get("/health").json()["checks"]["configuration"]

    assert configuration["port"] == 9100
    assert configuration["store_count"] == 5
