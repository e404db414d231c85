"""Prometheus metrics for the mock API."""
import time

from prometheus_client import REGISTRY, Counter, Gauge, Histogram


def _get_or_create_metric(metric_class, name: str, doc: str, labelnames=None, **kwargs):
    """Get existing metric or create new one to avoid duplication errors in tests."""
    # Counters register without their _total suffix
    candidates = {name, name.removesuffix("_total")}
    for collector in list(REGISTRY._collector_to_names.keys()):
        if getattr(collector, "_name", None) in candidates:
            return collector
    try:
        if labelnames is not None:
            kwargs["labelnames"] = labelnames
        return metric_class(name, doc, registry=REGISTRY, **kwargs)
    except ValueError as e:
        if "Duplicated timeseries" in str(e):
            for collector in list(REGISTRY._collector_to_names.keys()):
                if getattr(collector, "_name", None) in candidates:
                    return collector
        raise


# Request metrics
api_requests_total = _get_or_create_metric(
    Counter,
    "retail_metrics_api_requests_total",
    "Total number of API requests served",
    ["method", "endpoint", "status"],
)

api_request_duration_seconds = _get_or_create_metric(
    Histogram,
    "retail_metrics_api_request_duration_seconds",
    "API request latency in seconds",
    ["method", "endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

store_detail_misses_total = _get_or_create_metric(
    Counter,
    "retail_metrics_store_detail_misses_total",
    "Store detail lookups for unknown store ids",
)

# Generation metrics
generated_records = _get_or_create_metric(
    Gauge,
    "retail_metrics_generated_records",
    "Number of records held in the in-memory data store",
    ["entity"],
)

generation_duration_seconds = _get_or_create_metric(
    Gauge,
    "retail_metrics_generation_duration_seconds",
    "Wall-clock time of the startup data generation pass",
)


def record_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record a served request."""
    api_requests_total.labels(
        method=method, endpoint=endpoint, status=str(status)
    ).inc()
    api_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )


def record_generation(counts: dict[str, int], duration: float) -> None:
    """Publish per-entity record counts and total generation time."""
    for entity, count in counts.items():
        generated_records.labels(entity=entity).set(count)
    generation_duration_seconds.set(duration)


class Timer:
    """Context manager measuring elapsed wall-clock seconds."""

    def __enter__(self):
        self.start = time.perf_counter()
        self.elapsed = 0.0
        return self

    def __exit__(self, *exc):
        self.elapsed = time.perf_counter() - self.start
        return False
