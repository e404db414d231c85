"""
Mock data generation orchestrator.

Coordinates store, sales, inventory and store-detail generation using
modular mixins and assembles the in-memory data store.
"""

import time
from datetime import UTC, datetime

from retail_metrics.config.models import MockDataConfig
from retail_metrics.shared.data_store import MockDataStore, default_filter_options
from retail_metrics.shared.exceptions import GenerationError, RetailMetricsException
from retail_metrics.shared.logging_utils import get_structured_logger
from retail_metrics.shared.metrics import Timer, record_generation

from .inventory_generator import InventoryGeneratorMixin
from .sales_generator import SalesGeneratorMixin
from .store_detail_generator import StoreDetailGeneratorMixin
from .store_generator import StoreGeneratorMixin
from .utils import IdentifierGenerator, RandomSource

structured_logger = get_structured_logger(__name__)


def resolve_seed(seed: int | None) -> int:
    """Return ``seed``, or a time-based seed when none is configured."""
    if seed is not None:
        return seed
    return time.time_ns() % 2**32


class MockDataGenerator(
    StoreGeneratorMixin,
    SalesGeneratorMixin,
    InventoryGeneratorMixin,
    StoreDetailGeneratorMixin,
):
    """
    Main mock data generation engine.

    Generates, in order:
    - stores
    - sales data (summary + by date/region/category/store)
    - inventory data (summary + by category/store)
    - store details keyed by store id

    Each step after stores depends only on the store list.
    """

    def __init__(self, config: MockDataConfig, random_source: RandomSource):
        """
        Initialize mock data generator.

        Args:
            config: Configuration containing generation parameters
            random_source: Source of all random draws
        """
        self.config = config
        self._random = random_source
        self._ids = IdentifierGenerator(random_source)

    def _run_step(self, entity: str, step, *args):
        try:
            return step(*args)
        except RetailMetricsException:
            raise
        except Exception as e:
            raise GenerationError("unexpected error", entity=entity, original_error=e) from e

    def generate_all(self, seed: int | None = None) -> MockDataStore:
        """
        Generate the complete dataset.

        Args:
            seed: Seed recorded on the data store for traceability

        Returns:
            Frozen MockDataStore

        Raises:
            GenerationError: If any generation step fails
        """
        stores = self._run_step(
            "stores", self.generate_stores, self.config.generation.store_count
        )
        sales_data = self._run_step("sales data", self.generate_sales_data, stores)
        inventory_data = self._run_step(
            "inventory data", self.generate_inventory_data, stores
        )
        store_details = self._run_step(
            "store details", self.generate_store_details, stores
        )

        return MockDataStore(
            stores=stores,
            sales_data=sales_data,
            inventory_data=inventory_data,
            store_details=store_details,
            filters=default_filter_options(),
            seed=seed,
            generated_at=datetime.now(UTC),
        )


def initialize_mock_data(
    config: MockDataConfig | None = None,
    random_source: RandomSource | None = None,
) -> MockDataStore:
    """
    Build the in-memory data store once.

    Args:
        config: Configuration; defaults are used when omitted
        random_source: Explicit random source. When omitted, one is seeded
            from the configured seed or, failing that, from the clock.

    Returns:
        Frozen MockDataStore
    """
    config = config or MockDataConfig()

    seed = None
    if random_source is None:
        seed = resolve_seed(config.generation.seed)
        random_source = RandomSource(seed)

    with structured_logger.generation_run():
        structured_logger.info(
            "Initializing RetailMetrics mock data",
            seed=seed,
            store_count=config.generation.store_count,
        )

        try:
            with Timer() as timer:
                data_store = MockDataGenerator(config, random_source).generate_all(seed)
        except RetailMetricsException as e:
            structured_logger.error("Mock data initialization failed", error=str(e))
            raise

        counts = data_store.record_counts()
        record_generation(counts, timer.elapsed)
        structured_logger.info(
            "Mock data initialization complete",
            duration_seconds=round(timer.elapsed, 3),
            **counts,
        )

    return data_store
