"""
Inventory rollup generation for categories and stores.
"""

import logging

from retail_metrics.shared.models import (
    CategoryInventory,
    InventoryData,
    InventorySummary,
    Store,
    StoreInventory,
)
from retail_metrics.sourcedata.default import CATEGORIES

from .utils import RandomSource

logger = logging.getLogger(__name__)


class InventoryGeneratorMixin:
    """Mixin for inventory data generation."""

    _random: RandomSource

    def generate_inventory_data(self, stores: list[Store]) -> InventoryData:
        """
        Generate the inventory summary and its category and store breakdowns.

        Summary figures are drawn independently of the breakdowns.

        Args:
            stores: Generated store records

        Returns:
            InventoryData aggregate
        """
        logger.info("Generating inventory data...")

        summary = InventorySummary(
            total_items=self._random.randint(300000, 350000),
            total_value=self._random.randint(4000000, 5000000),
            turnover_rate=self._random.randfloat(2.8, 3.5, 1),
            out_of_stock_percentage=self._random.randfloat(0.02, 0.06, 2),
        )

        by_category = []
        for category in CATEGORIES:
            by_category.append(
                CategoryInventory(
                    category=category,
                    item_count=self._random.randint(50000, 100000),
                    value=self._random.randint(800000, 1500000),
                    turnover_rate=self._random.randfloat(2.5, 3.8, 1),
                )
            )

        by_store = []
        for store in stores:
            item_count = self._random.randint(15000, 30000)
            value = self._random.randint(200000, 400000)
            turnover_rate = self._random.randfloat(2.5, 4.0, 1)
            out_of_stock_rate = self._random.randfloat(0.01, 0.05, 3)
            by_store.append(
                StoreInventory(
                    store_id=store.id,
                    store_name=store.name,
                    value=value,
                    item_count=item_count,
                    turnover_rate=turnover_rate,
                    out_of_stock_items=round(item_count * out_of_stock_rate),
                )
            )

        logger.info(
            f"Generated inventory data: {len(by_category)} categories, "
            f"{len(by_store)} stores"
        )
        return InventoryData(summary=summary, by_category=by_category, by_store=by_store)
