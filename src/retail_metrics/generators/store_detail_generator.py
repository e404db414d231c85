"""
Per-store detail generation: departments, staff, inventory and history.
"""

import logging

from retail_metrics.shared.models import (
    DepartmentSales,
    InventoryDetails,
    QuarterlyPerformance,
    StaffPerformance,
    Store,
    StoreDetail,
    StoreInfo,
    TopSellingItem,
)
from retail_metrics.sourcedata.default import (
    CATEGORIES,
    DEPARTMENTS,
    FIRST_NAMES,
    LAST_NAMES,
    POSITIONS,
    PRODUCTS,
)

from .utils import IdentifierGenerator, RandomSource, safe_ratio

logger = logging.getLogger(__name__)

# Quarterly history runs from 2022Q1 through 2023Q2 inclusive
HISTORY_FIRST_QUARTER = (2022, 1)
HISTORY_LAST_QUARTER = (2023, 2)

LIST_LENGTH_RANGE = (5, 10)


def history_quarters() -> list[tuple[int, int]]:
    """All (year, quarter) pairs covered by historical performance."""
    quarters = []
    year, quarter = HISTORY_FIRST_QUARTER
    while (year, quarter) <= HISTORY_LAST_QUARTER:
        quarters.append((year, quarter))
        year, quarter = (year + 1, 1) if quarter == 4 else (year, quarter + 1)
    return quarters


class StoreDetailGeneratorMixin:
    """Mixin for per-store detail generation."""

    _random: RandomSource
    _ids: IdentifierGenerator

    def generate_store_details(self, stores: list[Store]) -> dict[str, StoreDetail]:
        """
        Generate one detail record per store.

        Args:
            stores: Generated store records

        Returns:
            Mapping of store id to StoreDetail
        """
        logger.info(f"Generating store details for {len(stores)} stores...")

        store_details = {}
        for store in stores:
            store_info = StoreInfo(
                **store.model_dump(), staff_count=self._random.randint(20, 60)
            )
            store_details[store.id] = StoreDetail(
                store_info=store_info,
                sales_by_department=self._generate_department_sales(),
                staff_performance=self._generate_staff_performance(),
                inventory_details=self._generate_inventory_details(),
                historical_performance=self._generate_historical_performance(),
            )

        logger.info(f"Generated {len(store_details)} store detail records")
        return store_details

    def _generate_department_sales(self) -> list[DepartmentSales]:
        return [
            DepartmentSales(
                department=department,
                sales=self._random.randint(20000, 150000),
                percent_of_store=self._random.randfloat(0.05, 0.25, 2),
                percent_change=self._random.randfloat(-8, 12, 1),
            )
            for department in DEPARTMENTS
        ]

    def _generate_staff_performance(self) -> list[StaffPerformance]:
        staff = []
        for _ in range(self._random.randint(*LIST_LENGTH_RANGE)):
            first_name = self._random.choice(FIRST_NAMES, "first names")
            last_name = self._random.choice(LAST_NAMES, "last names")
            position = self._random.choice(POSITIONS, "positions")
            sales_total = self._random.randint(20000, 80000)
            transaction_count = self._random.randint(200, 800)
            staff.append(
                StaffPerformance(
                    name=f"{first_name} {last_name}",
                    position=position,
                    sales_total=sales_total,
                    transaction_count=transaction_count,
                    avg_per_transaction=safe_ratio(sales_total, transaction_count),
                )
            )
        return staff

    def _generate_inventory_details(self) -> InventoryDetails:
        total_value = self._random.randint(200000, 400000)
        turnover_rate = self._random.randfloat(2.5, 4.0, 1)

        top_selling_items = []
        for _ in range(self._random.randint(*LIST_LENGTH_RANGE)):
            category = self._random.choice(CATEGORIES, "categories")
            product_name = self._random.choice(PRODUCTS.get(category, []), category)
            top_selling_items.append(
                TopSellingItem(
                    id=self._ids.generate_product_id(),
                    name=product_name,
                    category=category,
                    units_sold=self._random.randint(50, 200),
                    revenue=self._random.randint(5000, 15000),
                )
            )

        return InventoryDetails(
            total_value=total_value,
            turnover_rate=turnover_rate,
            top_selling_items=top_selling_items,
        )

    def _generate_historical_performance(self) -> list[QuarterlyPerformance]:
        history = []
        for year, quarter in history_quarters():
            sales = self._random.randint(200000, 400000)
            transactions = self._random.randint(3000, 6000)
            history.append(
                QuarterlyPerformance(
                    year=year,
                    quarter=quarter,
                    sales=sales,
                    transactions=transactions,
                    avg_value=safe_ratio(sales, transactions),
                )
            )
        return history
