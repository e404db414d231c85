"""
Unit tests for sales data generation.
"""

from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from retail_metrics.config.models import MockDataConfig
from retail_metrics.generators import MockDataGenerator, RandomSource
from retail_metrics.sourcedata.default import CATEGORIES, REGIONS


@pytest.fixture
def sales(generator, stores):
    return generator.generate_sales_data(stores)


class TestDailySales:
    def test_window_covers_119_days(self, sales):
        assert len(sales.by_date) == 119
        assert sales.by_date[0].date == "2023-01-01"
        assert sales.by_date[-1].date == "2023-04-29"

    def test_dates_strictly_increasing(self, sales):
        dates = [day.date for day in sales.by_date]
        assert dates == sorted(dates)
        assert len(set(dates)) == len(dates)

    def test_daily_ranges_and_average(self, sales):
        for day in sales.by_date:
            assert 80000 <= day.sales <= 120000
            assert 1200 <= day.transactions <= 1800
            assert day.avg_value == round(day.sales / day.transactions, 2)


class TestRegionSales:
    def test_one_record_per_region(self, sales):
        assert [r.region for r in sales.by_region] == REGIONS

    def test_store_counts_exact(self, sales, stores):
        expected = Counter(store.region for store in stores)
        for record in sales.by_region:
            assert record.store_count == expected.get(record.region, 0)
        assert sum(r.store_count for r in sales.by_region) == len(stores)

    def test_percent_of_total_sums_to_one(self, sales):
        total = sum(r.percent_of_total for r in sales.by_region)
        assert abs(total - 1.0) <= 0.01 * len(sales.by_region)

    def test_percent_of_total_derived_from_sales(self, sales):
        region_total = sum(r.sales for r in sales.by_region)
        for record in sales.by_region:
            assert 800000 <= record.sales <= 1200000
            assert record.percent_of_total == round(record.sales / region_total, 2)


class TestCategorySales:
    def test_one_record_per_category(self, sales):
        assert [c.category for c in sales.by_category] == CATEGORIES

    def test_percent_of_total_sums_to_one(self, sales):
        total = sum(c.percent_of_total for c in sales.by_category)
        assert abs(total - 1.0) <= 0.01 * len(sales.by_category)

    def test_comparison_within_change_band(self, sales):
        for record in sales.by_category:
            assert 500000 <= record.sales <= 1500000
            ratio = record.comparison_sales / record.sales
            assert 0.8 - 1e-5 <= ratio <= 1.1 + 1e-5

    def test_percent_change_consistent_with_comparison(self, sales):
        for record in sales.by_category:
            recomputed = (
                (record.sales - record.comparison_sales) / record.comparison_sales * 100
            )
            assert record.percent_change == pytest.approx(recomputed, abs=0.06)


class TestStoreSales:
    def test_one_record_per_store_in_order(self, sales, stores):
        assert [s.store_id for s in sales.by_store] == [store.id for store in stores]
        assert [s.store_name for s in sales.by_store] == [store.name for store in stores]

    def test_rank_cycles_every_fifty(self, sales):
        ranks = [s.rank for s in sales.by_store]
        assert ranks == [i % 50 + 1 for i in range(len(ranks))]
        assert ranks[50] == 1

    def test_percent_of_region_uses_synthetic_total(self, sales, stores):
        counts = Counter(store.region for store in stores)
        region_by_id = {store.id: store.region for store in stores}
        for record in sales.by_store:
            synthetic_total = counts[region_by_id[record.store_id]] * 200000
            assert 100000 <= record.sales <= 300000
            assert record.percent_of_region == round(record.sales / synthetic_total, 2)
            assert -10 <= record.percent_change <= 15


class TestSalesSummary:
    def test_total_adds_daily_and_regional_sales(self, sales):
        expected = sum(d.sales for d in sales.by_date) + sum(
            r.sales for r in sales.by_region
        )
        assert sales.summary.total_sales == expected

    def test_transaction_count_and_average(self, sales):
        transactions = sum(d.transactions for d in sales.by_date)
        assert sales.summary.transaction_count == transactions
        assert sales.summary.average_transaction_value == round(
            sales.summary.total_sales / transactions, 2
        )

    def test_comparison_and_conversion(self, sales):
        summary = sales.summary
        ratio = summary.comparison_sales / summary.total_sales
        assert 0.9 - 1e-6 <= ratio <= 1.05 + 1e-6
        assert 0.2 <= summary.conversion_rate <= 0.3
        recomputed = (
            (summary.total_sales - summary.comparison_sales)
            / summary.comparison_sales
            * 100
        )
        assert summary.percent_change == pytest.approx(recomputed, abs=0.06)


@settings(max_examples=25, deadline=None)
@given(
    seed=st.integers(min_value=0, max_value=2**32 - 1),
    store_count=st.integers(min_value=1, max_value=30),
)
def test_breakdowns_consistent_for_any_seed(seed, store_count):
    """Percent shares and store counts hold regardless of the draw."""
    generator = MockDataGenerator(MockDataConfig(), RandomSource(seed))
    stores = generator.generate_stores(store_count)
    sales = generator.generate_sales_data(stores)

    for records in (sales.by_region, sales.by_category):
        total = sum(r.percent_of_total for r in records)
        assert abs(total - 1.0) <= 0.01 * len(records)
    assert sum(r.store_count for r in sales.by_region) == store_count
    assert [s.store_id for s in sales.by_store] == [s.id for s in stores]
