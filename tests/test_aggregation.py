from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from app.models.category import ExpenseCategory
from app.services.aggregation_service import (
    calendar_month_key,
    category_totals,
    compute_stats,
    month_index_key,
    total_between,
)


@dataclass
class Row:
    amount: Decimal
    category: ExpenseCategory
    date: date


def rows():
    return [
        Row(Decimal("25.00"), ExpenseCategory.FOOD, date(2026, 1, 15)),
        Row(Decimal("10.50"), ExpenseCategory.FOOD, date(2026, 2, 1)),
        Row(Decimal("100.00"), ExpenseCategory.BILLS, date(2026, 2, 28)),
        Row(Decimal("4.50"), ExpenseCategory.TRAVEL, date(2025, 12, 31)),
    ]


def test_empty_records_give_zeroed_stats():
    stats = compute_stats([])
    assert stats.total_expenses == 0
    assert stats.expense_count == 0
    assert stats.category_stats == {}
    assert stats.monthly_stats == {}


def test_totals_and_category_partition():
    stats = compute_stats(rows())
    assert stats.total_expenses == Decimal("140.00")
    assert stats.expense_count == 4
    assert stats.category_stats == {
        "Food": Decimal("35.50"),
        "Bills": Decimal("100.00"),
        "Travel": Decimal("4.50"),
    }
    assert sum(stats.category_stats.values()) == stats.total_expenses


def test_categories_without_records_are_absent():
    stats = compute_stats(rows())
    assert "Healthcare" not in stats.category_stats
    assert "Others" not in stats.category_stats


def test_monthly_keys_use_zero_based_month():
    stats = compute_stats(rows())
    assert stats.monthly_stats == {
        "2026-0": Decimal("25.00"),
        "2026-1": Decimal("110.50"),
        "2025-11": Decimal("4.50"),
    }


def test_month_key_helpers():
    assert month_index_key(date(2026, 10, 17)) == "2026-9"
    assert calendar_month_key(date(2026, 10, 17)) == "2026-10"
    assert calendar_month_key(date(2026, 3, 1)) == "2026-03"


def test_category_totals_accepts_plain_values():
    totals = category_totals([Row(Decimal("1.25"), "Food", date(2026, 1, 1)), Row(2, "Food", date(2026, 1, 2))])
    assert totals == {ExpenseCategory.FOOD: Decimal("3.25")}


def test_total_between_is_inclusive_on_both_ends():
    assert total_between(rows(), date(2026, 2, 1), date(2026, 2, 28)) == Decimal("110.50")
    assert total_between(rows(), date(2026, 2, 2), date(2026, 2, 27)) == Decimal("0")


def test_stats_are_stable_across_reads():
    records = rows()
    assert compute_stats(records) == compute_stats(records)
