"""
Aggregation over a user's expense records.

Everything here is computed from scratch on each call from the records
passed in; nothing is cached or persisted.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Protocol

from app.models.category import ExpenseCategory

ZERO = Decimal("0")


class ExpenseLike(Protocol):
    amount: Decimal
    category: ExpenseCategory
    date: date


@dataclass
class ExpenseAggregate:
    total_expenses: Decimal = ZERO
    expense_count: int = 0
    category_stats: Dict[str, Decimal] = field(default_factory=dict)
    monthly_stats: Dict[str, Decimal] = field(default_factory=dict)


def month_index_key(day: date) -> str:
    """Year plus zero-based month index, e.g. 2026-01-15 -> 2026-0."""
    return f"{day.year}-{day.month - 1}"


def calendar_month_key(day: date) -> str:
    """ISO year-month, e.g. 2026-01-15 -> 2026-01."""
    return day.strftime("%Y-%m")


def _as_decimal(amount) -> Decimal:
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def category_totals(expenses: Iterable[ExpenseLike]) -> Dict[ExpenseCategory, Decimal]:
    """Sum per category; categories without records are absent."""
    totals: Dict[ExpenseCategory, Decimal] = defaultdict(lambda: ZERO)
    for expense in expenses:
        totals[ExpenseCategory(expense.category)] += _as_decimal(expense.amount)
    return dict(totals)


def monthly_totals(expenses: Iterable[ExpenseLike], key=month_index_key) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for expense in expenses:
        totals[key(expense.date)] += _as_decimal(expense.amount)
    return dict(totals)


def compute_stats(expenses: Iterable[ExpenseLike]) -> ExpenseAggregate:
    records = list(expenses)
    if not records:
        return ExpenseAggregate()

    by_category = category_totals(records)
    ordered = sorted(by_category.items(), key=lambda item: ExpenseCategory.order(item[0]))
    return ExpenseAggregate(
        total_expenses=sum((_as_decimal(e.amount) for e in records), ZERO),
        expense_count=len(records),
        category_stats={category.value: total for category, total in ordered},
        monthly_stats=monthly_totals(records),
    )


def total_between(expenses: Iterable[ExpenseLike], start: date, end: date) -> Decimal:
    """Sum of amounts with start <= date <= end."""
    return sum((_as_decimal(e.amount) for e in expenses if start <= e.date <= end), ZERO)
