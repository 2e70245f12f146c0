from dateutil.relativedelta import relativedelta
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence
import logging
import random

from app.models.category import ExpenseCategory
from app.services.aggregation_service import (
    ExpenseLike,
    calendar_month_key,
    category_totals,
    monthly_totals,
    total_between,
)
from app.utils.dates import current_month_window, previous_month_window

logger = logging.getLogger(__name__)


class InsightService:
    """Rule-based insights and a naive next-month estimate.

    The estimate is a jittered average, not a statistical forecast. Pass a
    seeded `random.Random` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate_insights(self, expenses: Sequence[ExpenseLike], today: date) -> List[Dict[str, Any]]:
        insights: List[Dict[str, Any]] = []
        if not expenses:
            return insights

        totals = category_totals(expenses)
        # Highest total wins; ties go to the earlier category in the enumeration
        category, amount = max(
            totals.items(),
            key=lambda item: (item[1], -ExpenseCategory.order(item[0])),
        )
        insights.append({
            "type": "warning",
            "title": f"High {category.value} Spending",
            "description": f"Your {category.value.lower()} expenses are your highest category at ${amount:.2f}.",
            "action": f"Set a {category.value.lower()} budget",
            "value": float(amount),
        })

        trend = self._month_over_month(expenses, today)
        if trend:
            insights.append(trend)
        return insights

    def _month_over_month(self, expenses: Sequence[ExpenseLike], today: date) -> Optional[Dict[str, Any]]:
        current = total_between(expenses, *current_month_window(today))
        previous = total_between(expenses, *previous_month_window(today))
        if previous <= 0 or current == previous:
            return None

        change = (current - previous) * Decimal("100") / previous
        pct = abs(round(float(change), 1))
        if change > 0:
            return {
                "type": "trend",
                "title": "Spending Up This Month",
                "description": f"You have spent {pct}% more this month than last month (${current:.2f} vs ${previous:.2f}).",
                "action": "Review your budget alerts",
                "value": pct,
            }
        return {
            "type": "achievement",
            "title": "Spending Down This Month",
            "description": f"Great job! You have spent {pct}% less this month than last month (${current:.2f} vs ${previous:.2f}).",
            "value": pct,
        }

    def predict(self, expenses: Sequence[ExpenseLike], today: date) -> List[Dict[str, Any]]:
        """One entry per observed month (ascending) plus a synthetic entry for next month."""
        by_month = monthly_totals(expenses, key=calendar_month_key)
        predictions: List[Dict[str, Any]] = []
        for month in sorted(by_month):
            actual = float(by_month[month])
            predictions.append({
                "month": month,
                "actual": actual,
                "predicted": round(actual * self.rng.uniform(0.9, 1.1), 2),
                "confidence": self.rng.randint(70, 99),
            })

        average = float(sum(by_month.values())) / len(by_month) if by_month else 0.0
        next_month = today + relativedelta(months=1)
        predictions.append({
            "month": calendar_month_key(next_month),
            "predicted": round(average * self.rng.uniform(0.9, 1.1), 2),
            "confidence": self.rng.randint(75, 94),
        })
        logger.debug(f"Predicted {len(predictions)} months from {len(by_month)} observed")
        return predictions
