from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional
import enum
import logging
import uuid

from app.core.exceptions import DatabaseError
from app.models.budget import Budget
from app.models.category import ExpenseCategory
from app.models.expense import Expense
from app.schemas.budget import BudgetSet
from app.services.aggregation_service import ZERO, category_totals
from app.services.base import BaseService
from app.utils.audit import audit
from app.utils.dates import current_date, current_month_window

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class AlertBand(str, enum.Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class BudgetStatus:
    category: ExpenseCategory
    budget_limit: Decimal
    alert_threshold: int
    current_spent: Decimal
    percentage: Decimal
    is_exceeded: bool
    band: AlertBand


def spend_percentage(current_spent: Decimal, limit: Decimal) -> Decimal:
    if limit <= 0:
        raise ValueError("Budget limit must be greater than 0")
    return current_spent * HUNDRED / limit


def alert_band(percentage: Decimal, threshold: int) -> AlertBand:
    """>= 100 is critical, >= the budget's own threshold is a warning, anything lower is ok."""
    if percentage >= HUNDRED:
        return AlertBand.CRITICAL
    if percentage >= threshold:
        return AlertBand.WARNING
    return AlertBand.OK


def evaluate_budget(category: ExpenseCategory, limit: Decimal, threshold: int, current_spent: Decimal) -> BudgetStatus:
    percentage = spend_percentage(current_spent, limit)
    return BudgetStatus(
        category=category,
        budget_limit=limit,
        alert_threshold=threshold,
        current_spent=current_spent,
        percentage=percentage,
        is_exceeded=percentage >= threshold,
        band=alert_band(percentage, threshold),
    )


class BudgetService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)

    def _find(self, user_id: uuid.UUID, category: ExpenseCategory) -> Optional[Budget]:
        return self.db.query(Budget).filter(
            Budget.user_id == user_id,
            Budget.category == category
        ).first()

    def list_budgets(self, user_id: uuid.UUID) -> List[Budget]:
        budgets = self.db.query(Budget).filter(Budget.user_id == user_id).all()
        return sorted(budgets, key=lambda b: ExpenseCategory.order(b.category))

    def set_budget(self, user_id: uuid.UUID, budget_set: BudgetSet) -> Budget:
        """Create or overwrite the single budget row for (user, category)."""
        budget = self._find(user_id, budget_set.category)
        if budget is None:
            budget = Budget(
                user_id=user_id,
                category=budget_set.category,
                limit_amount=budget_set.limit,
                threshold=budget_set.threshold,
            )
            self.db.add(budget)
            try:
                self.db.flush()
            except IntegrityError:
                # A concurrent request created the row first; last write wins
                self.db.rollback()
                budget = self._find(user_id, budget_set.category)
                if budget is None:
                    raise DatabaseError("Failed to set budget")
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Failed to set budget: {e}")
                raise DatabaseError("Failed to set budget", details=str(e)) from e

        budget.limit_amount = budget_set.limit
        budget.threshold = budget_set.threshold
        self._commit("set budget")

        self.db.refresh(budget)
        logger.info(f"Budget for {budget.category.value} set to {budget.limit_amount} ({budget.threshold}%) for user {user_id}")
        audit("BUDGET_SET", user_id=user_id, category=budget.category, threshold=budget.threshold)
        return budget

    def get_alerts(self, user_id: uuid.UUID, today: Optional[date] = None) -> List[BudgetStatus]:
        """One status per budget row, measured against this calendar month's spending."""
        budgets = self.list_budgets(user_id)
        if not budgets:
            return []

        start, end = current_month_window(today or current_date())
        month_expenses = self.db.query(Expense).filter(
            Expense.user_id == user_id,
            Expense.date >= start,
            Expense.date <= end
        ).all()
        spent = category_totals(month_expenses)

        return [
            evaluate_budget(
                budget.category,
                Decimal(str(budget.limit_amount)),
                budget.threshold,
                spent.get(budget.category, ZERO),
            )
            for budget in budgets
        ]
