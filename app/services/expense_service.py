from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import logging
import uuid

from app.core.exceptions import NotFoundError, ValidationError
from app.models.category import ExpenseCategory, ALL_CATEGORIES
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate, ExpenseUpdate
from app.services.base import BaseService
from app.utils.audit import audit
from app.utils.dates import current_date

logger = logging.getLogger(__name__)


def resolve_category_filter(category: Optional[str]) -> Optional[ExpenseCategory]:
    """None / "" / "All" mean no filter; anything outside the enumeration is rejected."""
    if not category or category == ALL_CATEGORIES:
        return None
    if category not in ExpenseCategory.values():
        raise ValidationError("Invalid category")
    return ExpenseCategory(category)


class ExpenseService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)

    def _owned(self, user_id: uuid.UUID, expense_id: uuid.UUID) -> Expense:
        expense = self.db.query(Expense).filter(
            Expense.id == expense_id,
            Expense.user_id == user_id
        ).first()
        if not expense:
            raise NotFoundError("Expense not found")
        return expense

    def list_expenses(
        self,
        user_id: uuid.UUID,
        category: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Expense]:
        """Newest first. Date bounds are inclusive; a missing bound is open on that side."""
        query = self.db.query(Expense).filter(Expense.user_id == user_id)

        category_filter = resolve_category_filter(category)
        if category_filter is not None:
            query = query.filter(Expense.category == category_filter)
        if start_date:
            query = query.filter(Expense.date >= start_date)
        if end_date:
            query = query.filter(Expense.date <= end_date)

        return query.order_by(Expense.date.desc(), Expense.created_at.desc()).all()

    def all_for_user(self, user_id: uuid.UUID) -> List[Expense]:
        return self.db.query(Expense).filter(Expense.user_id == user_id).all()

    def create_expense(self, user_id: uuid.UUID, expense_create: ExpenseCreate) -> Expense:
        expense = Expense(
            user_id=user_id,
            title=expense_create.title,
            amount=expense_create.amount,
            category=expense_create.category,
            description=expense_create.description,
            date=expense_create.date or current_date(),
        )
        self.db.add(expense)
        self._commit("create expense")
        self.db.refresh(expense)

        logger.info(f"Created expense {expense.id} ({expense.category.value} {expense.amount}) for user {user_id}")
        audit("EXPENSE_CREATED", user_id=user_id, expense_id=expense.id, category=expense.category)
        return expense

    def update_expense(self, user_id: uuid.UUID, expense_id: uuid.UUID, expense_update: ExpenseUpdate) -> Expense:
        expense = self._owned(user_id, expense_id)

        update_data = expense_update.model_dump(exclude_unset=True)
        if update_data.get("date") is None:
            update_data.pop("date", None)
        for field, value in update_data.items():
            setattr(expense, field, value)

        self._commit("update expense")
        self.db.refresh(expense)
        audit("EXPENSE_UPDATED", user_id=user_id, expense_id=expense.id, category=expense.category)
        return expense

    def delete_expense(self, user_id: uuid.UUID, expense_id: uuid.UUID) -> None:
        expense = self._owned(user_id, expense_id)
        self.db.delete(expense)
        self._commit("delete expense")
        audit("EXPENSE_DELETED", user_id=user_id, expense_id=expense_id)
