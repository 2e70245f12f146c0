from pydantic import field_validator
from typing import Optional, Dict
from datetime import datetime
from decimal import Decimal
import datetime as dt
import uuid

from app.models.category import ExpenseCategory
from app.schemas.base import ApiModel, parse_money, require_text, iso_date_part


def parse_category(value) -> ExpenseCategory:
    if isinstance(value, ExpenseCategory):
        return value
    if isinstance(value, str) and value in ExpenseCategory.values():
        return ExpenseCategory(value)
    raise ValueError("Invalid category")


class ExpenseBase(ApiModel):
    title: str
    amount: Decimal
    category: ExpenseCategory
    description: Optional[str] = None
    date: Optional[dt.date] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v):
        return require_text(v, "Title is required")

    @field_validator("amount", mode="before")
    @classmethod
    def amount_positive(cls, v):
        return parse_money(v, "Amount must be greater than 0")

    @field_validator("category", mode="before")
    @classmethod
    def category_known(cls, v):
        return parse_category(v)

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("date", mode="before")
    @classmethod
    def date_part(cls, v):
        return iso_date_part(v)


class ExpenseCreate(ExpenseBase):
    pass


class ExpenseUpdate(ExpenseBase):
    """Full replacement of the editable fields; an omitted date keeps the stored one."""
    pass


class Expense(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    amount: float
    category: ExpenseCategory
    description: Optional[str] = None
    date: dt.date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ExpenseStats(ApiModel):
    total_expenses: float
    expense_count: int
    category_stats: Dict[str, float]
    monthly_stats: Dict[str, float]
