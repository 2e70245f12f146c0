from pydantic import AliasChoices, Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal, InvalidOperation
import uuid

from app.models.budget import DEFAULT_ALERT_THRESHOLD
from app.models.category import ExpenseCategory
from app.schemas.base import ApiModel, parse_money
from app.schemas.expense import parse_category

THRESHOLD_MESSAGE = "Threshold must be between 1 and 100"


class BudgetSet(ApiModel):
    category: ExpenseCategory
    limit: Decimal
    threshold: int = DEFAULT_ALERT_THRESHOLD

    @field_validator("category", mode="before")
    @classmethod
    def category_known(cls, v):
        return parse_category(v)

    @field_validator("limit", mode="before")
    @classmethod
    def limit_positive(cls, v):
        return parse_money(v, "Budget limit must be greater than 0")

    @field_validator("threshold", mode="before")
    @classmethod
    def threshold_range(cls, v):
        if isinstance(v, bool) or v is None:
            raise ValueError(THRESHOLD_MESSAGE)
        # 80, 80.0 and "80.0" are the same threshold
        try:
            number = Decimal(str(v).strip())
        except (InvalidOperation, ValueError):
            raise ValueError(THRESHOLD_MESSAGE)
        if not number.is_finite() or number != number.to_integral_value():
            raise ValueError(THRESHOLD_MESSAGE)
        if not 1 <= number <= 100:
            raise ValueError(THRESHOLD_MESSAGE)
        return int(number)


class Budget(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID
    category: ExpenseCategory
    limit: float = Field(validation_alias=AliasChoices("limit", "limit_amount"))
    threshold: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BudgetAlert(ApiModel):
    category: ExpenseCategory
    budget_limit: float
    current_spent: float
    alert_threshold: int
    is_exceeded: bool
    percentage: float
    status: str  # "ok" | "warning" | "critical"
