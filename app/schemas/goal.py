from pydantic import field_validator
from typing import Optional
from datetime import datetime, date
from decimal import Decimal
import uuid

from app.models.goal import GoalCategory, GoalPriority
from app.schemas.base import ApiModel, parse_money, require_text, iso_date_part


def _goal_enum(enum_cls, value, message):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str) and value in [m.value for m in enum_cls]:
        return enum_cls(value)
    raise ValueError(message)


class GoalCreate(ApiModel):
    title: str
    target_amount: Decimal
    deadline: date
    category: GoalCategory
    priority: GoalPriority = GoalPriority.MEDIUM
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v):
        return require_text(v, "Title is required")

    @field_validator("target_amount", mode="before")
    @classmethod
    def target_positive(cls, v):
        return parse_money(v, "Target amount must be greater than 0")

    @field_validator("deadline", mode="before")
    @classmethod
    def deadline_date(cls, v):
        if v is None or v == "":
            raise ValueError("Valid deadline is required")
        return iso_date_part(v)

    @field_validator("category", mode="before")
    @classmethod
    def category_known(cls, v):
        return _goal_enum(GoalCategory, v, "Invalid category")

    @field_validator("priority", mode="before")
    @classmethod
    def priority_known(cls, v):
        return _goal_enum(GoalPriority, v, "Invalid priority")


class GoalUpdate(ApiModel):
    title: Optional[str] = None
    target_amount: Optional[Decimal] = None
    deadline: Optional[date] = None
    category: Optional[GoalCategory] = None
    priority: Optional[GoalPriority] = None
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_not_empty(cls, v):
        return require_text(v, "Title cannot be empty")

    @field_validator("target_amount", mode="before")
    @classmethod
    def target_positive(cls, v):
        return parse_money(v, "Target amount must be greater than 0")

    @field_validator("deadline", mode="before")
    @classmethod
    def deadline_date(cls, v):
        if v is None or v == "":
            raise ValueError("Valid deadline is required")
        return iso_date_part(v)

    @field_validator("category", mode="before")
    @classmethod
    def category_known(cls, v):
        return _goal_enum(GoalCategory, v, "Invalid category")

    @field_validator("priority", mode="before")
    @classmethod
    def priority_known(cls, v):
        return _goal_enum(GoalPriority, v, "Invalid priority")


class GoalProgress(ApiModel):
    amount: Decimal

    @field_validator("amount", mode="before")
    @classmethod
    def amount_not_negative(cls, v):
        return parse_money(v, "Amount must be a positive number", allow_zero=True)


class Goal(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    target_amount: float
    current_amount: float
    deadline: date
    category: GoalCategory
    priority: GoalPriority
    is_completed: bool
    completed_at: Optional[datetime] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
