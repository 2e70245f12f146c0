# Import all models here for Alembic
from app.models.user import User
from app.models.expense import Expense
from app.models.budget import Budget
from app.models.goal import Goal

__all__ = [
    "User",
    "Expense",
    "Budget",
    "Goal",
]
