from pydantic import field_validator
import datetime as dt

from app.models.category import ExpenseCategory
from app.schemas.base import ApiModel, require_text


class ParseExpenseRequest(ApiModel):
    text: str

    @field_validator("text", mode="before")
    @classmethod
    def text_required(cls, v):
        return require_text(v, "Text is required")


class ParsedExpense(ApiModel):
    title: str
    amount: float
    category: ExpenseCategory
    description: str
    date: dt.date
