from typing import Optional

from app.models.category import ExpenseCategory
from app.schemas.base import ApiModel


class Insight(ApiModel):
    type: str  # warning | tip | achievement | trend
    title: str
    description: str
    action: Optional[str] = None
    value: Optional[float] = None


class Prediction(ApiModel):
    month: str  # YYYY-MM
    actual: Optional[float] = None
    predicted: float
    confidence: int


class ReceiptScan(ApiModel):
    amount: float
    merchant: str
    date: str
    category: ExpenseCategory
    confidence: int
