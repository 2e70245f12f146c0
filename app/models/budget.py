from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.core.database import Base
from app.core.types import GUID, value_enum
from app.models.category import ExpenseCategory

DEFAULT_ALERT_THRESHOLD = 80


class Budget(Base):
    __tablename__ = "budgets"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    category = Column(value_enum(ExpenseCategory, "expensecategory"), nullable=False)
    limit_amount = Column(Numeric(10, 2), nullable=False)
    threshold = Column(Integer, nullable=False, default=DEFAULT_ALERT_THRESHOLD)  # percent, 1-100
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="budgets")

    __table_args__ = (
        UniqueConstraint("user_id", "category", name="uq_budget_user_category"),
        CheckConstraint("limit_amount > 0", name="ck_budget_limit_positive"),
        CheckConstraint("threshold BETWEEN 1 AND 100", name="ck_budget_threshold_range"),
    )
