from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.deps import get_current_active_user
from app.models.user import User
from app.schemas.budget import BudgetSet, Budget as BudgetSchema, BudgetAlert
from app.services.budget_service import BudgetService

router = APIRouter()


@router.get("", response_model=List[BudgetSchema])
async def get_budgets(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Get all budgets for the current user"""
    return BudgetService(db).list_budgets(current_user.id)


@router.post("/set", response_model=BudgetSchema)
async def set_budget(
    budget_set: BudgetSet,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Create or overwrite the budget for a category"""
    return BudgetService(db).set_budget(current_user.id, budget_set)


@router.get("/alerts", response_model=List[BudgetAlert])
async def get_budget_alerts(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Current-month spending against every budget"""
    statuses = BudgetService(db).get_alerts(current_user.id)
    return [
        BudgetAlert(
            category=s.category,
            budget_limit=float(s.budget_limit),
            current_spent=float(s.current_spent),
            alert_threshold=s.alert_threshold,
            is_exceeded=s.is_exceeded,
            percentage=round(float(s.percentage), 2),
            status=s.band.value,
        )
        for s in statuses
    ]
