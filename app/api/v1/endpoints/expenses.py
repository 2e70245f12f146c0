from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import uuid

from app.core.database import get_db
from app.core.deps import get_current_active_user
from app.models.user import User
from app.schemas.analytics import Insight, Prediction, ReceiptScan
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, Expense as ExpenseSchema, ExpenseStats
from app.services.aggregation_service import compute_stats
from app.services.ai_service import scan_receipt
from app.services.expense_service import ExpenseService, resolve_category_filter
from app.services.insight_service import InsightService
from app.utils.dates import current_date

router = APIRouter()


@router.get("", response_model=List[ExpenseSchema])
async def get_expenses(
    category: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Get the user's expenses, optionally filtered by category and inclusive date range"""
    return ExpenseService(db).list_expenses(current_user.id, category, start_date, end_date)


@router.post("", response_model=ExpenseSchema, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_create: ExpenseCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Create a new expense"""
    return ExpenseService(db).create_expense(current_user.id, expense_create)


@router.get("/stats", response_model=ExpenseStats)
async def get_expense_stats(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Totals, per-category and per-month sums over all of the user's expenses"""
    aggregate = compute_stats(ExpenseService(db).all_for_user(current_user.id))
    return ExpenseStats(
        total_expenses=float(aggregate.total_expenses),
        expense_count=aggregate.expense_count,
        category_stats={k: float(v) for k, v in aggregate.category_stats.items()},
        monthly_stats={k: float(v) for k, v in aggregate.monthly_stats.items()},
    )


@router.get("/insights", response_model=List[Insight], response_model_exclude_none=True)
async def get_expense_insights(
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Spending insights derived from category and monthly totals"""
    expenses = ExpenseService(db).all_for_user(current_user.id)
    return InsightService().generate_insights(expenses, current_date())


@router.get("/predict", response_model=List[Prediction], response_model_exclude_none=True)
async def predict_expenses(
    category: Optional[str] = Query(None),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Per-month totals with a rough estimate, plus next month's estimate"""
    resolve_category_filter(category)
    expenses = ExpenseService(db).list_expenses(current_user.id, category=category)
    return InsightService().predict(expenses, current_date())


@router.post("/scan-receipt", response_model=ReceiptScan)
async def scan_receipt_upload(
    receipt: UploadFile = File(...),
    current_user: User = Depends(get_current_active_user),
):
    """Mocked receipt scan; the upload is not stored"""
    content = await receipt.read()
    return scan_receipt(receipt.filename, len(content), current_date())


@router.put("/{expense_id}", response_model=ExpenseSchema)
async def update_expense(
    expense_id: uuid.UUID,
    expense_update: ExpenseUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Replace an expense's fields"""
    return ExpenseService(db).update_expense(current_user.id, expense_id, expense_update)


@router.delete("/{expense_id}")
async def delete_expense(
    expense_id: uuid.UUID,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Delete an expense"""
    ExpenseService(db).delete_expense(current_user.id, expense_id)
    return {"message": "Expense deleted successfully"}
