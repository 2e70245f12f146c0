from fastapi import APIRouter, Depends

from app.core.deps import get_current_active_user
from app.models.user import User
from app.schemas.ai import ParseExpenseRequest, ParsedExpense
from app.services.ai_service import parse_expense_text
from app.utils.dates import current_date

router = APIRouter()


@router.post("/parse-expense", response_model=ParsedExpense)
async def parse_expense(
    payload: ParseExpenseRequest,
    current_user: User = Depends(get_current_active_user),
):
    """Extract expense fields from a spoken or typed sentence"""
    return parse_expense_text(payload.text, current_date())
