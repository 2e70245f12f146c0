from fastapi import APIRouter
from app.api.v1.endpoints import auth, expenses, budgets, goals, ai

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(budgets.router, prefix="/budget", tags=["budget"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(ai.router, prefix="/ai", tags=["ai"])
