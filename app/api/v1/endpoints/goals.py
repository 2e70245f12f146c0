from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import uuid

from app.core.database import get_db
from app.core.deps import get_current_active_user
from app.models.user import User
from app.schemas.goal import GoalCreate, GoalUpdate, GoalProgress, Goal as GoalSchema
from app.services.goal_service import GoalService

router = APIRouter()


@router.get("", response_model=List[GoalSchema])
async def get_goals(current_user: User = Depends(get_current_active_user), db: Session = Depends(get_db)):
    return GoalService(db).list_goals(current_user.id)


@router.post("", response_model=GoalSchema, status_code=status.HTTP_201_CREATED)
async def create_goal(payload: GoalCreate, current_user: User = Depends(get_current_active_user), db: Session = Depends(get_db)):
    return GoalService(db).create_goal(current_user.id, payload)


@router.put("/{goal_id}/progress", response_model=GoalSchema)
async def update_goal_progress(goal_id: uuid.UUID, payload: GoalProgress, current_user: User = Depends(get_current_active_user), db: Session = Depends(get_db)):
    return GoalService(db).add_progress(current_user.id, goal_id, payload.amount)


@router.put("/{goal_id}", response_model=GoalSchema)
async def update_goal(goal_id: uuid.UUID, payload: GoalUpdate, current_user: User = Depends(get_current_active_user), db: Session = Depends(get_db)):
    return GoalService(db).update_goal(current_user.id, goal_id, payload)


@router.delete("/{goal_id}")
async def delete_goal(goal_id: uuid.UUID, current_user: User = Depends(get_current_active_user), db: Session = Depends(get_db)):
    GoalService(db).delete_goal(current_user.id, goal_id)
    return {"message": "Goal deleted successfully"}
