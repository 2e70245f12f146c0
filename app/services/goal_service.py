from sqlalchemy.orm import Session
from datetime import datetime, timezone
from decimal import Decimal
from typing import List
import logging
import uuid

from app.core.exceptions import NotFoundError
from app.models.goal import Goal
from app.schemas.goal import GoalCreate, GoalUpdate
from app.services.base import BaseService
from app.utils.audit import audit

logger = logging.getLogger(__name__)


class GoalService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)

    def _owned(self, user_id: uuid.UUID, goal_id: uuid.UUID) -> Goal:
        goal = self.db.query(Goal).filter(Goal.id == goal_id, Goal.user_id == user_id).first()
        if not goal:
            raise NotFoundError("Goal not found")
        return goal

    def list_goals(self, user_id: uuid.UUID) -> List[Goal]:
        return self.db.query(Goal).filter(Goal.user_id == user_id).order_by(Goal.created_at.desc()).all()

    def create_goal(self, user_id: uuid.UUID, goal_create: GoalCreate) -> Goal:
        goal = Goal(
            user_id=user_id,
            **goal_create.model_dump(),
            current_amount=Decimal("0"),
            is_completed=False,
        )
        self.db.add(goal)
        self._commit("create goal")
        self.db.refresh(goal)
        audit("GOAL_CREATED", user_id=user_id, goal_id=goal.id, category=goal.category)
        return goal

    def update_goal(self, user_id: uuid.UUID, goal_id: uuid.UUID, goal_update: GoalUpdate) -> Goal:
        goal = self._owned(user_id, goal_id)
        for field, value in goal_update.model_dump(exclude_unset=True).items():
            setattr(goal, field, value)
        self._commit("update goal")
        self.db.refresh(goal)
        audit("GOAL_UPDATED", user_id=user_id, goal_id=goal.id)
        return goal

    def add_progress(self, user_id: uuid.UUID, goal_id: uuid.UUID, amount: Decimal) -> Goal:
        """Add to the saved amount; reaching the target marks the goal completed."""
        goal = self._owned(user_id, goal_id)
        goal.current_amount = Decimal(str(goal.current_amount or 0)) + amount

        if not goal.is_completed and goal.current_amount >= Decimal(str(goal.target_amount)):
            goal.is_completed = True
            goal.completed_at = datetime.now(timezone.utc)
            logger.info(f"Goal {goal.id} completed for user {user_id}")

        self._commit("update goal progress")
        self.db.refresh(goal)
        audit("GOAL_PROGRESS", user_id=user_id, goal_id=goal.id, completed=goal.is_completed)
        return goal

    def delete_goal(self, user_id: uuid.UUID, goal_id: uuid.UUID) -> None:
        goal = self._owned(user_id, goal_id)
        self.db.delete(goal)
        self._commit("delete goal")
        audit("GOAL_DELETED", user_id=user_id, goal_id=goal_id)
