import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class BaseService:
    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str) -> None:
        """Commit the unit of work; on failure roll back so nothing is partially applied."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise DatabaseError(f"Failed to {action}", details=str(e)) from e
