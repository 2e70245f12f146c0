from sqlalchemy.orm import Session
from typing import Optional

from app.core.exceptions import ValidationError
from app.core.security import get_password_hash, verify_password
from app.models.user import User
from app.schemas.user import UserCreate
from app.services.base import BaseService
from app.utils.audit import audit


class UserService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.lower()).first()

    def create_user(self, user_create: UserCreate) -> User:
        if self.get_user_by_email(user_create.email):
            raise ValidationError("Email already registered")

        db_user = User(
            name=user_create.name,
            email=user_create.email.lower(),
            password_hash=get_password_hash(user_create.password),
            is_active=True,
        )
        self.db.add(db_user)
        self._commit("register user")
        self.db.refresh(db_user)
        audit("USER_REGISTERED", email=db_user.email, user_id=db_user.id)
        return db_user

    def authenticate_user(self, email: str, password: str) -> Optional[User]:
        user = self.get_user_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            audit("LOGIN", email=email, result="failed")
            return None
        audit("LOGIN", email=email, user_id=user.id, result="ok")
        return user
