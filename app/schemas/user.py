from pydantic import EmailStr, field_validator
from typing import Optional
from datetime import datetime
import uuid

from app.schemas.base import ApiModel, require_text

MIN_PASSWORD_LENGTH = 6


class UserBase(ApiModel):
    email: EmailStr


class UserCreate(UserBase):
    name: str
    password: str

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v):
        return require_text(v, "Name is required")

    @field_validator("password")
    @classmethod
    def password_length(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v


class UserLogin(ApiModel):
    email: EmailStr
    password: str


class UserProfile(UserBase):
    id: uuid.UUID
    name: str
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class Token(ApiModel):
    access_token: str
    token_type: str = "bearer"
