# pawsroam/schemas/user.py
from pydantic import BaseModel, EmailStr
from typing import Optional

from pawsroam.constants.statuses import UserRole, UserStatus


class UserCreate(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    role: str = UserRole.USER
    status: str = UserStatus.ACTIVE
    avatar_url: Optional[str] = None


class UserUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    avatar_url: Optional[str] = None
