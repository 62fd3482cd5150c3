from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from app.core.enums import UserRole


class RegisterIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole
    created_at: Optional[datetime] = None


class AuthOut(BaseModel):
    message: str
    token: str
    user: UserOut
