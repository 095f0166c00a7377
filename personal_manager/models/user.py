from pydantic import BaseModel, Field, field_validator
from typing import Optional
import re

from personal_manager.auth.security import PASSWORD_TOO_LONG, password_too_long
from personal_manager.models.base import APIModel, UtcDatetime


# ===== USER PYDANTIC MODELS =====

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'


def normalize_email(v: str) -> str:
    return v.strip().lower()


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, description="Password (minimum 8 characters)")

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = normalize_email(v)
        if not re.match(EMAIL_PATTERN, v):
            raise ValueError('Invalid email format')
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Name must not be blank')
        return v

    @field_validator('password')
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        if password_too_long(v):
            raise ValueError(PASSWORD_TOO_LONG)
        return v


class UserLogin(BaseModel):
    email: str = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")

    @field_validator('email')
    @classmethod
    def validate_login_identifier(cls, v: str) -> str:
        return normalize_email(v)


class UserSignin(UserLogin):
    """Login when the email is known, otherwise register; name is only needed for registration"""
    name: Optional[str] = Field(None, max_length=255)

    def to_create(self) -> UserCreate:
        return UserCreate(name=self.name or "", email=self.email, password=self.password)


class UserResponse(APIModel):
    """User data returned to client - no sensitive info"""
    id: str
    name: str
    email: str
    created_at: UtcDatetime
    updated_at: UtcDatetime


class AuthResponse(BaseModel):
    token: str
    user: UserResponse
