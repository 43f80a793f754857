"""
Auth Models - users, roles and token identity
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

MAX_PASSWORD_BYTES = 72


class Role(str, Enum):
    """User roles used for permission checks"""
    ADMIN = "Admin"
    COACH = "Coach"
    PLAYER = "Player"
    USER = "User"


# =============================================
# Request Models
# =============================================

class UserInput(BaseModel):
    """
    Signup request

    Signup is open and the caller picks the role, Admin included.
    """
    email: EmailStr
    password: str
    role: Role = Role.USER

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if not v or not v.strip():
            raise ValueError("Password is required")
        # bcrypt only reads the first 72 bytes
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginInput(BaseModel):
    """Login request"""
    email: str
    password: str


# =============================================
# Response Models
# =============================================

class User(BaseModel):
    """Stored user; the password hash is never serialized"""
    id: int
    email: str
    password: str = Field(default="", exclude=True, repr=False)
    role: Role

    model_config = ConfigDict(from_attributes=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if not v or not v.strip():
            raise ValueError("Email is required")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if not v:
            raise ValueError("Password is required")
        return v


class TokenResponse(BaseModel):
    """Login response"""
    message: str = "User authenticated"
    token: str
    email: str
    role: Role


# =============================================
# Token Models
# =============================================

class Identity(BaseModel):
    """Caller identity decoded from a bearer token"""
    email: str = ""
    role: Optional[Role] = None

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def is_staff(self) -> bool:
        """Admin or coach"""
        return self.role in (Role.ADMIN, Role.COACH)
