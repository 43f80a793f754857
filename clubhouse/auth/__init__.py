"""
Auth Module - users, JWT and role checks
"""
from .router import router as auth_router
from .models import (
    Identity,
    LoginInput,
    Role,
    TokenResponse,
    User,
    UserInput,
)
from .dependencies import ensure_authenticated, ensure_role, get_current_identity

__all__ = [
    "auth_router",
    "Identity",
    "LoginInput",
    "Role",
    "TokenResponse",
    "User",
    "UserInput",
    "ensure_authenticated",
    "ensure_role",
    "get_current_identity",
]
