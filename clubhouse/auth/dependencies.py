"""
Auth Dependencies

Bearer token extraction for the routers, and the identity/role checks
the services run before touching a repository.
"""

from typing import Iterable

from fastapi import Request
from loguru import logger

from clubhouse.errors import AuthenticationError, PermissionDeniedError
from .models import Identity, Role
from .security import decode_access_token


def get_bearer_token(request: Request) -> str:
    """Extract the token from the `Authorization: Bearer` header"""
    auth_header = request.headers.get("Authorization", "")
    token = auth_header[7:].strip() if auth_header.startswith("Bearer ") else ""
    if not token:
        raise AuthenticationError("Authorization token is missing")
    return token


def get_current_identity(request: Request) -> Identity:
    """Decode the caller identity from the bearer token"""
    return decode_access_token(get_bearer_token(request))


def ensure_authenticated(identity: Identity) -> None:
    if identity is None or not identity.email:
        raise AuthenticationError("Authentication token not found")


def ensure_role(identity: Identity, allowed: Iterable[Role], message: str) -> None:
    """Raise PermissionDeniedError unless the identity holds one of `allowed`"""
    if identity is None or identity.role not in set(allowed):
        logger.warning(
            f"Permission denied for {getattr(identity, 'email', None)} "
            f"(role={getattr(identity, 'role', None)}): {message}"
        )
        raise PermissionDeniedError(message)


ADMIN_ONLY = (Role.ADMIN,)
STAFF = (Role.ADMIN, Role.COACH)
