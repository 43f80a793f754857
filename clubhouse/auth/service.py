"""
User Service - signup and login
"""
from typing import List

from loguru import logger

from clubhouse.errors import AuthenticationError, ClubError
from .models import LoginInput, Role, TokenResponse, User, UserInput
from .repository import UserRepository
from .security import generate_jwt_token, hash_password, verify_password


class UserService:
    """User service"""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def get_all_users(self) -> List[User]:
        return self.repository.get_all_users()

    def create_user(self, user: UserInput) -> User:
        if self.repository.find_user_by_email(user.email):
            raise ClubError(f"User with email {user.email} already exists")

        result = self.repository.create_user(user.email, hash_password(user.password), user.role)
        logger.info(f"User {result.id} signed up: {result.email} ({result.role.value})")
        return result

    def authenticate(self, credentials: LoginInput) -> TokenResponse:
        """Check the password and issue a token carrying email and role"""
        user = self.repository.find_user_by_email(credentials.email)
        if not user:
            raise AuthenticationError("User not found.")

        if not verify_password(credentials.password, user.password):
            logger.warning(f"Failed login for {credentials.email}")
            raise AuthenticationError("Incorrect password.")

        token = generate_jwt_token(user.email, user.role)
        return TokenResponse(token=token, email=user.email, role=user.role)

    def ensure_admin(self, email: str, password: str) -> None:
        """Create the bootstrap admin account if it does not exist yet"""
        if self.repository.find_user_by_email(email):
            return
        self.repository.create_user(email, hash_password(password), Role.ADMIN)
        logger.info(f"Bootstrap admin created: {email}")
