"""
Auth Router - signup, login and user listing
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from clubhouse.database import get_db
from .models import LoginInput, TokenResponse, User, UserInput
from .repository import UserRepository
from .service import UserService

router = APIRouter(prefix="/users", tags=["User"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


@router.get("", response_model=List[User])
def get_all_users(service: UserService = Depends(get_user_service)):
    """All registered users (without password hashes)"""
    return service.get_all_users()


@router.post("/signup", response_model=User, status_code=201)
def signup(user: UserInput, service: UserService = Depends(get_user_service)):
    """
    Register a user

    The password is stored as a bcrypt hash. Fails when the email is taken.
    """
    return service.create_user(user)


@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginInput, service: UserService = Depends(get_user_service)):
    """Exchange email and password for a bearer token"""
    return service.authenticate(credentials)
