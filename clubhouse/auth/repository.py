"""User repository"""
from typing import List, Optional

from sqlalchemy import select

from clubhouse.database.repository import BaseRepository
from clubhouse.database.tables import UserTable
from .models import Role, User


class UserRepository(BaseRepository):

    def get_all_users(self) -> List[User]:
        rows = self.db.scalars(select(UserTable).order_by(UserTable.id)).all()
        return [User.model_validate(row) for row in rows]

    def find_user_by_email(self, email: str) -> Optional[User]:
        row = self.db.scalars(
            select(UserTable).where(UserTable.email == email).limit(1)
        ).first()
        return User.model_validate(row) if row else None

    def create_user(self, email: str, password_hash: str, role: Role) -> User:
        row = UserTable(email=email, password=password_hash, role=Role(role).value)
        self.db.add(row)
        self._commit()
        return User.model_validate(row)
