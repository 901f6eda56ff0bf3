from typing import Any

from app.models import User, UserCreate, UserPatch, user_from_row
from app.repositories.base import Repository


class UserRepository(Repository[User, UserCreate, UserPatch]):
    table = "users"
    entity = "User"
    columns = ("name", "email")

    def from_row(self, row: dict[str, Any]) -> User:
        return user_from_row(row)
