"""Test helpers for User."""

from app.models import User, UserCreate
from app.repositories import UserRepository
from tests.utils.utils import random_email, random_lower_string


def create_random_user(
    repo: UserRepository, *, name: str | None = None, email: str | None = None
) -> User:
    return repo.create(
        UserCreate(name=name or random_lower_string(), email=email or random_email())
    )
