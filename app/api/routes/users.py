"""
User CRUD: list, get, create, update (partial), delete.

Repository errors (NotFoundError, StorageError) propagate to the exception
handlers in app.main.
"""

from typing import Any

from fastapi import APIRouter, Response

from app.api.deps import UserRepoDep
from app.models import user_to_dict
from app.schemas import (
    UserIn,
    UserPublic,
    UserUpdateIn,
    user_create_from_body,
    user_patch_from_body,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserPublic])
def list_users(repo: UserRepoDep) -> Any:
    """List all users, ascending by id."""
    return [user_to_dict(u) for u in repo.list_all()]


@router.get("/{id}", response_model=UserPublic)
def get_user(repo: UserRepoDep, id: int) -> Any:
    return user_to_dict(repo.get_by_id(id))


@router.post("", response_model=UserPublic, status_code=201)
def create_user(repo: UserRepoDep, body: UserIn) -> Any:
    return user_to_dict(repo.create(user_create_from_body(body)))


@router.put("/{id}", response_model=UserPublic)
def update_user(repo: UserRepoDep, id: int, body: UserUpdateIn) -> Any:
    """Update a user. Omitted fields keep their current value."""
    return user_to_dict(repo.update(id, user_patch_from_body(body)))


@router.delete("/{id}", status_code=204)
def delete_user(repo: UserRepoDep, id: int) -> Response:
    repo.delete(id)
    return Response(status_code=204)
