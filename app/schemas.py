"""
Pydantic schemas for the /users and /products APIs.

Request bodies are converted to the records in app.models by the explicit
``*_from_body`` functions below; responses are built with ``*_to_dict``.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from app.models import (
    UNSET,
    Maybe,
    ProductCreate,
    ProductPatch,
    T,
    UserCreate,
    UserPatch,
)

# JSON allows 1e400 (inf) and NaN through json.loads; neither round-trips
FinitePrice = Annotated[float, Field(allow_inf_nan=False)]


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


class UserIn(BaseModel):
    """Body for POST /users."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "John Doe", "email": "john@example.com"}}
    )

    name: str
    email: str


class UserUpdateIn(BaseModel):
    """
    Body for PUT /users/{id}; send only the fields to change. A field that is
    omitted or null keeps its stored value.
    """

    name: str | None = None
    email: str | None = None


class UserPublic(BaseModel):
    id: int
    name: str
    email: str


def user_create_from_body(body: UserIn) -> UserCreate:
    return UserCreate(name=body.name, email=body.email)


def _or_unset(value: T | None) -> Maybe[T]:
    # No column is nullable, so null means the same as an omitted field
    return UNSET if value is None else value


def user_patch_from_body(body: UserUpdateIn) -> UserPatch:
    return UserPatch(name=_or_unset(body.name), email=_or_unset(body.email))


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


class ProductIn(BaseModel):
    """Body for POST /products."""

    name: str
    description: str
    price: FinitePrice


class ProductUpdateIn(BaseModel):
    """Body for PUT /products/{id}; omitted or null fields keep their value."""

    name: str | None = None
    description: str | None = None
    price: FinitePrice | None = None


class ProductPublic(BaseModel):
    id: int
    name: str
    description: str
    price: float


def product_create_from_body(body: ProductIn) -> ProductCreate:
    return ProductCreate(name=body.name, description=body.description, price=body.price)


def product_patch_from_body(body: ProductUpdateIn) -> ProductPatch:
    return ProductPatch(
        name=_or_unset(body.name),
        description=_or_unset(body.description),
        price=_or_unset(body.price),
    )


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthOut(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
