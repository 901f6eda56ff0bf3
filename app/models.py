"""
Records stored in the ``users`` and ``products`` tables.

Plain dataclasses plus hand-written row/JSON mapping functions. Patch types
carry each updatable field in a presence wrapper: ``UNSET`` means "leave the
stored value alone", anything else is the new value.
"""

from dataclasses import dataclass, fields
from typing import Any, Final, TypeVar, Union


class _Unset:
    """Marker for a field that was not sent. Falsy, compares only to itself."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()

T = TypeVar("T")
Maybe = Union[T, _Unset]


def is_set(value: Any) -> bool:
    return value is not UNSET


def present_fields(patch: Any) -> dict[str, Any]:
    """Column -> value for every field of *patch* that is not UNSET, in declaration order."""
    return {
        f.name: getattr(patch, f.name)
        for f in fields(patch)
        if is_set(getattr(patch, f.name))
    }


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class UserCreate:
    name: str
    email: str


@dataclass(frozen=True)
class UserPatch:
    name: Maybe[str] = UNSET
    email: Maybe[str] = UNSET


def user_from_row(row: dict[str, Any]) -> User:
    return User(id=int(row["id"]), name=row["name"], email=row["email"])


def user_to_dict(user: User) -> dict[str, Any]:
    return {"id": user.id, "name": user.name, "email": user.email}


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    price: float


@dataclass(frozen=True)
class ProductCreate:
    name: str
    description: str
    price: float


@dataclass(frozen=True)
class ProductPatch:
    name: Maybe[str] = UNSET
    description: Maybe[str] = UNSET
    price: Maybe[float] = UNSET


def product_from_row(row: dict[str, Any]) -> Product:
    # price is DOUBLE PRECISION; float() also normalises ints from the driver
    return Product(
        id=int(row["id"]),
        name=row["name"],
        description=row["description"],
        price=float(row["price"]),
    )


def product_to_dict(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
    }
