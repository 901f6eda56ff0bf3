from .base import Repository
from .products import ProductRepository
from .users import UserRepository

__all__ = ["Repository", "ProductRepository", "UserRepository"]
