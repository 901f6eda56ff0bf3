from typing import Annotated

from fastapi import Depends, Request

from app.core.pool import PoolManager
from app.repositories import ProductRepository, UserRepository


def get_pool(request: Request) -> PoolManager:
    """The pool opened in the app lifespan; one per process."""
    return request.app.state.pool


PoolDep = Annotated[PoolManager, Depends(get_pool)]


def get_user_repository(pool: PoolDep) -> UserRepository:
    return UserRepository(pool)


def get_product_repository(pool: PoolDep) -> ProductRepository:
    return ProductRepository(pool)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
ProductRepoDep = Annotated[ProductRepository, Depends(get_product_repository)]
