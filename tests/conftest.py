from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.pool import PoolManager
from app.main import create_app
from app.repositories import ProductRepository, UserRepository
from tests.utils.sqlite_pool import SqlitePool


@pytest.fixture
def test_settings() -> Settings:
    return Settings(ENVIRONMENT="local", SENTRY_DSN=None)


@pytest.fixture
def sqlite_pool() -> Generator[SqlitePool, None, None]:
    pool = SqlitePool()
    yield pool
    pool.close()


@pytest.fixture
def pool(test_settings: Settings, sqlite_pool: SqlitePool) -> PoolManager:
    pm = PoolManager(test_settings, pool=sqlite_pool)
    pm.open()
    return pm


@pytest.fixture
def user_repo(pool: PoolManager) -> UserRepository:
    return UserRepository(pool)


@pytest.fixture
def product_repo(pool: PoolManager) -> ProductRepository:
    return ProductRepository(pool)


@pytest.fixture
def app(test_settings: Settings, sqlite_pool: SqlitePool) -> FastAPI:
    # Schema already exists in the SQLite double; alembic needs PostgreSQL
    return create_app(
        test_settings,
        pool_factory=lambda s: PoolManager(s, pool=sqlite_pool),
        migrate=lambda s: None,
    )


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
