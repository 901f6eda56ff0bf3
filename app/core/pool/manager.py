"""
Bounded connection pool (psycopg_pool) with a short acquire timeout.

When every connection is busy a caller waits at most ``DB_POOL_TIMEOUT``
seconds, then fails with StorageError. There is no queueing beyond that and no
reconnect/backoff logic beyond what psycopg_pool does by default.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from app.core.config import Settings
from app.core.errors import StorageError

_log = logging.getLogger(__name__)


class PoolManager:
    """Owns the process-wide pool; repositories borrow connections from it."""

    def __init__(self, settings: Settings, pool: Any | None = None) -> None:
        self._settings = settings
        self._max_size = settings.DB_POOL_SIZE
        self._timeout = settings.DB_POOL_TIMEOUT
        if pool is None:
            pool = ConnectionPool(
                conninfo=settings.DB_CONNINFO,
                min_size=1,
                max_size=self._max_size,
                timeout=self._timeout,
                open=False,
                name=settings.APP_NAME,
            )
        self._pool = pool

    @property
    def target(self) -> str:
        """host:port/db, safe to log (no credentials)."""
        s = self._settings
        return f"{s.DB_HOST}:{s.DB_PORT}/{s.DB_NAME}"

    def open(self) -> None:
        """
        Open the pool and wait for the first connection.

        Raises psycopg_pool.PoolTimeout (or another psycopg error) if the
        database is unreachable; the pool is closed first. Callers treat the
        error as fatal.
        """
        _log.info("Connecting to database at %s", self.target)
        try:
            self._pool.open(wait=True, timeout=self._timeout)
        except Exception:
            # stop the pool workers still retrying in the background
            self._pool.close()
            raise
        _log.info(
            "Database connection pool created (max_size=%s, timeout=%ss)",
            self._max_size,
            self._timeout,
        )

    def close(self) -> None:
        self._pool.close()
        _log.info("Database connection pool closed")

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """
        Borrow a connection for one unit of work.

        Commits when the block exits cleanly, rolls back otherwise, then
        returns the connection to the pool. Store and pool failures surface as
        StorageError.
        """
        try:
            with self._pool.connection() as conn:
                yield conn
        except psycopg.Error as e:
            raise StorageError(str(e) or type(e).__name__) from e

    def stats(self) -> dict[str, int]:
        """Return pool statistics for monitoring."""
        raw = self._pool.get_stats()
        return {
            "pool_size": raw.get("pool_size", 0),
            "pool_available": raw.get("pool_available", 0),
            "requests_waiting": raw.get("requests_waiting", 0),
        }
