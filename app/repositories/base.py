"""
Generic CRUD repository over one table with a generated integer ``id``.

Every statement is parameterized; table and column names come from class
attributes, never from the request. Storage failures surface as StorageError,
missing rows as NotFoundError.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import astuple
from typing import Any, ClassVar, Generic, TypeVar

from app.core.errors import NotFoundError, StorageError
from app.core.pool import PoolManager, cursor_to_dicts, execute
from app.models import present_fields

_log = logging.getLogger(__name__)

R = TypeVar("R")  # record read back from the table
C = TypeVar("C")  # create payload, fields in `columns` order
P = TypeVar("P")  # patch payload, fields wrapped in UNSET-or-value


class Repository(ABC, Generic[R, C, P]):
    table: ClassVar[str]
    entity: ClassVar[str]
    columns: ClassVar[tuple[str, ...]]

    def __init__(self, pool: PoolManager) -> None:
        self._pool = pool

    @abstractmethod
    def from_row(self, row: dict[str, Any]) -> R:
        """Map one result row (column name -> value) to a record."""

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_all(self) -> list[R]:
        """All rows, ascending by id."""
        rows = self._fetch(
            f"{self._select()} ORDER BY id", None, what=f"fetch {self.table}"
        )
        return [self.from_row(r) for r in rows]

    def get_by_id(self, id: int) -> R:
        rows = self._fetch(
            f"{self._select()} WHERE id = %s",
            (id,),
            what=f"fetch {self.entity.lower()} {id}",
        )
        if not rows:
            _log.warning("%s %s not found", self.entity, id)
            raise NotFoundError(self.entity, id)
        return self.from_row(rows[0])

    def create(self, data: C) -> R:
        placeholders = ", ".join(["%s"] * len(self.columns))
        rows = self._fetch(
            f"INSERT INTO {self.table} ({', '.join(self.columns)}) "
            f"VALUES ({placeholders}) RETURNING {self._returning()}",
            astuple(data),
            what=f"create {self.entity.lower()}",
        )
        record = self.from_row(rows[0])
        _log.info("Created %s with id %s", self.entity.lower(), rows[0]["id"])
        return record

    def update(self, id: int, patch: P) -> R:
        """
        Overwrite only the fields present in *patch*; the rest keep their
        stored values. Done in one UPDATE so a concurrent writer cannot slip
        between read and write. An empty patch is a plain read.
        """
        changes = present_fields(patch)
        unknown = set(changes) - set(self.columns)
        if unknown:
            raise ValueError(f"Unknown {self.table} columns: {sorted(unknown)}")
        if not changes:
            return self.get_by_id(id)

        assignments = ", ".join(f"{col} = %s" for col in changes)
        rows = self._fetch(
            f"UPDATE {self.table} SET {assignments} WHERE id = %s "
            f"RETURNING {self._returning()}",
            (*changes.values(), id),
            what=f"update {self.entity.lower()} {id}",
        )
        if not rows:
            _log.warning("%s %s not found", self.entity, id)
            raise NotFoundError(self.entity, id)
        _log.info("Updated %s %s", self.entity.lower(), id)
        return self.from_row(rows[0])

    def delete(self, id: int) -> None:
        what = f"delete {self.entity.lower()} {id}"
        try:
            with self._pool.connection() as conn:
                cur = execute(conn, f"DELETE FROM {self.table} WHERE id = %s", (id,))
                try:
                    affected = cur.rowcount
                finally:
                    cur.close()
        except StorageError as e:
            _log.error("Failed to %s: %s", what, e)
            raise
        if affected == 0:
            _log.warning("%s %s not found for deletion", self.entity, id)
            raise NotFoundError(self.entity, id)
        _log.info("Deleted %s %s", self.entity.lower(), id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _returning(self) -> str:
        return ", ".join(("id", *self.columns))

    def _select(self) -> str:
        return f"SELECT {self._returning()} FROM {self.table}"

    def _fetch(
        self, sql: str, params: Sequence[Any] | None, *, what: str
    ) -> list[dict[str, Any]]:
        try:
            with self._pool.connection() as conn:
                cur = execute(conn, sql, params)
                try:
                    return cursor_to_dicts(cur)
                finally:
                    cur.close()
        except StorageError as e:
            _log.error("Failed to %s: %s", what, e)
            raise
