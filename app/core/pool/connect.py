"""
DB-API helpers shared by the repositories.

Work with any DB-API connection that uses ``%s`` placeholders (psycopg in
production).
"""

from collections.abc import Sequence
from typing import Any


def execute(conn: Any, sql: str, params: Sequence[Any] | None = None) -> Any:
    """
    Execute one parameterized statement and return the cursor.
    Caller uses cursor_to_dicts(cursor) or cursor.rowcount, then closes it.
    """
    cur = conn.cursor()
    if params is not None:
        cur.execute(sql, tuple(params))
    else:
        cur.execute(sql)
    return cur


def cursor_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor result to list of dicts keyed by column name."""
    desc = cursor.description
    if not desc:
        return []
    names = [d[0] for d in desc]
    return [dict(zip(names, row, strict=True)) for row in cursor.fetchall()]
